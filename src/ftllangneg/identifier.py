"""Structured locale identifier consumed by the negotiation core.

LocaleIdentifier is an already-parsed value: the negotiation core never
builds one from a string. Parsing lives at the boundary in
ftllangneg.locale_utils, which is the only place malformed input can be
reported.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from ftllangneg.constants import (
    BCP47_SEPARATOR,
    POSIX_SEPARATOR,
    WILDCARD_LANGUAGE,
    WILDCARD_MARKERS,
)

__all__ = ["LocaleIdentifier"]


def _require_str(name: str, value: object) -> str:
    if not isinstance(value, str):
        msg = f"{name} must be str, got {type(value).__name__}"
        raise TypeError(msg)
    return value


def _optional_subtag(name: str, value: str | None) -> str | None:
    if value is None:
        return None
    return _require_str(name, value) or None


@dataclass(frozen=True, slots=True)
class LocaleIdentifier:
    """Immutable language/script/region/variants tuple.

    Case is canonicalized at construction so that value equality matches
    BCP-47 case-insensitivity: language lowercase, script title-case,
    region uppercase, variants lowercase. An empty language or ``*`` is
    stored as the wildcard marker ``und``. Variants form a set: duplicates
    are dropped and the rest sorted, so their order never affects equality.

    Attributes:
        language: Language subtag, ``und`` when unspecified
        script: Four-letter script subtag, or None
        region: Region subtag (alpha-2 or UN M.49 digits), or None
        variants: Variant subtags, sorted

    Example:
        >>> LocaleIdentifier("EN", region="us")
        LocaleIdentifier(language='en', script=None, region='US', variants=())
        >>> str(LocaleIdentifier("sr", "latn", "RS"))
        'sr-Latn-RS'
    """

    language: str
    script: str | None = None
    region: str | None = None
    variants: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Canonicalize subtag case and the wildcard marker.

        Raises:
            TypeError: If a subtag is not a string (or variants not an iterable of strings)
        """
        language = _require_str("language", self.language).lower()
        if language in WILDCARD_MARKERS:
            language = WILDCARD_LANGUAGE
        script = _optional_subtag("script", self.script)
        region = _optional_subtag("region", self.region)
        if isinstance(self.variants, str):
            msg = "variants must be an iterable of str, not a single str"
            raise TypeError(msg)
        variants = tuple(
            sorted({_require_str("variant", v).lower() for v in self.variants if v})
        )

        # Frozen dataclass: bypass __setattr__ for canonicalization
        object.__setattr__(self, "language", language)
        object.__setattr__(self, "script", script.title() if script else None)
        object.__setattr__(self, "region", region.upper() if region else None)
        object.__setattr__(self, "variants", variants)

    @property
    def is_wildcard(self) -> bool:
        """True when the language subtag is unspecified (``und``)."""
        return self.language == WILDCARD_LANGUAGE

    def with_subtags(
        self,
        *,
        script: str | None = None,
        region: str | None = None,
    ) -> LocaleIdentifier:
        """Return a copy with missing script/region filled in.

        Subtags already present on this identifier are kept; only absent
        ones take the supplied values. Language and variants are unchanged.
        """
        return LocaleIdentifier(
            self.language,
            self.script or script,
            self.region or region,
            self.variants,
        )

    def _subtags(self) -> list[str]:
        parts = [self.language]
        if self.script:
            parts.append(self.script)
        if self.region:
            parts.append(self.region)
        parts.extend(self.variants)
        return parts

    def to_tag(self) -> str:
        """Serialize to a BCP-47 language tag (``en-Latn-US``)."""
        return BCP47_SEPARATOR.join(self._subtags())

    def to_posix(self) -> str:
        """Serialize with POSIX/Babel separators (``en_Latn_US``)."""
        return POSIX_SEPARATOR.join(self._subtags())

    def __str__(self) -> str:
        return self.to_tag()
