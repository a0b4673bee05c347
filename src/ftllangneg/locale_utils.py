"""Locale string utilities: the parsing boundary around the negotiation core.

Everything fallible lives here. Strings are parsed with Babel into
LocaleIdentifier values before they reach negotiation; the lossy helpers
drop anything unparseable so the core only ever sees valid identifiers.

Python 3.13+. Parsing functions require Babel.
"""

from __future__ import annotations

import functools
import logging
import os
from collections.abc import Iterable, Mapping, Sequence

from ftllangneg.config import NegotiationConfig
from ftllangneg.constants import (
    BCP47_SEPARATOR,
    POSIX_SEPARATOR,
    PSEUDO_LOCALES,
    SYSTEM_LOCALE_ENV_VARS,
    WILDCARD_LANGUAGE,
)
from ftllangneg.core.babel_compat import get_parse_locale
from ftllangneg.enums import NegotiationStrategy
from ftllangneg.errors import LocaleParseError
from ftllangneg.identifier import LocaleIdentifier
from ftllangneg.negotiation import negotiate_languages

__all__ = [
    "convert_strs_to_identifiers_lossy",
    "get_system_locales",
    "negotiate_locale_codes",
    "normalize_locale",
    "parse_accepted_languages",
    "parse_locale_identifier",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace(BCP47_SEPARATOR, POSIX_SEPARATOR)


@functools.lru_cache(maxsize=256)
def parse_locale_identifier(locale_code: str) -> LocaleIdentifier:
    """Parse a locale code into a LocaleIdentifier.

    Accepts BCP-47 (``sr-Latn-RS``) and POSIX (``sr_Latn_RS.UTF-8@latin``)
    forms; encoding and modifier suffixes are discarded. A leading ``*``
    is read as the wildcard language. At most one variant is supported,
    as in Babel.

    Cached: equal codes return the same (immutable) object.

    Args:
        locale_code: Locale code string

    Returns:
        Parsed identifier

    Raises:
        LocaleParseError: If the code is empty or malformed
        BabelImportError: If Babel is not installed

    Example:
        >>> parse_locale_identifier("zh-hant-tw")
        LocaleIdentifier(language='zh', script='Hant', region='TW', variants=())
    """
    stripped = locale_code.strip()
    if not stripped:
        raise LocaleParseError(locale_code, "empty locale code")

    normalized = normalize_locale(stripped)
    head, sep, rest = normalized.partition(POSIX_SEPARATOR)
    if head == "*":
        normalized = WILDCARD_LANGUAGE + sep + rest

    try:
        language, territory, script, variant, *_modifier = get_parse_locale()(normalized)
    except ValueError as e:
        raise LocaleParseError(locale_code, str(e)) from e

    return LocaleIdentifier(language, script, territory, (variant,) if variant else ())


def _parse_or_none(locale_code: str) -> LocaleIdentifier | None:
    try:
        return parse_locale_identifier(locale_code)
    except LocaleParseError as e:
        logger.debug("Dropping unparseable locale code: %s", e)
        return None


def convert_strs_to_identifiers_lossy(locale_codes: Iterable[str]) -> list[LocaleIdentifier]:
    """Parse locale codes, silently dropping the ones that fail.

    Input order is preserved for the codes that parse.

    Example:
        >>> [str(x) for x in convert_strs_to_identifiers_lossy(["en-US", "!!", "fr"])]
        ['en-US', 'fr']
    """
    return [
        identifier
        for identifier in map(_parse_or_none, locale_codes)
        if identifier is not None
    ]


def parse_accepted_languages(header: str) -> list[str]:
    """Split an HTTP Accept-Language value into language tags.

    Only the order of entries is used; ``q`` weights and other parameters
    are discarded and empty items skipped.

    Example:
        >>> parse_accepted_languages("de-AT;q=0.9, de-DE;q=0.8, , en-US")
        ['de-AT', 'de-DE', 'en-US']
    """
    tags: list[str] = []
    for item in header.split(","):
        tag = item.split(";", 1)[0].strip()
        if tag:
            tags.append(tag)
    return tags


def _posix_to_bcp47(value: str) -> str | None:
    """Strip ``.encoding`` and ``@modifier``; None for pseudo-locales."""
    code = value.split(".", 1)[0].split("@", 1)[0].strip()
    if not code or code in PSEUDO_LOCALES:
        return None
    return code.replace(POSIX_SEPARATOR, BCP47_SEPARATOR)


def get_system_locales(environ: Mapping[str, str] | None = None) -> list[str]:
    """Detect requested locales from environment variables.

    Detection order:
    1. LANGUAGE (GNU gettext colon-separated priority list)
    2. The first set of LC_ALL, LC_MESSAGES, LANG

    "C" and "POSIX" pseudo-locales and encoding suffixes are dropped;
    duplicates keep their first position.

    Args:
        environ: Mapping to read instead of os.environ (for tests)

    Returns:
        BCP-47 codes in priority order; empty when nothing is set.

    Example:
        >>> get_system_locales({"LANGUAGE": "lv:en_GB", "LANG": "lv_LV.UTF-8"})
        ['lv', 'en-GB', 'lv-LV']
    """
    env = os.environ if environ is None else environ
    candidates: list[str] = env.get("LANGUAGE", "").split(":")
    for var in SYSTEM_LOCALE_ENV_VARS:
        value = env.get(var)
        if value:
            candidates.append(value)
            break

    codes = (_posix_to_bcp47(candidate) for candidate in candidates)
    return list(dict.fromkeys(code for code in codes if code))


def negotiate_locale_codes(
    requested: Iterable[str],
    available: Sequence[str],
    default: str | None = None,
    strategy: NegotiationStrategy = NegotiationStrategy.FILTERING,
    *,
    config: NegotiationConfig | None = None,
) -> list[str]:
    """String-level negotiation for callers holding raw locale codes.

    Parses both lists lossily, negotiates, and maps the result back to the
    caller's own strings from ``available`` (the first spelling wins when
    several codes parse to the same identifier). A default that is
    unparseable or not among ``available`` produces no entry.

    Args:
        requested: Requested locale codes, highest priority first
        available: Locale codes the application can serve
        default: Last-resort fallback code
        strategy: Negotiation strategy (default: FILTERING)
        config: Negotiation settings (default: NegotiationConfig())

    Returns:
        Negotiated codes, spelled as given by the caller

    Example:
        >>> negotiate_locale_codes(
        ...     ["pl", "fr", "en-US"], ["it", "de", "fr", "en-GB", "en_US"], "en-US"
        ... )
        ['fr', 'en-GB', 'en_US']
    """
    config = config or NegotiationConfig()

    spelled: dict[LocaleIdentifier, str] = {}
    available_ids: list[LocaleIdentifier] = []
    for code in available:
        identifier = _parse_or_none(code)
        if identifier is not None:
            available_ids.append(identifier)
            spelled.setdefault(identifier, code)

    default_id = _parse_or_none(default) if default is not None else None

    result = negotiate_languages(
        convert_strs_to_identifiers_lossy(requested),
        available_ids,
        default_id,
        strategy,
        maximize=config.maximizer(),
    )
    return [spelled[identifier] for identifier in result]
