"""Likely-subtags maximization backed by CLDR data from Babel.

Fills in the script and region a partial identifier most likely implies
(``en`` -> ``en-Latn-US``, ``zh-TW`` -> ``zh-Hant-TW``). The negotiation
core never reaches for this table on its own: pass
``get_default_expander().maximize`` (or any other Maximizer) explicitly,
or enable it through NegotiationConfig.

Python 3.13+. Requires Babel.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Mapping

from ftllangneg.core.babel_compat import get_likely_subtags, get_parse_locale
from ftllangneg.identifier import LocaleIdentifier

__all__ = [
    "LikelySubtagsExpander",
    "get_default_expander",
]

logger = logging.getLogger(__name__)


class LikelySubtagsExpander:
    """Maximize LocaleIdentifier values using a likely-subtags table.

    Lookup order follows CLDR: ``lang_Script_REGION``, ``lang_REGION``,
    ``lang_Script``, ``lang``, then ``und_Script``. Only absent script and
    region subtags are filled; language and variants are never changed,
    so the wildcard language is returned as-is.

    Thread-safe: the table is only read.

    Args:
        table: POSIX-keyed mapping (``"zh_TW": "zh_Hant_TW"``). Defaults to
            Babel's CLDR ``likely_subtags`` global.

    Example:
        >>> expander = LikelySubtagsExpander()
        >>> str(expander.maximize(LocaleIdentifier("en")))
        'en-Latn-US'
    """

    __slots__ = ("_table",)

    def __init__(self, table: Mapping[str, str] | None = None) -> None:
        self._table: Mapping[str, str] = get_likely_subtags() if table is None else table

    @staticmethod
    def _candidate_keys(identifier: LocaleIdentifier) -> list[str]:
        lang, script, region = identifier.language, identifier.script, identifier.region
        keys: list[str] = []
        if script and region:
            keys.append(f"{lang}_{script}_{region}")
        if region:
            keys.append(f"{lang}_{region}")
        if script:
            keys.append(f"{lang}_{script}")
        keys.append(lang)
        if script:
            keys.append(f"und_{script}")
        return keys

    def lookup(self, identifier: LocaleIdentifier) -> tuple[str | None, str | None] | None:
        """Return the likely (script, region) for identifier, or None if unknown."""
        for key in self._candidate_keys(identifier):
            value = self._table.get(key)
            if value is not None:
                _language, region, script, *_rest = get_parse_locale()(value)
                return script, region
        return None

    def maximize(self, identifier: LocaleIdentifier) -> LocaleIdentifier:
        """Return identifier with likely script/region filled in.

        Returns the input object itself when it is already fully specified,
        is the wildcard, or has no entry in the table.
        """
        if identifier.is_wildcard or (identifier.script and identifier.region):
            return identifier
        likely = self.lookup(identifier)
        if likely is None:
            logger.debug("No likely subtags for %s", identifier)
            return identifier
        script, region = likely
        return identifier.with_subtags(script=script, region=region)


@functools.lru_cache(maxsize=1)
def get_default_expander() -> LikelySubtagsExpander:
    """Get the shared Babel-backed expander (created on first call).

    Raises:
        BabelImportError: If Babel is not installed
    """
    return LikelySubtagsExpander()
