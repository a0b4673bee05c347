"""Negotiation strategies and result assembly.

Drives the match-level evaluator over the requested and available lists:

- LOOKUP: single result. The first requested locale with any
  language-level match yields its first matching available locale.
- FILTERING: every available locale matching any requested locale at
  language level, grouped by requested priority.
- MATCHING: like FILTERING, but per requested locale only script-level
  (or better) matches are taken when at least one exists; language-only
  matches are the per-request fallback.

Result entries are the objects from ``available`` themselves (identity is
preserved), ordered by requested priority and then available-list order,
with no two equal entries.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ftllangneg.enums import MatchLevel, NegotiationStrategy
from ftllangneg.identifier import LocaleIdentifier
from ftllangneg.negotiation.matching import Maximizer, evaluate_match

__all__ = [
    "filter_matches",
    "negotiate_languages",
]

logger = logging.getLogger(__name__)


class _ResultAssembler:
    """Ordered, duplicate-free accumulator for FILTERING and MATCHING.

    Duplicates are detected by value equality; the first-added object wins,
    so earlier priority and earlier available-list position are kept.
    """

    __slots__ = ("_entries", "_seen")

    def __init__(self) -> None:
        self._entries: list[LocaleIdentifier] = []
        self._seen: set[LocaleIdentifier] = set()

    def add(self, locale: LocaleIdentifier) -> bool:
        """Append locale unless an equal one is already collected."""
        if locale in self._seen:
            return False
        self._seen.add(locale)
        self._entries.append(locale)
        return True

    def add_default(self, default: LocaleIdentifier | None) -> None:
        """Append the resolved default once, after all matches."""
        if default is not None:
            self.add(default)

    def result(self) -> list[LocaleIdentifier]:
        return list(self._entries)


def _resolve_default(
    available: Sequence[LocaleIdentifier],
    default: LocaleIdentifier | None,
) -> LocaleIdentifier | None:
    """First entry of available equal to default, None when there is none."""
    if default is None:
        return None
    return next((candidate for candidate in available if candidate == default), None)


def _lookup(
    requested: Sequence[LocaleIdentifier],
    available: Sequence[LocaleIdentifier],
    maximize: Maximizer | None,
) -> LocaleIdentifier | None:
    for req in requested:
        for candidate in available:
            if evaluate_match(req, candidate, maximize) >= MatchLevel.LANGUAGE_ONLY:
                return candidate
    return None


def _collect(
    requested: Sequence[LocaleIdentifier],
    available: Sequence[LocaleIdentifier],
    maximize: Maximizer | None,
    assembler: _ResultAssembler,
    *,
    prefer_script: bool,
) -> None:
    for req in requested:
        levels = [evaluate_match(req, candidate, maximize) for candidate in available]

        threshold = MatchLevel.LANGUAGE_ONLY
        # Degradation is per requested locale: language-only matches count
        # only when this request has no script-level match at all.
        if prefer_script and any(level >= MatchLevel.LANGUAGE_SCRIPT for level in levels):
            threshold = MatchLevel.LANGUAGE_SCRIPT

        for candidate, level in zip(available, levels, strict=True):
            if level >= threshold:
                assembler.add(candidate)


def filter_matches(
    requested: Sequence[LocaleIdentifier],
    available: Sequence[LocaleIdentifier],
    strategy: NegotiationStrategy,
    *,
    maximize: Maximizer | None = None,
) -> list[LocaleIdentifier]:
    """Select available locales satisfying the requested ones, without a default.

    Args:
        requested: Requested locales, highest priority first
        available: Locales the application can serve
        strategy: Negotiation strategy
        maximize: Optional likely-subtags capability

    Returns:
        Entries of ``available`` in negotiated order. LOOKUP returns at
        most one entry.
    """
    return _dispatch(requested, available, NegotiationStrategy(strategy), maximize, None)


def _dispatch(
    requested: Sequence[LocaleIdentifier],
    available: Sequence[LocaleIdentifier],
    strategy: NegotiationStrategy,
    maximize: Maximizer | None,
    default: LocaleIdentifier | None,
) -> list[LocaleIdentifier]:
    match strategy:
        case NegotiationStrategy.LOOKUP:
            found = _lookup(requested, available, maximize)
            if found is None:
                found = _resolve_default(available, default)
            return [] if found is None else [found]
        case NegotiationStrategy.FILTERING | NegotiationStrategy.MATCHING:
            assembler = _ResultAssembler()
            _collect(
                requested,
                available,
                maximize,
                assembler,
                prefer_script=strategy is NegotiationStrategy.MATCHING,
            )
            assembler.add_default(_resolve_default(available, default))
            return assembler.result()


def negotiate_languages(
    requested: Sequence[LocaleIdentifier],
    available: Sequence[LocaleIdentifier],
    default: LocaleIdentifier | None = None,
    strategy: NegotiationStrategy = NegotiationStrategy.FILTERING,
    *,
    maximize: Maximizer | None = None,
) -> list[LocaleIdentifier]:
    """Negotiate which available locales satisfy the requested ones.

    Pure and total: never raises for LocaleIdentifier inputs, including
    empty lists. Inputs are only read.

    Default handling: the default is resolved to the first entry of
    ``available`` equal to it; a default absent from ``available``
    produces no entry.
        - LOOKUP: the resolved default when nothing matched, else the
          single match.
        - FILTERING / MATCHING: resolved default appended last unless an
          equal entry was already selected.

    Args:
        requested: Requested locales, highest priority first
        available: Locales the application can serve; order breaks ties
        default: Last-resort fallback locale
        strategy: Negotiation strategy (default: FILTERING)
        maximize: Optional likely-subtags capability, see
            ftllangneg.likely_subtags.LikelySubtagsExpander

    Returns:
        New list of references into ``available``.

    Example:
        >>> from ftllangneg.locale_utils import convert_strs_to_identifiers_lossy
        >>> requested = convert_strs_to_identifiers_lossy(["de-DE", "fr-FR", "en-US"])
        >>> available = convert_strs_to_identifiers_lossy(["it", "fr", "de-AT", "fr-CA", "en-US"])
        >>> [str(x) for x in negotiate_languages(requested, available, available[-1])]
        ['de-AT', 'fr', 'fr-CA', 'en-US']
    """
    strategy = NegotiationStrategy(strategy)
    supported = _dispatch(requested, available, strategy, maximize, default)
    logger.debug(
        "Negotiated %d locale(s) from %d requested / %d available (strategy=%s, maximize=%s)",
        len(supported),
        len(requested),
        len(available),
        strategy,
        maximize is not None,
    )
    return supported
