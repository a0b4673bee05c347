"""Match-level evaluation between a requested and an available locale.

The ladder is evaluated top-down and the first satisfied level wins:

    EXACT                   all subtags equal, variants included
    MAXIMIZED_EXACT         equal after maximizing both sides (needs a maximizer)
    LANGUAGE_SCRIPT_REGION  language, script, region match; variants ignored
    LANGUAGE_SCRIPT         language and script match; region ignored
    LANGUAGE_ONLY           language matches
    NONE

Comparison is asymmetric. The requested identifier is the pattern and the
available identifier is the candidate: an absent requested subtag (or the
wildcard language) matches anything, while an absent available subtag
fails against a concrete requested value.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable

from ftllangneg.enums import MatchLevel
from ftllangneg.identifier import LocaleIdentifier

__all__ = [
    "Maximizer",
    "evaluate_match",
    "maximized_equal",
]

type Maximizer = Callable[[LocaleIdentifier], LocaleIdentifier]
"""Capability filling in likely script/region subtags of an identifier.

Must return an identifier with the same language and variants; returning
the input unchanged means "no data for this identifier".
"""


def _subtag_matches(requested: str | None, available: str | None) -> bool:
    """Don't-care rule: an unspecified requested subtag matches any value."""
    return requested is None or requested == available


def _language_matches(requested: LocaleIdentifier, available: LocaleIdentifier) -> bool:
    return requested.is_wildcard or requested.language == available.language


def maximized_equal(
    requested: LocaleIdentifier,
    available: LocaleIdentifier,
    maximize: Maximizer,
) -> bool:
    """Compare language, script and region after maximizing both sides.

    Wildcard identifiers are never maximized: likely-subtags data for
    ``und`` names a concrete default language, which would turn a
    don't-care pattern into a specific one. When neither side gains a
    subtag the maximizer had no data, and the pair is left to the plain
    rungs.
    """
    if requested.is_wildcard or available.is_wildcard:
        return False
    max_req = maximize(requested)
    max_av = maximize(available)
    if max_req == requested and max_av == available:
        return False
    return (
        max_req.language == max_av.language
        and max_req.script == max_av.script
        and max_req.region == max_av.region
    )


def evaluate_match(
    requested: LocaleIdentifier,
    available: LocaleIdentifier,
    maximize: Maximizer | None = None,
) -> MatchLevel:
    """Compute the highest match level an (requested, available) pair satisfies.

    Total for any pair of LocaleIdentifier values. Without a maximizer the
    MAXIMIZED_EXACT rung is skipped; with one, the result is never lower
    than without it, because that rung sits above every level reachable
    from un-maximized data except EXACT.

    Args:
        requested: Pattern identifier (what the client asked for)
        available: Candidate identifier (what the application can serve)
        maximize: Optional likely-subtags capability

    Returns:
        The first satisfied MatchLevel, MatchLevel.NONE if none is

    Example:
        >>> evaluate_match(LocaleIdentifier("fr", region="FR"), LocaleIdentifier("fr"))
        <MatchLevel.LANGUAGE_SCRIPT: 2>
        >>> evaluate_match(LocaleIdentifier("zh", "Hant"), LocaleIdentifier("zh", "Hans"))
        <MatchLevel.LANGUAGE_ONLY: 1>
    """
    if requested == available:
        return MatchLevel.EXACT

    if maximize is not None and maximized_equal(requested, available, maximize):
        return MatchLevel.MAXIMIZED_EXACT

    if not _language_matches(requested, available):
        return MatchLevel.NONE
    if not _subtag_matches(requested.script, available.script):
        return MatchLevel.LANGUAGE_ONLY
    if not _subtag_matches(requested.region, available.region):
        return MatchLevel.LANGUAGE_SCRIPT
    return MatchLevel.LANGUAGE_SCRIPT_REGION
