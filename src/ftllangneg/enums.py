"""Enumerations for ftllangneg type-safe constants.

NegotiationStrategy uses StrEnum (Python 3.11+) for automatic string
conversion. MatchLevel uses IntEnum so levels compare with the ordinary
ordering operators.

Python 3.13+.
"""

from enum import IntEnum, StrEnum


class NegotiationStrategy(StrEnum):
    """Policy controlling how many and which available locales are returned.

    StrEnum provides automatic string conversion: str(NegotiationStrategy.LOOKUP) == "lookup"
    """

    FILTERING = "filtering"
    """Broad union: every available locale sharing a language with any request."""

    MATCHING = "matching"
    """Precision-preferring: per request, script-level matches first, language-only as fallback."""

    LOOKUP = "lookup"
    """Single best: the first available match for the highest-priority request that has one."""


class MatchLevel(IntEnum):
    """How closely an available locale satisfies a requested one.

    Totally ordered by specificity; satisfying a level implies satisfying
    every lower level.
    """

    NONE = 0
    """Languages differ (and the requested language is not the wildcard)."""

    LANGUAGE_ONLY = 1
    """Language equal; script and region ignored."""

    LANGUAGE_SCRIPT = 2
    """Language and script equal; region ignored."""

    LANGUAGE_SCRIPT_REGION = 3
    """Language, script and region equal; variants ignored."""

    MAXIMIZED_EXACT = 4
    """Equal after likely-subtags maximization of both sides; variants ignored."""

    EXACT = 5
    """All subtags equal, including the full variant set."""


__all__ = [
    "MatchLevel",
    "NegotiationStrategy",
]
