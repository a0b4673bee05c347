"""Locale negotiation core.

Pure functions over LocaleIdentifier values: no I/O, no process-wide
state, no third-party imports. The optional maximize capability is
always passed in explicitly.

Python 3.13+. Zero external dependencies.
"""

from .matching import Maximizer, evaluate_match, maximized_equal
from .strategies import filter_matches, negotiate_languages

__all__ = [
    "Maximizer",
    "evaluate_match",
    "filter_matches",
    "maximized_equal",
    "negotiate_languages",
]
