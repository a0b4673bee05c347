"""Babel compatibility layer for optional dependency handling.

Provides centralized, lazy import infrastructure for Babel to ensure consistent
error messaging and import behavior across all Babel-dependent modules.

Design Rationale:
    ftllangneg supports two installation modes:
    - Core-only: `pip install ftllangneg` (no external dependencies)
    - Full: `pip install ftllangneg[babel]` (string parsing, likely subtags)

    This module ensures that:
    1. The negotiation core never triggers Babel imports
    2. Boundary modules get consistent, helpful error messages when Babel is missing
    3. Babel data is loaded once, on first use

Usage Pattern:
    from ftllangneg.core.babel_compat import get_parse_locale

    def my_function(code: str) -> None:
        parse_locale = get_parse_locale()  # Raises BabelImportError if Babel missing
        ...

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from typing import Protocol

__all__ = [
    "BabelImportError",
    "ParseLocaleProtocol",
    "get_likely_subtags",
    "get_parse_locale",
    "is_babel_available",
    "require_babel",
]


# pylint: disable=unnecessary-ellipsis
# Reason: Ellipsis (...) is the standard Protocol method body per PEP 544
class ParseLocaleProtocol(Protocol):
    """Protocol for babel.core.parse_locale.

    Returns (language, territory, script, variant) and, when a POSIX
    ``@modifier`` is present, a fifth modifier element.
    """

    def __call__(
        self, identifier: str, sep: str = "_"
    ) -> tuple[str, str | None, str | None, str | None] | tuple[
        str, str | None, str | None, str | None, str | None
    ]:
        """Parse a locale identifier into its components."""
        ...
# pylint: enable=unnecessary-ellipsis


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed.

    Provides a consistent, helpful error message directing users to install
    the Babel dependency.
    """

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for CLDR locale data. "
            "Install with: pip install ftllangneg[babel]"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed.

    Uses cached result to avoid repeated import attempts.

    Returns:
        True if Babel is installed and importable, False otherwise.
    """
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Use at the entry point of functions/methods that require Babel.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_parse_locale() -> ParseLocaleProtocol:
    """Get babel.core.parse_locale.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_parse_locale")
    from babel.core import parse_locale  # noqa: PLC0415

    return parse_locale


@lru_cache(maxsize=1)
def get_likely_subtags() -> Mapping[str, str]:
    """Get the CLDR likely-subtags table shipped with Babel.

    Keys and values are POSIX identifiers (``zh_TW`` -> ``zh_Hant_TW``).
    Loaded once; the returned mapping is shared and must not be mutated.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_likely_subtags")
    from babel.core import get_global  # noqa: PLC0415

    return get_global("likely_subtags")
