"""Shared constants for ftllangneg.

Placing constants here avoids circular imports between the identifier,
negotiation and locale-utility modules.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Subtags
    "WILDCARD_LANGUAGE",
    "WILDCARD_MARKERS",
    # Separators
    "BCP47_SEPARATOR",
    "POSIX_SEPARATOR",
    # Environment
    "LIKELY_SUBTAGS_ENV_VAR",
    "SYSTEM_LOCALE_ENV_VARS",
    "PSEUDO_LOCALES",
]

# ============================================================================
# SUBTAGS
# ============================================================================

# BCP-47 "undetermined" language. On the requested side it matches any
# available language below the Exact level.
WILDCARD_LANGUAGE: str = "und"

# Raw language values stored as WILDCARD_LANGUAGE at construction time.
WILDCARD_MARKERS: frozenset[str] = frozenset({"", "*", WILDCARD_LANGUAGE})

# ============================================================================
# SEPARATORS
# ============================================================================

BCP47_SEPARATOR: str = "-"
POSIX_SEPARATOR: str = "_"

# ============================================================================
# ENVIRONMENT
# ============================================================================

# Truthy values: 1, true, yes, on (case-insensitive).
LIKELY_SUBTAGS_ENV_VAR: str = "FTLLANGNEG_LIKELY_SUBTAGS"

# Consulted in order after LANGUAGE (a colon-separated priority list).
SYSTEM_LOCALE_ENV_VARS: tuple[str, ...] = ("LC_ALL", "LC_MESSAGES", "LANG")

# Not real locales; never reported as requested locales.
PSEUDO_LOCALES: frozenset[str] = frozenset({"C", "POSIX"})
