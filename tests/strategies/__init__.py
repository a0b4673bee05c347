"""Hypothesis strategies for ftllangneg property-based testing.

Usage:
    from tests.strategies import locale_identifiers, locale_lists
"""

from .locales import (
    fake_maximize,
    languages,
    locale_by_shape,
    locale_identifiers,
    locale_lists,
    regions,
    scripts,
    strategies,
    variant_sets,
)

__all__ = [
    "fake_maximize",
    "languages",
    "locale_by_shape",
    "locale_identifiers",
    "locale_lists",
    "regions",
    "scripts",
    "strategies",
    "variant_sets",
]
