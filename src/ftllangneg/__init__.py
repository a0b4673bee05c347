"""ftllangneg - Language and locale negotiation for Fluent localization stacks.

Given a prioritized list of requested locales and the locales an application
actually ships, decides which available locales satisfy the request and in
what order. No linguistic database is required; CLDR likely-subtags data
(via Babel) is an opt-in refinement.

Public API:
    negotiate_languages - Negotiate over parsed LocaleIdentifier lists
    filter_matches - Negotiation without default injection
    evaluate_match - Match level of a single (requested, available) pair
    negotiate_locale_codes - String-level convenience wrapper
    LocaleIdentifier - Parsed language/script/region/variants value
    NegotiationStrategy - FILTERING, MATCHING, LOOKUP
    MatchLevel - EXACT > MAXIMIZED_EXACT > ... > NONE
    NegotiationConfig - Likely-subtags feature toggle

Boundary helpers:
    parse_locale_identifier - Strict string parsing (Babel)
    convert_strs_to_identifiers_lossy - Parse and drop invalid codes
    parse_accepted_languages - Split an Accept-Language header
    get_system_locales - Requested locales from the environment

Exceptions:
    LangNegError - Base exception class
    LocaleParseError - Malformed locale code
    BabelImportError - Babel-backed feature used without Babel

Submodules:
    ftllangneg.likely_subtags - CLDR likely-subtags maximizer
    ftllangneg.core.babel_compat - Optional Babel dependency handling
"""

from .config import NegotiationConfig
from .core.babel_compat import BabelImportError
from .enums import MatchLevel, NegotiationStrategy
from .errors import LangNegError, LocaleParseError
from .identifier import LocaleIdentifier
from .locale_utils import (
    convert_strs_to_identifiers_lossy,
    get_system_locales,
    negotiate_locale_codes,
    parse_accepted_languages,
    parse_locale_identifier,
)
from .negotiation import Maximizer, evaluate_match, filter_matches, negotiate_languages

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("ftllangneg")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BabelImportError",
    "LangNegError",
    "LocaleIdentifier",
    "LocaleParseError",
    "MatchLevel",
    "Maximizer",
    "NegotiationConfig",
    "NegotiationStrategy",
    "__version__",
    "convert_strs_to_identifiers_lossy",
    "evaluate_match",
    "filter_matches",
    "get_system_locales",
    "negotiate_languages",
    "negotiate_locale_codes",
    "parse_accepted_languages",
    "parse_locale_identifier",
]
