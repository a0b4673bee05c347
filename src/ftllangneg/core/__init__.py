"""Core utilities shared by the boundary modules.

Exports:
    BabelImportError: Raised when a Babel-backed feature runs without Babel
    is_babel_available: Cached Babel availability check
    require_babel: Fail-fast guard for Babel-backed entry points

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel

__all__ = ["BabelImportError", "is_babel_available", "require_babel"]
