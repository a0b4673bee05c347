"""Exception hierarchy for ftllangneg.

The negotiation core never raises for well-formed identifiers; every
error type here belongs to a boundary (string parsing, optional
dependencies, configuration).

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "LangNegError",
    "LocaleParseError",
]


class LangNegError(Exception):
    """Base exception for all ftllangneg errors."""


class LocaleParseError(LangNegError, ValueError):
    """Locale code could not be parsed into a LocaleIdentifier.

    Subclasses ValueError so callers catching the builtin keep working.

    Attributes:
        code: The rejected input, verbatim
        reason: Human-readable reason reported by the parser
    """

    def __init__(self, code: str, reason: str) -> None:
        """Initialize LocaleParseError.

        Args:
            code: The rejected locale code
            reason: Why parsing failed
        """
        super().__init__(f"Invalid locale code {code!r}: {reason}")
        self.code = code
        self.reason = reason
