"""Negotiation configuration.

A single frozen dataclass selects whether the likely-subtags maximize
capability is wired into negotiation. Its absence is a fully supported
configuration: the MAXIMIZED_EXACT rung is then simply skipped.

Python 3.13+.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from ftllangneg.constants import LIKELY_SUBTAGS_ENV_VAR
from ftllangneg.negotiation.matching import Maximizer

__all__ = ["NegotiationConfig"]

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True, slots=True)
class NegotiationConfig:
    """Immutable negotiation settings.

    Attributes:
        likely_subtags: Maximize identifiers with CLDR likely-subtags data
            before falling back to partial matches (default: False).
            Requires Babel.

    Example:
        >>> config = NegotiationConfig(likely_subtags=True)
        >>> config.maximizer() is not None
        True
        >>> NegotiationConfig().maximizer() is None
        True
    """

    likely_subtags: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> NegotiationConfig:
        """Build a config from FTLLANGNEG_LIKELY_SUBTAGS.

        Args:
            environ: Mapping to read instead of os.environ (for tests)
        """
        env = os.environ if environ is None else environ
        raw = env.get(LIKELY_SUBTAGS_ENV_VAR, "")
        return cls(likely_subtags=raw.strip().lower() in _TRUTHY)

    def maximizer(self) -> Maximizer | None:
        """Return the maximize capability this config selects, or None.

        Raises:
            BabelImportError: If likely_subtags is enabled and Babel is missing
        """
        if not self.likely_subtags:
            return None
        # Lazy import: loads CLDR data through Babel
        from ftllangneg.likely_subtags import get_default_expander  # noqa: PLC0415

        return get_default_expander().maximize
