#!/usr/bin/env python3
# FUZZ_PLUGIN_HEADER_START
# FUZZ_PLUGIN: negotiator - Locale Parsing & Negotiation Totality
# Intentional: This header is intentionally placed for dynamic plugin discovery.
# CRITICAL: DO NOT REMOVE THIS HEADER - REQUIRED FOR FUZZ_ATHERIS.SH
# FUZZ_PLUGIN_HEADER_END
"""Locale Negotiator Fuzzer (Atheris).

Targets: ftllangneg.locale_utils parsing boundary and negotiate_languages.
Arbitrary strings go through lossy conversion, then every strategy is
checked for totality, LOOKUP cardinality and duplicate-free output.
"""

from __future__ import annotations

import atexit
import json
import logging
import sys

# --- PEP 695 Type Aliases ---
type FuzzStats = dict[str, int | str]

_fuzz_stats: FuzzStats = {"status": "incomplete", "iterations": 0, "findings": 0}

def _emit_final_report() -> None:
    report = json.dumps(_fuzz_stats)
    print(f"\n[SUMMARY-JSON-BEGIN]{report}[SUMMARY-JSON-END]", file=sys.stderr)

atexit.register(_emit_final_report)

try:
    import atheris
except ImportError:
    sys.exit(1)

logging.getLogger("ftllangneg").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["ftllangneg"]):
    from ftllangneg.enums import NegotiationStrategy
    from ftllangneg.likely_subtags import get_default_expander
    from ftllangneg.locale_utils import convert_strs_to_identifiers_lossy, normalize_locale
    from ftllangneg.negotiation import negotiate_languages

def test_one_input(data: bytes) -> None:
    """Atheris entry point: Test locale parsing and negotiation totality."""
    _fuzz_stats["iterations"] = int(_fuzz_stats["iterations"]) + 1
    _fuzz_stats["status"] = "running"

    fdp = atheris.FuzzedDataProvider(data)

    try:
        # 1. Normalization idempotence
        raw_locale = fdp.ConsumeUnicodeNoSurrogates(30)
        assert normalize_locale(normalize_locale(raw_locale)) == normalize_locale(raw_locale)

        # 2. Lossy conversion never raises
        requested = convert_strs_to_identifiers_lossy(
            fdp.ConsumeUnicodeNoSurrogates(10) for _ in range(fdp.ConsumeIntInRange(0, 4))
        )
        available = convert_strs_to_identifiers_lossy(
            fdp.ConsumeUnicodeNoSurrogates(10) for _ in range(fdp.ConsumeIntInRange(0, 6))
        )
        default = available[0] if available and fdp.ConsumeBool() else None
        maximize = get_default_expander().maximize if fdp.ConsumeBool() else None

        # 3. Negotiation is total and duplicate-free
        for strategy in NegotiationStrategy:
            result = negotiate_languages(
                requested, available, default, strategy, maximize=maximize
            )
            assert len(set(result)) == len(result)
            if strategy is NegotiationStrategy.LOOKUP:
                assert len(result) <= 1

    except Exception:
        _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
        raise

if __name__ == "__main__":
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()
