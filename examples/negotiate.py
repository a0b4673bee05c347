"""Locale Negotiation Example - Picking Resource Bundles.

Demonstrates choosing which translation bundles to load for a user.

Scenarios covered:
1. The three strategies side by side
2. Negotiating from an HTTP Accept-Language header
3. Opting into CLDR likely-subtags data
4. Mapping results back to an application's resource table

Python 3.13+. Requires ftllangneg[babel].
"""

from __future__ import annotations

from ftllangneg import (
    LocaleIdentifier,
    NegotiationConfig,
    NegotiationStrategy,
    convert_strs_to_identifiers_lossy,
    negotiate_languages,
    negotiate_locale_codes,
    parse_accepted_languages,
)


def example_1_strategies() -> None:
    """Example 1: FILTERING vs MATCHING vs LOOKUP on the same input."""
    print("=" * 60)
    print("Example 1: Strategies")
    print("=" * 60)

    requested = ["de-DE", "fr-FR", "en-US"]
    available = ["it", "fr", "de-AT", "fr-CA", "en-US"]
    print(f"\nrequested: {requested}")
    print(f"available: {available}")

    for strategy in NegotiationStrategy:
        result = negotiate_locale_codes(requested, available, "en-US", strategy)
        print(f"  {strategy:<10} -> {result}")


def example_2_accept_language() -> None:
    """Example 2: Request list from an Accept-Language header."""
    print("\n" + "=" * 60)
    print("Example 2: Accept-Language")
    print("=" * 60)

    header = "de-AT;q=0.9, de-DE;q=0.8, de;q=0.7, en-US;q=0.5"
    requested = parse_accepted_languages(header)
    result = negotiate_locale_codes(requested, ["fr", "pl", "de", "en-US"], "en-US")
    print(f"\nheader:    {header}")
    print(f"requested: {requested}")
    print(f"supported: {result}")


def example_3_likely_subtags() -> None:
    """Example 3: zh-Hant only finds zh-TW precisely once CLDR data is enabled."""
    print("\n" + "=" * 60)
    print("Example 3: Likely subtags")
    print("=" * 60)

    requested = ["zh-Hant"]
    available = ["zh-Hans", "zh-TW"]
    for enabled in (False, True):
        config = NegotiationConfig(likely_subtags=enabled)
        result = negotiate_locale_codes(
            requested, available, strategy=NegotiationStrategy.MATCHING, config=config
        )
        print(f"  likely_subtags={enabled!s:<5} -> {result}")


def example_4_resource_table() -> None:
    """Example 4: Results are the caller's own objects, usable as dict keys."""
    print("\n" + "=" * 60)
    print("Example 4: Resource table")
    print("=" * 60)

    bundles: dict[LocaleIdentifier, str] = {
        locale: f"locales/{locale}/main.ftl"
        for locale in convert_strs_to_identifiers_lossy(["en-US", "lv", "lt", "et"])
    }
    requested = convert_strs_to_identifiers_lossy(["lv-LV", "ru", "en-GB"])
    default = next(iter(bundles))

    for locale in negotiate_languages(requested, list(bundles), default):
        print(f"  load {bundles[locale]}")


# Main execution
if __name__ == "__main__":
    example_1_strategies()
    example_2_accept_language()
    example_3_likely_subtags()
    example_4_resource_table()

    print("\n" + "=" * 60)
    print("[SUCCESS] All examples complete!")
    print("=" * 60)
