"""Tests for the match-level ladder.

Covers every rung, the asymmetric don't-care rule, wildcard handling and
the maximize capability (fake and CLDR-backed).
"""

import pytest
from hypothesis import event, given

from ftllangneg.enums import MatchLevel
from ftllangneg.identifier import LocaleIdentifier as L
from ftllangneg.negotiation.matching import evaluate_match, maximized_equal
from tests.strategies import fake_maximize, locale_by_shape, locale_identifiers


class TestLadderWithoutMaximize:
    """Each rung reached with plain subtag comparison."""

    @pytest.mark.parametrize(
        ("requested", "available", "expected"),
        [
            (L("en", region="US"), L("en", region="US"), MatchLevel.EXACT),
            (L("ca", variants=("valencia",)), L("ca", variants=("valencia",)), MatchLevel.EXACT),
            (L("en"), L("en", region="GB"), MatchLevel.LANGUAGE_SCRIPT_REGION),
            (L("sr"), L("sr", "Latn"), MatchLevel.LANGUAGE_SCRIPT_REGION),
            (L("sr", "Latn"), L("sr", "Latn", "RS"), MatchLevel.LANGUAGE_SCRIPT_REGION),
            (L("fr", region="FR"), L("fr"), MatchLevel.LANGUAGE_SCRIPT),
            (L("en", region="GB"), L("en", region="AU"), MatchLevel.LANGUAGE_SCRIPT),
            (L("de", region="DE"), L("de", region="AT"), MatchLevel.LANGUAGE_SCRIPT),
            (L("zh", "Hant"), L("zh", "Hans"), MatchLevel.LANGUAGE_ONLY),
            (L("zh", "Hant"), L("zh", region="TW"), MatchLevel.LANGUAGE_ONLY),
            (L("it"), L("fr"), MatchLevel.NONE),
        ],
    )
    def test_rung(self, requested: L, available: L, expected: MatchLevel) -> None:
        assert evaluate_match(requested, available) is expected

    def test_variant_order_is_irrelevant(self) -> None:
        requested = L("de", variants=("1996", "fonipa"))
        assert evaluate_match(requested, L("de", variants=("fonipa", "1996"))) is MatchLevel.EXACT

    def test_variants_ignored_below_exact(self) -> None:
        """Differing variants drop an otherwise equal pair to LANGUAGE_SCRIPT_REGION."""
        requested = L("ja", region="JP", variants=("hepburn",))
        available = L("ja", region="JP", variants=("kunrei",))
        assert evaluate_match(requested, available) is MatchLevel.LANGUAGE_SCRIPT_REGION

    def test_maximized_exact_unreachable_without_capability(self) -> None:
        """The MAXIMIZED_EXACT rung is skipped entirely when no maximizer is given."""
        assert evaluate_match(L("en"), L("en", "Latn", "US")) is MatchLevel.LANGUAGE_SCRIPT_REGION


class TestDirectionality:
    """Requested is the pattern; available is the candidate."""

    def test_absent_requested_region_is_dont_care(self) -> None:
        assert evaluate_match(L("en"), L("en", region="US")) is MatchLevel.LANGUAGE_SCRIPT_REGION

    def test_absent_available_region_fails_concrete_request(self) -> None:
        assert evaluate_match(L("en", region="US"), L("en")) is MatchLevel.LANGUAGE_SCRIPT

    def test_absent_available_script_fails_concrete_request(self) -> None:
        assert evaluate_match(L("sr", "Latn"), L("sr")) is MatchLevel.LANGUAGE_ONLY

    def test_swapping_sides_changes_level(self) -> None:
        a, b = L("fr"), L("fr", region="CA")
        assert evaluate_match(a, b) > evaluate_match(b, a)


class TestWildcard:
    """The und language on the requested side matches every language."""

    def test_wildcard_matches_any_language(self) -> None:
        assert evaluate_match(L("und"), L("ja")) is MatchLevel.LANGUAGE_SCRIPT_REGION

    def test_wildcard_with_concrete_region(self) -> None:
        """Wildcard language plus region: region still has to match."""
        requested = L("*", region="US")
        assert evaluate_match(requested, L("en", region="US")) is MatchLevel.LANGUAGE_SCRIPT_REGION
        assert evaluate_match(requested, L("en", region="GB")) is MatchLevel.LANGUAGE_SCRIPT

    def test_wildcard_on_available_side_is_not_dont_care(self) -> None:
        assert evaluate_match(L("en"), L("und")) is MatchLevel.NONE

    def test_wildcard_pair_is_exact(self) -> None:
        assert evaluate_match(L("und"), L("")) is MatchLevel.EXACT

    def test_wildcard_never_maximized(self) -> None:
        assert not maximized_equal(L("und"), L("en", "Latn", "US"), fake_maximize)
        assert evaluate_match(L("und"), L("en"), fake_maximize) is MatchLevel.LANGUAGE_SCRIPT_REGION


class TestMaximize:
    """MAXIMIZED_EXACT with an injected capability."""

    def test_maximized_pair(self) -> None:
        """en-US and en become equal once en is expanded to en-Latn-US."""
        assert evaluate_match(L("en", region="US"), L("en"), fake_maximize) is MatchLevel.MAXIMIZED_EXACT

    def test_maximized_mismatch_falls_through(self) -> None:
        assert evaluate_match(L("en", region="GB"), L("en"), fake_maximize) is MatchLevel.LANGUAGE_SCRIPT

    def test_variants_ignored_after_maximize(self) -> None:
        requested = L("de", variants=("1996",))
        assert evaluate_match(requested, L("de", region="DE"), fake_maximize) is MatchLevel.MAXIMIZED_EXACT

    def test_exact_still_wins(self) -> None:
        assert evaluate_match(L("fr"), L("fr"), fake_maximize) is MatchLevel.EXACT

    def test_unknown_language_unchanged(self) -> None:
        """No likely data on either side: the maximized rung is skipped."""
        requested = L("xx", variants=("1996",))
        assert not maximized_equal(requested, L("xx"), fake_maximize)
        assert evaluate_match(requested, L("xx"), fake_maximize) is MatchLevel.LANGUAGE_SCRIPT_REGION
        assert evaluate_match(L("xx", region="AA"), L("xx"), fake_maximize) is MatchLevel.LANGUAGE_SCRIPT

    def test_cldr_traditional_chinese(self, maximize) -> None:
        """zh-Hant and zh-TW both maximize to zh-Hant-TW."""
        assert evaluate_match(L("zh", "Hant"), L("zh", region="TW"), maximize) is MatchLevel.MAXIMIZED_EXACT

    def test_cldr_serbian_scripts_differ(self, maximize) -> None:
        assert evaluate_match(L("sr", "Latn"), L("sr"), maximize) is MatchLevel.LANGUAGE_ONLY


class TestLadderProperties:
    """Totality and monotonicity over generated pairs."""

    @given(requested=locale_by_shape(), available=locale_identifiers)
    def test_total(self, requested: L, available: L) -> None:
        """PROPERTY: evaluate_match returns a MatchLevel for every pair."""
        level = evaluate_match(requested, available)
        event(f"level={level.name}")
        assert isinstance(level, MatchLevel)

    @given(requested=locale_identifiers, available=locale_identifiers)
    def test_maximize_never_lowers(self, requested: L, available: L) -> None:
        """PROPERTY: enabling maximize never lowers the computed level."""
        plain = evaluate_match(requested, available)
        maximized = evaluate_match(requested, available, fake_maximize)
        event(f"raised={maximized > plain}")
        assert maximized >= plain

    @given(ident=locale_identifiers)
    def test_reflexive_exact(self, ident: L) -> None:
        """PROPERTY: every identifier matches itself exactly."""
        assert evaluate_match(ident, ident) is MatchLevel.EXACT

    @given(requested=locale_identifiers, available=locale_identifiers)
    def test_none_iff_language_mismatch(self, requested: L, available: L) -> None:
        """PROPERTY: NONE exactly when languages differ and the request is not a wildcard."""
        level = evaluate_match(requested, available)
        mismatch = not requested.is_wildcard and requested.language != available.language
        assert (level is MatchLevel.NONE) == mismatch
