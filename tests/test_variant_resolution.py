"""Pin exact matching, fallback ranking and click resolution."""

from apps.catalog.services import VariantResolutionService, group_into_axes, resolve_selection
from tests.conftest import make_variants


def _match(variants, current, axis, value):
    return VariantResolutionService.match_exact(
        variants, group_into_axes(variants), current, axis, value
    )


def _fallback(variants, current, axis, value, clicked):
    return VariantResolutionService.resolve_fallback(
        variants, group_into_axes(variants), current, axis, value, clicked
    )


# =============================================================================
# EXACT MATCH
# =============================================================================

class TestMatchExact:
    def test_keeps_other_axes(self, tv_variants):
        assert _match(tv_variants, 'V1', 'Connection', 'Wired') == 'V2'

    def test_change_color_keeps_connection(self, tv_variants):
        assert _match(tv_variants, 'V1', 'Color', 'Blue') == 'V3'

    def test_no_combination(self, tv_variants):
        """Blue/Wired is not sold."""
        assert _match(tv_variants, 'V3', 'Connection', 'Wired') is None

    def test_first_match_wins(self):
        variants = make_variants('A-SIL-WIF', 'A-BLU-WIF', 'B-BLU-WIF')
        assert _match(variants, 'V1', 'Color', 'Blue') == 'V2'

    def test_axis_missing_on_current_is_not_pinned(self):
        variants = make_variants('M-SIL', 'M-BLU-WIF', 'M-BLU')
        assert _match(variants, 'V1', 'Color', 'Blue') == 'V2'

    def test_variant_missing_pinned_axis_does_not_match(self):
        variants = make_variants('M-SIL-WIF', 'M-BLU', 'M-BLU-WIF')
        assert _match(variants, 'V1', 'Color', 'Blue') == 'V3'

    def test_unknown_current_pins_only_changed_axis(self, tv_variants):
        assert _match(tv_variants, 'nope', 'Connection', 'WiFi') == 'V1'

    def test_generic_axis(self):
        variants = make_variants('XJ9-CUSTOM', 'XJ9-2M')
        assert _match(variants, 'V1', 'Options', '2M') == 'V2'


# =============================================================================
# FALLBACK
# =============================================================================

class TestResolveFallback:
    def test_single_candidate(self):
        variants = make_variants('A-SIL-WIF', 'A-BLU-WIR')
        assert _fallback(variants, 'V1', 'Connection', 'Wired', 'V2') == 'V2'

    def test_no_candidates_returns_clicked(self):
        variants = make_variants('A-SIL-WIF')
        assert _fallback(variants, 'V1', 'Connection', 'Ethernet', 'V1') == 'V1'

    def test_tie_goes_to_list_order(self):
        variants = make_variants('A-SIL-WIF', 'A-BLU-WIR', 'A-RED-WIR')
        assert _fallback(variants, 'V1', 'Connection', 'Wired', 'V3') == 'V2'

    def test_prefers_most_shared_attributes(self, size_vocabulary):
        variants = make_variants('T-SIL-WIF-SM', 'T-BLU-WIR-LG', 'T-BLU-WIR-SM')
        assert _fallback(variants, 'V1', 'Connection', 'Wired', 'V2') == 'V3'


# =============================================================================
# RESOLVE SELECTION
# =============================================================================

class TestResolveSelection:
    def test_exact_preservation(self, tv_variants):
        assert resolve_selection(tv_variants, 'V1', 'Connection', 'Wired', 'V2') == 'V2'

    def test_fallback_with_attribute_loss(self):
        variants = make_variants('LGOLEDC3-SIL-WIF', 'LGOLEDC3-BLU-WIR')
        assert resolve_selection(variants, 'V1', 'Connection', 'Wired', 'V2') == 'V2'

    def test_last_resort_is_clicked(self):
        variants = make_variants('LGOLEDC3-SIL-WIF')
        assert resolve_selection(variants, 'V1', 'Connection', 'Ethernet', 'V1') == 'V1'

    def test_same_value_is_noop(self, tv_variants):
        assert resolve_selection(tv_variants, 'V2', 'Color', 'Silver', 'V1') == 'V2'
        assert resolve_selection(tv_variants, 'V3', 'Connection', 'WiFi', 'V1') == 'V3'

    def test_noop_with_duplicate_combinations(self):
        variants = make_variants('A-SIL-WIF', 'B-SIL-WIF')
        assert resolve_selection(variants, 'V2', 'Color', 'Silver', 'V1') == 'V2'

    def test_deterministic(self, tv_variants):
        first = resolve_selection(tv_variants, 'V3', 'Connection', 'Wired', 'V2')
        second = resolve_selection(list(tv_variants), 'V3', 'Connection', 'Wired', 'V2')
        assert first == second == 'V2'

    def test_empty_variant_list_returns_clicked(self):
        assert resolve_selection([], 'V1', 'Color', 'Silver', 'V9') == 'V9'

    def test_reuses_precomputed_axes(self, tv_variants):
        axes = group_into_axes(tv_variants)
        result = VariantResolutionService.resolve_selection(
            tv_variants, 'V1', 'Color', 'Blue', 'V3', axes=axes
        )
        assert result == 'V3'


class TestResolveStrategy:
    def test_unchanged(self, tv_variants):
        assert VariantResolutionService.resolve(
            tv_variants, 'V1', 'Color', 'Silver', 'V1'
        ) == ('V1', 'unchanged')

    def test_exact(self, tv_variants):
        assert VariantResolutionService.resolve(
            tv_variants, 'V1', 'Connection', 'Wired', 'V2'
        ) == ('V2', 'exact')

    def test_fallback(self, tv_variants):
        assert VariantResolutionService.resolve(
            tv_variants, 'V3', 'Connection', 'Wired', 'V2'
        ) == ('V2', 'fallback')

    def test_clicked(self, tv_variants):
        assert VariantResolutionService.resolve(
            tv_variants, 'V1', 'Color', 'Red', 'V1'
        ) == ('V1', 'clicked')


class TestInitialVariant:
    def test_first_variant(self):
        variants = make_variants('A-SIL', 'A-BLU', out_of_stock={'V1'})
        assert VariantResolutionService.initial_variant_id(variants) == 'V1'

    def test_prefer_in_stock(self):
        variants = make_variants('A-SIL', 'A-BLU', out_of_stock={'V1'})
        assert VariantResolutionService.initial_variant_id(variants, prefer_in_stock=True) == 'V2'

    def test_prefer_in_stock_none_available(self):
        variants = make_variants('A-SIL', 'A-BLU', out_of_stock={'V1', 'V2'})
        assert VariantResolutionService.initial_variant_id(variants, prefer_in_stock=True) == 'V1'

    def test_empty(self):
        assert VariantResolutionService.initial_variant_id([]) is None
