"""
Resolve which variant a click on an option selector lands on.

The user changes one axis at a time. We first look for a variant that keeps
every other axis as it is (exact match); when the catalog has no such
combination we fall back to the variant that holds the requested value and
changes the fewest other attributes; when nothing holds the requested value
at all, the clicked variant is used as is.

All functions are pure over the variant list they are given. List order is
the tie-break everywhere: the first qualifying variant wins.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .option_axes import OptionAxis, ProductVariant, derive_axis_values, group_into_axes

logger = logging.getLogger(__name__)

STRATEGY_UNCHANGED = 'unchanged'
STRATEGY_EXACT = 'exact'
STRATEGY_FALLBACK = 'fallback'
STRATEGY_CLICKED = 'clicked'


def _find_variant(variants: Sequence[ProductVariant], variant_id: Any) -> Optional[ProductVariant]:
    for variant in variants:
        if variant.id == variant_id:
            return variant
    return None


def _current_values(variants: Sequence[ProductVariant], variant_id: Any) -> Dict[str, str]:
    variant = _find_variant(variants, variant_id)
    if variant is None:
        return {}
    return derive_axis_values(variant.sku_code)


class VariantResolutionService:
    """
    Variant matching for single-axis option changes.
    Axis values are always re-derived from SKUs, never stored.
    """

    @staticmethod
    def match_exact(
        variants: Sequence[ProductVariant],
        axes: Sequence[OptionAxis],
        current_variant_id: Any,
        changed_axis: str,
        requested_value: str
    ) -> Optional[Any]:
        """
        Find the first variant holding requested_value on changed_axis and the
        current variant's value on every other axis.

        Axes the current variant has no value on are not pinned.

        Returns:
            The matching variant id, or None
        """
        current_values = _current_values(variants, current_variant_id)

        pinned = {
            axis.name: current_values[axis.name]
            for axis in axes
            if axis.name != changed_axis and axis.name in current_values
        }
        pinned[changed_axis] = requested_value

        for variant in variants:
            values = derive_axis_values(variant.sku_code)
            if all(values.get(name) == value for name, value in pinned.items()):
                logger.debug("Exact match for %s: %s", pinned, variant.sku_code)
                return variant.id

        logger.debug("No exact match for %s", pinned)
        return None

    @staticmethod
    def resolve_fallback(
        variants: Sequence[ProductVariant],
        axes: Sequence[OptionAxis],
        current_variant_id: Any,
        changed_axis: str,
        requested_value: str,
        clicked_variant_id: Any
    ) -> Any:
        """
        Best-effort pick when no exact combination exists.

        Among variants holding requested_value on changed_axis, prefer the one
        sharing the most other axis values with the current variant. With no
        such variant, return clicked_variant_id unchanged.
        """
        return VariantResolutionService._fallback(
            variants, axes, current_variant_id, changed_axis,
            requested_value, clicked_variant_id
        )[0]

    @staticmethod
    def _fallback(
        variants: Sequence[ProductVariant],
        axes: Sequence[OptionAxis],
        current_variant_id: Any,
        changed_axis: str,
        requested_value: str,
        clicked_variant_id: Any
    ) -> Tuple[Any, str]:
        candidates = [
            variant for variant in variants
            if derive_axis_values(variant.sku_code).get(changed_axis) == requested_value
        ]

        if not candidates:
            logger.debug(
                "No variant has %s=%s, keeping clicked variant %s",
                changed_axis, requested_value, clicked_variant_id
            )
            return clicked_variant_id, STRATEGY_CLICKED

        if len(candidates) == 1:
            return candidates[0].id, STRATEGY_FALLBACK

        current_values = _current_values(variants, current_variant_id)
        other_axes = [
            axis.name for axis in axes
            if axis.name != changed_axis and axis.name in current_values
        ]

        best_variant = None
        best_score = -1

        for candidate in candidates:
            values = derive_axis_values(candidate.sku_code)
            score = sum(
                1 for name in other_axes
                if values.get(name) == current_values[name]
            )
            logger.debug("Fallback candidate %s scored %d", candidate.sku_code, score)

            # Strictly greater: earlier candidates win ties
            if score > best_score:
                best_score = score
                best_variant = candidate

        return best_variant.id, STRATEGY_FALLBACK

    @staticmethod
    def resolve(
        variants: Sequence[ProductVariant],
        current_variant_id: Any,
        changed_axis: str,
        requested_value: str,
        clicked_variant_id: Any,
        axes: Optional[Sequence[OptionAxis]] = None
    ) -> Tuple[Any, str]:
        """
        Resolve a click and report how it was resolved.

        Returns:
            Tuple of (variant id, strategy), strategy being one of
            'unchanged', 'exact', 'fallback' or 'clicked'
        """
        if axes is None:
            axes = group_into_axes(variants)

        current_values = _current_values(variants, current_variant_id)
        if current_values and current_values.get(changed_axis) == requested_value:
            return current_variant_id, STRATEGY_UNCHANGED

        variant_id = VariantResolutionService.match_exact(
            variants, axes, current_variant_id, changed_axis, requested_value
        )
        if variant_id is not None:
            return variant_id, STRATEGY_EXACT

        return VariantResolutionService._fallback(
            variants, axes, current_variant_id, changed_axis,
            requested_value, clicked_variant_id
        )

    @staticmethod
    def resolve_selection(
        variants: Sequence[ProductVariant],
        current_variant_id: Any,
        changed_axis: str,
        requested_value: str,
        clicked_variant_id: Any,
        axes: Optional[Sequence[OptionAxis]] = None
    ) -> Any:
        """
        Variant id to select after the user sets changed_axis to requested_value.

        Never raises: the worst case is the clicked variant.
        """
        return VariantResolutionService.resolve(
            variants, current_variant_id, changed_axis,
            requested_value, clicked_variant_id, axes=axes
        )[0]

    @staticmethod
    def initial_variant_id(
        variants: Sequence[ProductVariant],
        prefer_in_stock: bool = False
    ) -> Optional[Any]:
        """First variant of the list, or the first in-stock one if preferred."""
        if not variants:
            return None
        if prefer_in_stock:
            for variant in variants:
                if variant.in_stock:
                    return variant.id
        return variants[0].id


class SelectionState:
    """
    Currently selected variant of a product view.

    Only the selected id is stored; per-axis "current values" are derived
    from its SKU on demand so highlighted options can't drift from the
    selection. Axes are grouped once per variant list.
    """

    def __init__(self, variants, selected_variant_id=None, prefer_in_stock=False):
        self.variants: List[ProductVariant] = list(variants)
        self.axes: List[OptionAxis] = group_into_axes(self.variants)
        if selected_variant_id is None:
            selected_variant_id = VariantResolutionService.initial_variant_id(
                self.variants, prefer_in_stock=prefer_in_stock
            )
        self.selected_variant_id = selected_variant_id

    @property
    def current_variant(self) -> Optional[ProductVariant]:
        return _find_variant(self.variants, self.selected_variant_id)

    @property
    def current_values(self) -> Dict[str, str]:
        return _current_values(self.variants, self.selected_variant_id)

    @property
    def display_price(self):
        variant = self.current_variant
        return variant.price if variant else None

    @property
    def is_in_stock(self) -> bool:
        variant = self.current_variant
        return bool(variant and variant.in_stock)

    def is_option_selected(self, axis_name: str, value: str) -> bool:
        return self.current_values.get(axis_name) == value

    def select(self, axis_name: str, value: str, clicked_variant_id: Any) -> Any:
        """Apply one option click and return the newly selected variant id."""
        self.selected_variant_id = VariantResolutionService.resolve_selection(
            self.variants,
            self.selected_variant_id,
            axis_name,
            value,
            clicked_variant_id,
            axes=self.axes,
        )
        return self.selected_variant_id

    def variant_for_cart(self) -> Optional[ProductVariant]:
        """Selected variant, else the first one. None when nothing is purchasable."""
        return self.current_variant or (self.variants[0] if self.variants else None)


def resolve_selection(variants, current_variant_id, changed_axis, requested_value, clicked_variant_id):
    return VariantResolutionService.resolve_selection(
        variants, current_variant_id, changed_axis, requested_value, clicked_variant_id
    )
