"""
Service for handling navigation between a product's variants.
Option axes are INFERRED from the variants' SKUs, not configured manually.
"""

from typing import Any, Dict, List, Optional

from apps.catalog.conf import resolution_setting
from .option_axes import ProductVariant, variant_display_name
from .variant_resolution import SelectionState, VariantResolutionService


class VariantNavigationService:
    """
    Bridges persisted products to the variant resolution engine.
    Variants are read once per call, in storefront list order.
    """

    @staticmethod
    def get_product_variants(product) -> List[ProductVariant]:
        return [
            ProductVariant.from_model(variant)
            for variant in product.get_active_variants()
        ]

    @staticmethod
    def get_selection_state(product, selected_variant_id=None) -> SelectionState:
        """
        Build the selection state for a product view.

        An unknown selected_variant_id is ignored and the initial variant
        (first one, or first in stock if PREFER_IN_STOCK_INITIAL) is used.
        """
        variants = VariantNavigationService.get_product_variants(product)
        known_ids = {variant.id for variant in variants}
        if selected_variant_id not in known_ids:
            selected_variant_id = None

        return SelectionState(
            variants,
            selected_variant_id=selected_variant_id,
            prefer_in_stock=resolution_setting('PREFER_IN_STOCK_INITIAL'),
        )

    @staticmethod
    def serialize_variant(variant: Optional[ProductVariant]) -> Optional[Dict[str, Any]]:
        if variant is None:
            return None
        return {
            'id': variant.id,
            'sku': variant.sku_code,
            'name': variant_display_name(variant.sku_code),
            'sell_price': str(variant.price),
            'is_in_stock': variant.in_stock,
        }

    @staticmethod
    def get_option_navigation(product, selected_variant_id=None) -> Dict[str, Any]:
        """
        Build option selector data for a product page.

        Every axis lists its distinct values; each value points at the first
        variant carrying it and says whether it is part of the current
        selection. Out-of-stock entries are rendered disabled by the UI.
        """
        state = VariantNavigationService.get_selection_state(product, selected_variant_id)

        axes = []
        for axis in state.axes:
            axes.append({
                'name': axis.name,
                'options': [
                    {
                        'value': entry.value,
                        'variant_id': entry.variant.id,
                        'is_selected': state.is_option_selected(axis.name, entry.value),
                        'in_stock': entry.variant.in_stock,
                    }
                    for entry in axis.entries
                ],
            })

        return {
            'product': {
                'id': product.id,
                'name': product.name,
                'slug': product.slug,
            },
            'selected_variant': VariantNavigationService.serialize_variant(
                state.current_variant
            ),
            'current_values': state.current_values,
            'axes': axes,
        }

    @staticmethod
    def resolve_for_product(
        product,
        current_variant_id,
        changed_axis: str,
        requested_value: str,
        clicked_variant_id,
        variants: Optional[List[ProductVariant]] = None
    ) -> Optional[Dict[str, Any]]:
        """
        Resolve an option click on a product page.

        variants may be passed when the caller already loaded them.

        Returns:
            Dict with the resolved variant id, the strategy used and the
            variant summary, or None when the product has no active variants
        """
        if variants is None:
            variants = VariantNavigationService.get_product_variants(product)
        if not variants:
            return None

        variant_id, strategy = VariantResolutionService.resolve(
            variants,
            current_variant_id,
            changed_axis,
            requested_value,
            clicked_variant_id,
        )

        resolved = next((v for v in variants if v.id == variant_id), None)
        return {
            'variant_id': variant_id,
            'strategy': strategy,
            'variant': VariantNavigationService.serialize_variant(resolved),
        }
