from .option_axes import (
    AxisEntry,
    OptionAxis,
    ProductVariant,
    derive_axis_values,
    group_into_axes,
    variant_display_name,
)
from .sku_tokenizer import tokenize
from .variant_navigation import VariantNavigationService
from .variant_resolution import SelectionState, VariantResolutionService, resolve_selection

__all__ = [
    'AxisEntry',
    'OptionAxis',
    'ProductVariant',
    'derive_axis_values',
    'group_into_axes',
    'variant_display_name',
    'tokenize',
    'VariantNavigationService',
    'SelectionState',
    'VariantResolutionService',
    'resolve_selection',
]
