"""
Option axes inferred from SKU content.

A product's variants are partitioned into independent option axes
(Color, Connection, ...) purely from their SKU tokens. Nothing here is
configured per product: the same SKU always yields the same axis values.

Example:
    LGOLEDC3-SIL-WIF  -> {'Color': 'Silver', 'Connection': 'WiFi'}
    LGOLEDC3-BLU-WIR  -> {'Color': 'Blue', 'Connection': 'Wired'}
    XJ9-CUSTOM        -> {'Options': 'CUSTOM'}
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence

from .sku_tokenizer import GENERIC_AXIS, axis_values, generic_value, tokenize


@dataclass(frozen=True)
class ProductVariant:
    """Purchasable variant as seen by the resolution engine."""
    id: Any
    sku_code: str
    price: Decimal = Decimal('0.00')
    in_stock: bool = True

    @classmethod
    def from_model(cls, variant) -> 'ProductVariant':
        return cls(
            id=variant.pk,
            sku_code=variant.sku,
            price=variant.sell_price,
            in_stock=variant.is_in_stock,
        )


@dataclass(frozen=True)
class AxisEntry:
    value: str
    variant: ProductVariant


@dataclass
class OptionAxis:
    name: str
    entries: List[AxisEntry] = field(default_factory=list)

    @property
    def values(self) -> List[str]:
        return [entry.value for entry in self.entries]

    def entry_for(self, value: str) -> Optional[AxisEntry]:
        for entry in self.entries:
            if entry.value == value:
                return entry
        return None


def derive_axis_values(sku_code: str) -> Dict[str, str]:
    """
    Map a SKU to {axis_name: canonical_value}.

    Each axis takes the first of its vocabulary entries found in the SKU.
    A SKU with no recognized token lands on the generic axis, valued by its
    last segment.
    """
    values = axis_values(tokenize(sku_code))

    if not values:
        values[GENERIC_AXIS] = generic_value(sku_code)
    return values


def group_into_axes(variants: Sequence[ProductVariant]) -> List[OptionAxis]:
    """
    Partition variants into option axes.

    Axes are ordered by first appearance across the variant list, and so are
    the values inside each axis. A value produced by several variants is
    listed once, pointing at the first of them; picking the right variant for
    it is the matcher's job.
    """
    axes: Dict[str, OptionAxis] = {}

    for variant in variants:
        for axis_name, value in derive_axis_values(variant.sku_code).items():
            axis = axes.get(axis_name)
            if axis is None:
                axis = axes[axis_name] = OptionAxis(name=axis_name)
            if axis.entry_for(value) is None:
                axis.entries.append(AxisEntry(value=value, variant=variant))

    return list(axes.values())


def variant_display_name(sku_code: str) -> str:
    """Human label for a variant, e.g. 'Silver WiFi'. Falls back to the SKU."""
    values = derive_axis_values(sku_code)
    if GENERIC_AXIS in values:
        return sku_code
    return ' '.join(values.values())
