"""
Catalog models for the storefront.

Model Hierarchy:
- Product: Base product (e.g., "LG OLED C3")
- Variant: Individual SKU with price and stock; its options are read from the SKU
"""

from .product import Product
from .variant import Variant

__all__ = [
    'Product',
    'Variant',
]
