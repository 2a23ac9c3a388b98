from .serializers import (
    ProductListSerializer,
    ProductDetailSerializer,
    VariantListSerializer,
    ResolveSelectionSerializer,
)

__all__ = [
    'ProductListSerializer',
    'ProductDetailSerializer',
    'VariantListSerializer',
    'ResolveSelectionSerializer',
]
