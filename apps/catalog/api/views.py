import logging

from rest_framework import viewsets, filters, status
from rest_framework.decorators import action
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend
from django.db.models import Count, Min, Q

from apps.catalog.models import Product, Variant
from apps.catalog.services import VariantNavigationService
from .serializers import (
    ProductListSerializer,
    ProductDetailSerializer,
    VariantListSerializer,
    ResolveSelectionSerializer,
)
from .filters import VariantFilter

logger = logging.getLogger(__name__)


class ProductViewSet(viewsets.ReadOnlyModelViewSet):
    """
    API endpoint for products.

    list: List active products
    retrieve: Get product detail with variants and option axes
    navigation: Option selector data for the current selection
    resolve: Resolve an option click to a variant
    """
    queryset = Product.objects.filter(is_active=True)
    lookup_field = 'slug'
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['name', 'description']
    ordering_fields = ['name', 'created_at']
    ordering = ['name']

    def get_serializer_class(self):
        if self.action == 'list':
            return ProductListSerializer
        return ProductDetailSerializer

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action == 'list':
            active = Q(variants__is_active=True)
            queryset = queryset.annotate(
                active_variant_count=Count('variants', filter=active),
                min_price=Min('variants__sell_price', filter=active),
            )
        return queryset

    @action(detail=True, methods=['get'], url_path='options')
    def navigation(self, request, slug=None):
        """
        Get option selector data for this product.

        Query params:
        - selected: id of the currently selected variant (optional)
        """
        product = self.get_object()

        selected = request.query_params.get('selected')
        selected_id = None
        if selected:
            try:
                selected_id = int(selected)
            except ValueError:
                return Response(
                    {'error': 'selected must be a variant id'},
                    status=status.HTTP_400_BAD_REQUEST
                )

        navigation_data = VariantNavigationService.get_option_navigation(
            product, selected_id
        )
        return Response(navigation_data)

    @action(detail=True, methods=['post'])
    def resolve(self, request, slug=None):
        """
        Resolve which variant an option click selects.

        Expected payload:
        {
            "current_variant_id": 1,
            "changed_axis": "Connection",
            "requested_value": "Wired",
            "clicked_variant_id": 2
        }
        """
        product = self.get_object()

        serializer = ResolveSelectionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        variants = VariantNavigationService.get_product_variants(product)
        if not variants:
            logger.info("Product %s has no purchasable variants", product.slug)
            return Response(
                {'error': 'Product unavailable', 'available': False},
                status=status.HTTP_409_CONFLICT
            )

        # The clicked option must belong to this product
        if not any(variant.id == data['clicked_variant_id'] for variant in variants):
            return Response(
                {'error': 'clicked_variant_id is not a variant of this product'},
                status=status.HTTP_400_BAD_REQUEST
            )

        result = VariantNavigationService.resolve_for_product(
            product,
            data['current_variant_id'],
            data['changed_axis'],
            data['requested_value'],
            data['clicked_variant_id'],
            variants=variants,
        )
        return Response(result)


class VariantViewSet(viewsets.ReadOnlyModelViewSet):
    """
    API endpoint for variants.

    Supports filtering by product, options, price range, stock status.
    """
    queryset = Variant.objects.filter(is_active=True).select_related('product')
    serializer_class = VariantListSerializer
    filterset_class = VariantFilter
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['sku', 'name', 'product__name']
    ordering_fields = ['sku', 'sell_price', 'position', 'created_at']
    ordering = ['product', 'position', 'id']
