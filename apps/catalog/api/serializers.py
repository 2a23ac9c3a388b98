from rest_framework import serializers
from apps.catalog.models import Product, Variant
from apps.catalog.services import VariantNavigationService


# =============================================================================
# Variant Serializers
# =============================================================================

class VariantListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for variant lists."""
    product_slug = serializers.CharField(source='product.slug', read_only=True)
    is_in_stock = serializers.BooleanField(read_only=True)
    options = serializers.SerializerMethodField()

    class Meta:
        model = Variant
        fields = [
            'id', 'sku', 'name', 'product', 'product_slug',
            'sell_price', 'stock_quantity', 'position',
            'is_active', 'is_in_stock', 'options'
        ]

    def get_options(self, obj):
        return obj.get_options_dict()


# =============================================================================
# Product Serializers
# =============================================================================

class ProductListSerializer(serializers.ModelSerializer):
    """
    Product list with counts.
    active_variant_count and min_price are annotated by the viewset.
    """
    active_variant_count = serializers.IntegerField(read_only=True)
    min_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, read_only=True
    )

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'slug', 'is_active',
            'active_variant_count', 'min_price'
        ]


class ProductDetailSerializer(serializers.ModelSerializer):
    """Full product detail with variants and inferred option axes."""
    variants = serializers.SerializerMethodField()
    option_axes = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'slug', 'description', 'is_active',
            'variants', 'option_axes',
            'created_at', 'updated_at'
        ]

    def get_variants(self, obj):
        return VariantListSerializer(
            obj.get_active_variants(), many=True, context=self.context
        ).data

    def get_option_axes(self, obj):
        return VariantNavigationService.get_option_navigation(obj)['axes']


# =============================================================================
# Selection Serializers
# =============================================================================

class ResolveSelectionSerializer(serializers.Serializer):
    """
    Payload for resolving an option click.

    Expected payload:
    {
        "current_variant_id": 1,
        "changed_axis": "Connection",
        "requested_value": "Wired",
        "clicked_variant_id": 2
    }
    """
    current_variant_id = serializers.IntegerField()
    changed_axis = serializers.CharField(max_length=100)
    requested_value = serializers.CharField(max_length=255)
    clicked_variant_id = serializers.IntegerField()
