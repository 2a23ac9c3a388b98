from django.db import models as db_models
from django_filters import rest_framework as filters
from apps.catalog.models import Variant
from apps.catalog.services import derive_axis_values


class VariantFilter(filters.FilterSet):
    """Filter for variants with support for SKU-inferred options."""

    product = filters.CharFilter(field_name='product__slug')
    product_id = filters.NumberFilter(field_name='product__id')

    # Price filters
    min_price = filters.NumberFilter(field_name='sell_price', lookup_expr='gte')
    max_price = filters.NumberFilter(field_name='sell_price', lookup_expr='lte')

    # Stock filters
    in_stock = filters.BooleanFilter(method='filter_in_stock')

    # Option filters
    option = filters.CharFilter(method='filter_by_option')

    class Meta:
        model = Variant
        fields = ['product', 'product_id', 'is_active', 'sku']

    def filter_in_stock(self, queryset, name, value):
        in_stock = (
            db_models.Q(stock_quantity__gt=0)
            | db_models.Q(track_inventory=False)
            | db_models.Q(allow_backorder=True)
        )
        if value is True:
            return queryset.filter(in_stock)
        elif value is False:
            return queryset.exclude(in_stock)
        return queryset

    def filter_by_option(self, queryset, name, value):
        """
        Filter by option in format: axis_name:option_value
        Example: ?option=Color:Silver

        Options live in the SKU, so matching happens in Python.
        """
        if ':' not in value:
            return queryset

        axis_name, option_value = value.split(':', 1)
        matching_ids = [
            pk for pk, sku in queryset.values_list('pk', 'sku')
            if derive_axis_values(sku).get(axis_name) == option_value
        ]
        return queryset.filter(pk__in=matching_ids)
