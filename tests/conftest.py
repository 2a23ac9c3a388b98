"""Shared fixtures for the catalog test suite.

Engine fixtures are plain ProductVariant lists (no database); catalog
fixtures persist Product/Variant rows for API tests.
"""

from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from apps.catalog.models import Product, Variant
from apps.catalog.services import ProductVariant


def make_variants(*skus, out_of_stock=()):
    """ProductVariant list with ids V1, V2, ... in the given order."""
    return [
        ProductVariant(
            id=f'V{index}',
            sku_code=sku,
            price=Decimal('100.00') + index,
            in_stock=f'V{index}' not in out_of_stock,
        )
        for index, sku in enumerate(skus, start=1)
    ]


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def tv_variants():
    """Silver/WiFi, Silver/Wired, Blue/WiFi."""
    return make_variants('LGOLEDC3-SIL-WIF', 'LGOLEDC3-SIL-WIR', 'LGOLEDC3-BLU-WIF')


@pytest.fixture
def size_vocabulary(monkeypatch):
    """Adds a third axis so fallback scoring has something to rank on."""
    from apps.catalog.services import sku_tokenizer

    vocabulary = list(sku_tokenizer.VOCABULARY) + [
        ('Size', {'sm': 'Small', 'lg': 'Large'}),
    ]
    monkeypatch.setattr(sku_tokenizer, 'VOCABULARY', vocabulary)
    return vocabulary


# =============================================================================
# CATALOG FIXTURES
# =============================================================================

@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def tv_product(db):
    product = Product.objects.create(name='LG OLED C3', slug='lg-oled-c3')
    rows = [
        ('LGOLEDC3-SIL-WIF', Decimal('7999.00'), 10),
        ('LGOLEDC3-SIL-WIR', Decimal('7799.00'), 4),
        ('LGOLEDC3-BLU-WIF', Decimal('8099.00'), 0),
    ]
    for position, (sku, price, stock) in enumerate(rows):
        Variant.objects.create(
            product=product,
            sku=sku,
            sell_price=price,
            stock_quantity=stock,
            position=position,
        )
    return product


@pytest.fixture
def tv_skus(tv_product):
    """{sku: variant id} for tv_product."""
    return dict(tv_product.variants.values_list('sku', 'id'))
