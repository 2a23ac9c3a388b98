"""
Create sample catalog data for trying out option selection.
Run with: python manage.py seed_catalog
"""

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.catalog.models import Product, Variant

SAMPLE_PRODUCTS = [
    {
        'slug': 'lg-oled-c3',
        'name': 'LG OLED C3',
        'description': 'Smart TV OLED 55"',
        'variants': [
            ('LGOLEDC3-SIL-WIF', Decimal('7999.00'), 10),
            ('LGOLEDC3-SIL-WIR', Decimal('7799.00'), 4),
            ('LGOLEDC3-BLU-WIF', Decimal('8099.00'), 0),
            ('LGOLEDC3-BLA-WIR', Decimal('7899.00'), 2),
        ],
    },
    {
        'slug': 'hub-usb',
        'name': 'Hub USB',
        'description': 'Hub USB-C 7 portas',
        'variants': [
            ('HUB7-RED', Decimal('199.90'), 15),
            ('HUB7-WHI', Decimal('199.90'), 8),
        ],
    },
    {
        'slug': 'cabo-custom',
        'name': 'Cabo Sob Medida',
        'description': 'Cabo com comprimento sob encomenda',
        'variants': [
            ('XJ9-CUSTOM', Decimal('89.90'), 3),
            ('XJ9-2M', Decimal('49.90'), 20),
        ],
    },
]


class Command(BaseCommand):
    help = 'Create sample products and SKU-coded variants'

    @transaction.atomic
    def handle(self, *args, **options):
        for item in SAMPLE_PRODUCTS:
            product, _ = Product.objects.get_or_create(
                slug=item['slug'],
                defaults={
                    'name': item['name'],
                    'description': item['description'],
                    'is_active': True,
                }
            )

            for position, (sku, price, stock) in enumerate(item['variants']):
                Variant.objects.get_or_create(
                    sku=sku,
                    defaults={
                        'product': product,
                        'sell_price': price,
                        'stock_quantity': stock,
                        'position': position,
                        'is_active': True,
                    }
                )

        self.stdout.write(self.style.SUCCESS(
            f'Sample data created: {Product.objects.count()} products, '
            f'{Variant.objects.count()} variants'
        ))
