"""
Create a sample catalog for trying out option selection.

Run with: python manage.py load_sample_catalog
"""

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.catalog.models import (
    AttributeOption,
    AttributeType,
    Product,
    Variant,
    VariantAttribute,
)

# (sku, color, storage, stock)
MACBOOK_VARIANTS = [
    ('MBP-SG-512', 'Space Gray', '512GB', 10),
    ('MBP-SG-1TB', 'Space Gray', '1TB', 5),
    ('MBP-S-512', 'Silver', '512GB', 8),
]

COLOR_HEXES = {
    'Space Gray': '#53565A',
    'Silver': '#E3E4E5',
}

STORAGE_LABELS = {
    '512GB': '512 GB SSD',
    '1TB': '1 TB SSD',
}


class Command(BaseCommand):
    help = 'Create the MacBook Pro sample catalog (Color x Storage).'

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("Creating attribute types...")
        color, _ = AttributeType.objects.get_or_create(
            slug='color',
            defaults={'name': 'Color', 'datatype': 'color', 'display_order': 1}
        )
        storage, _ = AttributeType.objects.get_or_create(
            slug='storage',
            defaults={'name': 'Storage', 'datatype': 'text', 'display_order': 2}
        )

        self.stdout.write("Creating product...")
        product, _ = Product.objects.get_or_create(
            slug='macbook-pro-14',
            defaults={'name': 'MacBook Pro 14"', 'description': 'Apple MacBook Pro 14-inch'}
        )

        self.stdout.write("Creating attribute options...")
        color_options = {}
        for i, (value, hex_code) in enumerate(COLOR_HEXES.items()):
            color_options[value], _ = AttributeOption.objects.get_or_create(
                attribute_type=color,
                product=product,
                value=value,
                defaults={'color_hex': hex_code, 'display_order': i}
            )

        storage_options = {}
        for i, (value, label) in enumerate(STORAGE_LABELS.items()):
            storage_options[value], _ = AttributeOption.objects.get_or_create(
                attribute_type=storage,
                product=product,
                value=value,
                defaults={'display_value': label, 'display_order': i}
            )

        self.stdout.write("Creating variants...")
        created_count = 0
        for sku, color_value, storage_value, stock in MACBOOK_VARIANTS:
            variant, created = Variant.objects.get_or_create(
                sku=sku,
                defaults={
                    'product': product,
                    'sell_price': Decimal('1999.00'),
                    'stock_quantity': stock,
                }
            )
            if created:
                created_count += 1
                VariantAttribute.objects.create(
                    variant=variant, attribute_option=color_options[color_value]
                )
                VariantAttribute.objects.create(
                    variant=variant, attribute_option=storage_options[storage_value]
                )

        self.stdout.write(self.style.SUCCESS(
            f"Sample catalog ready: {product.name} with "
            f"{product.variant_count} variants ({created_count} new)"
        ))
