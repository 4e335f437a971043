"""
Catalog models for ecommerce with dynamic product variants.

Model Hierarchy:
- Product: Base product (e.g., "MacBook Pro 14")
- AttributeType: Dynamic attribute types (Color, Storage, Size)
- AttributeOption: Values for each attribute type (Silver, 512GB, M)
- Variant: Individual SKU, a unique combination of attribute options

Which options combine is never configured: it is inferred from the variants
by apps.catalog.services.
"""

from .product import Product
from .attribute import AttributeType, AttributeOption
from .variant import Variant, VariantAttribute

__all__ = [
    'Product',
    'AttributeType',
    'AttributeOption',
    'Variant',
    'VariantAttribute',
]
