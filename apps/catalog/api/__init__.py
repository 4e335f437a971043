from .serializers import (
    ProductListSerializer,
    ProductDetailSerializer,
    AttributeTypeSerializer,
    VariantListSerializer,
    SelectionRequestSerializer,
)

__all__ = [
    'ProductListSerializer',
    'ProductDetailSerializer',
    'AttributeTypeSerializer',
    'VariantListSerializer',
    'SelectionRequestSerializer',
]
