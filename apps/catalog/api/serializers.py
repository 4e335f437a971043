from rest_framework import serializers
from apps.catalog.models import (
    Product,
    AttributeType,
    Variant,
)


# =============================================================================
# Attribute Serializers
# =============================================================================

class AttributeTypeSerializer(serializers.ModelSerializer):
    class Meta:
        model = AttributeType
        fields = ['id', 'name', 'slug', 'datatype', 'display_order']


# =============================================================================
# Variant Serializers
# =============================================================================

class VariantListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for variant lists."""
    product_slug = serializers.CharField(source='product.slug', read_only=True)
    display_name = serializers.CharField(source='get_display_name', read_only=True)
    attributes = serializers.SerializerMethodField()
    is_in_stock = serializers.BooleanField(read_only=True)

    class Meta:
        model = Variant
        fields = [
            'id', 'sku', 'name', 'display_name', 'product', 'product_slug',
            'sell_price', 'stock_quantity', 'is_active', 'is_in_stock',
            'attributes'
        ]

    def get_attributes(self, obj):
        return obj.get_options_dict()


# =============================================================================
# Product Serializers
# =============================================================================

class ProductListSerializer(serializers.ModelSerializer):
    """Product list with counts."""
    variant_count = serializers.IntegerField(read_only=True)
    active_variant_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'slug', 'is_active',
            'variant_count', 'active_variant_count'
        ]


class ProductDetailSerializer(serializers.ModelSerializer):
    """Product detail with its attribute types and option domain."""
    attribute_types = serializers.SerializerMethodField()
    attribute_domain = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'slug', 'description', 'is_active',
            'attribute_types', 'attribute_domain',
            'created_at', 'updated_at'
        ]

    def get_attribute_types(self, obj):
        return AttributeTypeSerializer(obj.get_attribute_types(), many=True).data

    def get_attribute_domain(self, obj):
        domain = self.context.get('attribute_domain')
        return domain if domain is not None else {}


# =============================================================================
# Selection Serializers
# =============================================================================

class SelectionRequestSerializer(serializers.Serializer):
    """
    Payload of a selection change.

    {
        "selections": {"color": "Silver", "storage": "1TB"},
        "changed_attribute": "color"
    }
    """
    selections = serializers.DictField(
        child=serializers.CharField(allow_blank=False, max_length=100),
        allow_empty=True
    )
    changed_attribute = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, max_length=100
    )

    def validate(self, attrs):
        changed = attrs.get('changed_attribute') or None
        if changed and changed not in attrs['selections']:
            raise serializers.ValidationError({
                'changed_attribute': 'Must be one of the selected attributes.'
            })
        attrs['changed_attribute'] = changed
        return attrs
