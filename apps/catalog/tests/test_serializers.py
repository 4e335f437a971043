import pytest

from apps.catalog import api
from apps.catalog.api import (
    AttributeTypeSerializer,
    ProductDetailSerializer,
    ProductListSerializer,
    SelectionRequestSerializer,
    VariantListSerializer,
)
from apps.catalog.models import AttributeType, Variant


def test_package_exports():
    assert sorted(api.__all__) == [
        'AttributeTypeSerializer',
        'ProductDetailSerializer',
        'ProductListSerializer',
        'SelectionRequestSerializer',
        'VariantListSerializer',
    ]


class TestSelectionRequestSerializer:
    def test_blank_changed_attribute_becomes_none(self):
        serializer = SelectionRequestSerializer(
            data={'selections': {'color': 'Silver'}, 'changed_attribute': ''}
        )
        assert serializer.is_valid(), serializer.errors
        assert serializer.validated_data['changed_attribute'] is None

    def test_changed_attribute_must_be_selected(self):
        serializer = SelectionRequestSerializer(
            data={'selections': {'color': 'Silver'}, 'changed_attribute': 'storage'}
        )
        assert not serializer.is_valid()
        assert 'changed_attribute' in serializer.errors

    def test_empty_selections_are_allowed(self):
        serializer = SelectionRequestSerializer(data={'selections': {}})
        assert serializer.is_valid(), serializer.errors
        assert serializer.validated_data['changed_attribute'] is None


@pytest.mark.django_db
class TestCatalogSerializers:
    def test_attribute_type(self, macbook_product):
        data = AttributeTypeSerializer(AttributeType.objects.get(slug='color')).data
        assert data['slug'] == 'color'
        assert data['datatype'] == 'color'

    def test_variant_list(self, macbook_product):
        data = VariantListSerializer(Variant.objects.get(sku='MBP-S-512')).data
        assert data['product_slug'] == 'macbook-pro-14'
        assert data['attributes'] == {'color': 'Silver', 'storage': '512GB'}
        assert data['is_in_stock'] is True

    def test_product_list_counts(self, macbook_product):
        data = ProductListSerializer(macbook_product).data
        assert data['variant_count'] == 3
        assert data['active_variant_count'] == 3

    def test_product_detail_domain_comes_from_context(self, macbook_product):
        domain = {'color': ['Space Gray', 'Silver']}

        with_domain = ProductDetailSerializer(
            macbook_product, context={'attribute_domain': domain}
        ).data
        without_domain = ProductDetailSerializer(macbook_product).data

        assert with_domain['attribute_domain'] == domain
        assert without_domain['attribute_domain'] == {}
        assert [t['slug'] for t in with_domain['attribute_types']] == ['color', 'storage']
