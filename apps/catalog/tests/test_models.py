import pytest
from django.core.exceptions import ValidationError

from apps.catalog.models import AttributeOption, AttributeType, Product, Variant

pytestmark = pytest.mark.django_db


class TestAttributeOption:
    def test_to_defining_value(self, macbook_product):
        option = AttributeOption.objects.get(product=macbook_product, value='1TB')

        defining = option.to_defining_value()

        assert defining.name == 'storage'
        assert defining.value == '1TB'
        assert defining.display_label == '1 TB SSD'

    def test_no_display_label_without_display_value(self, macbook_product):
        option = AttributeOption.objects.get(product=macbook_product, value='Silver')
        assert option.to_defining_value().display_label is None
        assert option.get_option_details()['display_value'] == 'Silver'

    def test_swatch_only_on_color_types(self, macbook_product):
        option = AttributeOption(
            attribute_type=AttributeType.objects.get(slug='storage'),
            product=macbook_product,
            value='2TB',
            color_hex='#000000',
        )

        with pytest.raises(ValidationError):
            option.full_clean()


class TestVariant:
    def test_to_spec(self, macbook_product):
        spec = Variant.objects.get(sku='MBP-SG-1TB').to_spec()

        assert spec.value_for('color') == 'Space Gray'
        assert spec.value_for('storage') == '1TB'
        assert spec.stock_quantity == 5
        assert spec.in_stock is True

    def test_untracked_variant_carries_no_quantity(self, macbook_product):
        variant = Variant.objects.get(sku='MBP-S-512')
        variant.track_inventory = False
        variant.stock_quantity = 0

        spec = variant.to_spec()

        assert spec.stock_quantity is None
        assert spec.in_stock is True

    def test_one_option_per_attribute_type(self, macbook_product):
        variant = Variant.objects.get(sku='MBP-S-512')
        variant.variantattribute_set.create(
            attribute_option=AttributeOption.objects.get(product=macbook_product, value='1TB')
        )

        assert variant.get_options_dict() == {'color': 'Silver', 'storage': '1TB'}


class TestProduct:
    def test_slug_from_name(self, db):
        assert Product.objects.create(name='iPad Air').slug == 'ipad-air'

    def test_attribute_options_in_display_order(self, macbook_product):
        values = [option.value for option in macbook_product.get_attribute_options()]
        assert values == ['Space Gray', 'Silver', '512GB', '1TB']

    def test_attribute_options_for_some_types(self, macbook_product):
        options = macbook_product.get_attribute_options(type_slugs=['storage'])
        assert [option.value for option in options] == ['512GB', '1TB']

    def test_inactive_variants_are_not_counted(self, macbook_product):
        Variant.objects.filter(sku='MBP-S-512').update(is_active=False)

        assert macbook_product.variant_count == 3
        assert macbook_product.active_variant_count == 2
        assert len(macbook_product.get_variant_specs()) == 2
