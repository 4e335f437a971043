import pytest
from django.core.cache import cache

from apps.catalog.models import AttributeOption, Variant
from apps.catalog.services.variant_navigation import VariantNavigationService

pytestmark = pytest.mark.django_db


@pytest.fixture
def primed_key(macbook_product):
    VariantNavigationService.get_combination_data(macbook_product)
    key = VariantNavigationService.cache_key(macbook_product.pk)
    assert cache.get(key) is not None
    return key


def test_removing_option_link_invalidates(macbook_product, primed_key):
    variant = Variant.objects.get(sku='MBP-SG-1TB')
    variant.attribute_options.remove(
        AttributeOption.objects.get(product=macbook_product, value='1TB')
    )

    assert cache.get(primed_key) is None


def test_adding_link_from_option_side_invalidates(macbook_product, primed_key):
    variant = Variant.objects.create(product=macbook_product, sku='MBP-S-1TB')
    VariantNavigationService.get_combination_data(macbook_product)

    option = AttributeOption.objects.get(product=macbook_product, value='Silver')
    option.variants.add(variant)

    assert cache.get(primed_key) is None
    data = VariantNavigationService.get_combination_data(macbook_product)
    assert variant.pk in data.matrix.items('color', 'Silver')


def test_deleting_variant_invalidates(macbook_product, primed_key):
    Variant.objects.get(sku='MBP-S-512').delete()

    assert cache.get(primed_key) is None
    data = VariantNavigationService.get_combination_data(macbook_product)
    assert not data.matrix.has('color', 'Silver')


def test_option_change_invalidates(macbook_product, primed_key):
    option = AttributeOption.objects.get(product=macbook_product, value='512GB')
    option.display_value = '512 GB'
    option.save()

    assert cache.get(primed_key) is None
