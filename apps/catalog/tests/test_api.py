"""Pin the catalog REST endpoints."""

import pytest

from apps.catalog.models import Product, Variant

pytestmark = pytest.mark.django_db

PRODUCTS_URL = '/api/catalog/products/'
VARIANTS_URL = '/api/catalog/variants/'


def product_url(slug, action=''):
    url = f'{PRODUCTS_URL}{slug}/'
    return f'{url}{action}/' if action else url


class TestProductEndpoints:
    def test_list(self, api_client, macbook_product):
        Product.objects.create(name='Hidden', slug='hidden', is_active=False)

        response = api_client.get(PRODUCTS_URL)

        assert response.status_code == 200
        assert [product['slug'] for product in response.json()] == ['macbook-pro-14']
        assert response.json()[0]['active_variant_count'] == 3

    def test_retrieve_includes_domain(self, api_client, macbook_product):
        response = api_client.get(product_url('macbook-pro-14'))

        assert response.status_code == 200
        body = response.json()
        assert body['attribute_domain'] == {
            'color': ['Space Gray', 'Silver'],
            'storage': ['512GB', '1TB'],
        }
        assert [t['slug'] for t in body['attribute_types']] == ['color', 'storage']

    def test_unknown_product(self, api_client, db):
        assert api_client.get(product_url('nope', 'availability')).status_code == 404


class TestAvailabilityEndpoint:
    def test_without_selection(self, api_client, macbook_product):
        response = api_client.get(product_url('macbook-pro-14', 'availability'))

        assert response.status_code == 200
        assert response.json()['initial_selections'] == {'color': 'Space Gray'}

    def test_with_selection(self, api_client, macbook_product):
        response = api_client.get(
            product_url('macbook-pro-14', 'availability'),
            {'color': 'Silver', 'format': 'json'}
        )

        assert response.status_code == 200
        body = response.json()
        assert body['selections'] == {'color': 'Silver'}
        storage = {
            option['value']: option['is_available']
            for option in body['attributes'][1]['options']
        }
        assert storage == {'512GB': True, '1TB': False}

    def test_non_attribute_params_are_ignored(self, api_client, macbook_product):
        response = api_client.get(
            product_url('macbook-pro-14', 'availability'),
            {'color': 'Silver', 'utm_source': 'mail', 'fbclid': 'abc'}
        )

        assert response.status_code == 200
        body = response.json()
        assert body['selections'] == {'color': 'Silver'}
        storage = {
            option['value']: option['is_available']
            for option in body['attributes'][1]['options']
        }
        assert storage == {'512GB': True, '1TB': False}


class TestSelectEndpoint:
    def test_repairs_selection(self, api_client, macbook_product):
        response = api_client.post(
            product_url('macbook-pro-14', 'select'),
            {'selections': {'color': 'Silver', 'storage': '1TB'}, 'changed_attribute': 'color'},
            format='json'
        )

        assert response.status_code == 200
        body = response.json()
        assert body['selections'] == {'color': 'Silver', 'storage': '512GB'}
        assert body['changes'] == {'storage': 'replaced'}
        assert body['variant']['sku'] == 'MBP-S-512'

    def test_changed_attribute_must_be_selected(self, api_client, macbook_product):
        response = api_client.post(
            product_url('macbook-pro-14', 'select'),
            {'selections': {'color': 'Silver'}, 'changed_attribute': 'storage'},
            format='json'
        )

        assert response.status_code == 400
        assert 'changed_attribute' in response.json()

    def test_selections_required(self, api_client, macbook_product):
        response = api_client.post(
            product_url('macbook-pro-14', 'select'), {}, format='json'
        )

        assert response.status_code == 400
        assert 'selections' in response.json()


class TestResolveEndpoint:
    def test_non_attribute_params_are_ignored(self, api_client, macbook_product):
        response = api_client.get(
            product_url('macbook-pro-14', 'resolve'),
            {'color': 'Silver', 'storage': '512GB', 'utm_source': 'mail', 'limit': '10'}
        )

        assert response.status_code == 200
        body = response.json()
        assert body['type'] == 'variant'
        assert body['selections'] == {'color': 'Silver', 'storage': '512GB'}
        assert body['variant']['sku'] == 'MBP-S-512'

    def test_single_variant(self, api_client, macbook_product):
        response = api_client.get(
            product_url('macbook-pro-14', 'resolve'),
            {'color': 'Space Gray', 'storage': '1TB'}
        )

        assert response.status_code == 200
        body = response.json()
        assert body['type'] == 'variant'
        assert body['variant']['sku'] == 'MBP-SG-1TB'

    def test_no_match_is_not_an_error(self, api_client, macbook_product):
        response = api_client.get(
            product_url('macbook-pro-14', 'resolve'),
            {'color': 'Silver', 'storage': '1TB'}
        )

        assert response.status_code == 200
        assert response.json()['type'] == 'none'


class TestVariantEndpoint:
    def test_filter_by_product_and_attributes(self, api_client, macbook_product):
        response = api_client.get(
            VARIANTS_URL + '?product=macbook-pro-14&attribute=color:Silver&attribute=storage:512GB'
        )

        assert response.status_code == 200
        assert [variant['sku'] for variant in response.json()] == ['MBP-S-512']

    def test_filter_by_attribute_without_product(self, api_client, macbook_product):
        response = api_client.get(VARIANTS_URL, {'attribute': 'color:Space Gray'})

        assert response.status_code == 200
        assert [variant['sku'] for variant in response.json()] == ['MBP-SG-1TB', 'MBP-SG-512']

    def test_in_stock_filter(self, api_client, macbook_product):
        Variant.objects.filter(sku='MBP-SG-1TB').update(stock_quantity=0)

        in_stock = api_client.get(VARIANTS_URL, {'in_stock': 'true'}).json()
        sold_out = api_client.get(VARIANTS_URL, {'in_stock': 'false'}).json()

        assert sorted(variant['sku'] for variant in in_stock) == ['MBP-S-512', 'MBP-SG-512']
        assert [variant['sku'] for variant in sold_out] == ['MBP-SG-1TB']

    def test_display_name(self, api_client, macbook_product):
        response = api_client.get(VARIANTS_URL, {'sku': 'MBP-SG-1TB'})

        variant = response.json()[0]
        assert variant['display_name'] == 'MacBook Pro 14" - Space Gray / 1 TB SSD'
        assert variant['attributes'] == {'color': 'Space Gray', 'storage': '1TB'}
