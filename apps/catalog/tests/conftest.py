"""Shared fixtures for the catalog test suite.

Pure engine fixtures build VariantSpec catalogs in memory; database fixtures
seed the same MacBook catalog through the load_sample_catalog command.
"""

from io import StringIO

import pytest
from django.core.cache import cache
from django.core.management import call_command

from apps.catalog.models import Product
from apps.catalog.services.matrix import (
    DefiningValue,
    VariantSpec,
    build_combination_matrix,
)


def make_variant(variant_id, stock_quantity=None, in_stock=True, **values):
    return VariantSpec(
        id=variant_id,
        values=tuple(DefiningValue(name, value) for name, value in values.items()),
        stock_quantity=stock_quantity,
        in_stock=in_stock,
    )


@pytest.fixture(autouse=True)
def clear_cache():
    """The locmem cache outlives the per-test database rollback."""
    cache.clear()
    yield
    cache.clear()


# =============================================================================
# IN-MEMORY CATALOGS
# =============================================================================

@pytest.fixture
def macbook_variants():
    """(Space Gray, 512GB), (Space Gray, 1TB), (Silver, 512GB)."""
    return [
        VariantSpec(
            id='item_mbp_space_gray_512',
            values=(
                DefiningValue('Color', 'Space Gray', 'Space Gray'),
                DefiningValue('Storage', '512GB', '512 GB SSD'),
            ),
            stock_quantity=10,
        ),
        VariantSpec(
            id='item_mbp_space_gray_1tb',
            values=(
                DefiningValue('Color', 'Space Gray', 'Space Gray'),
                DefiningValue('Storage', '1TB', '1 TB SSD'),
            ),
            stock_quantity=5,
        ),
        VariantSpec(
            id='item_mbp_silver_512',
            values=(
                DefiningValue('Color', 'Silver', 'Silver'),
                DefiningValue('Storage', '512GB', '512 GB SSD'),
            ),
            stock_quantity=8,
        ),
    ]


@pytest.fixture
def macbook_matrix(macbook_variants):
    return build_combination_matrix(macbook_variants)


@pytest.fixture
def macbook_domain():
    return {
        'Color': ['Space Gray', 'Silver'],
        'Storage': ['512GB', '1TB'],
    }


@pytest.fixture
def triangle_variants():
    """Every pair of A1, B1, C1 co-occurs somewhere, the triple never does."""
    return [
        make_variant('v1', A='A1', B='B1', C='C2'),
        make_variant('v2', A='A1', B='B2', C='C1'),
        make_variant('v3', A='A2', B='B1', C='C1'),
    ]


@pytest.fixture
def triangle_matrix(triangle_variants):
    return build_combination_matrix(triangle_variants)


@pytest.fixture
def triangle_domain():
    return {
        'A': ['A1', 'A2'],
        'B': ['B1', 'B2'],
        'C': ['C1', 'C2'],
    }


# =============================================================================
# DATABASE FIXTURES
# =============================================================================

@pytest.fixture
def macbook_product(db):
    """MacBook Pro 14" with MBP-SG-512, MBP-SG-1TB and MBP-S-512."""
    call_command('load_sample_catalog', stdout=StringIO())
    return Product.objects.get(slug='macbook-pro-14')


@pytest.fixture
def api_client():
    from rest_framework.test import APIClient
    return APIClient()
