"""
Settings for the catalog app.

Projects override any of these through a CATALOG dict in settings:

    CATALOG = {
        'STRICT_AVAILABILITY': True,
    }
"""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

DEFAULTS = {
    # Seconds a built combination matrix stays cached per product
    'OPTIONS_CACHE_TIMEOUT': 60 * 60,
    # Check availability against the variants' item sets instead of
    # pairwise co-occurrence
    'STRICT_AVAILABILITY': False,
    # Disable options whose matching variants are all out of stock
    'INVENTORY_AWARE': False,
    # Picks a replacement when a selection has to be dropped
    'OPTION_MATCHER': 'apps.catalog.services.similarity.find_closest_option',
    # 'display_order' (admin configured) or 'natural' (color first, sizes
    # and capacities numerically)
    'OPTION_ORDERING': 'display_order',
}

ORDERING_CHOICES = ('display_order', 'natural')


def catalog_setting(name):
    if name not in DEFAULTS:
        raise ImproperlyConfigured(f"Unknown catalog setting: {name}")
    user_settings = getattr(settings, 'CATALOG', None) or {}
    return user_settings.get(name, DEFAULTS[name])


def get_option_matcher():
    path = catalog_setting('OPTION_MATCHER')
    if callable(path):
        return path
    try:
        return import_string(path)
    except ImportError as e:
        raise ImproperlyConfigured(
            f"CATALOG['OPTION_MATCHER'] could not be imported: {path}"
        ) from e


def get_option_ordering():
    ordering = catalog_setting('OPTION_ORDERING')
    if ordering not in ORDERING_CHOICES:
        raise ImproperlyConfigured(
            f"CATALOG['OPTION_ORDERING'] must be one of {ORDERING_CHOICES}, got {ordering!r}"
        )
    return ordering
