"""
Service for navigating between the variants of a product.
Dependencies are INFERRED from actual variant data, not configured manually.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional, Tuple

from django.core.cache import cache

from apps.catalog.conf import catalog_setting, get_option_matcher, get_option_ordering
from apps.catalog.models import Product, Variant

from .availability import calculate_availability
from .matrix import (
    CombinationMatrix,
    VariantSpec,
    build_attribute_domain,
    build_combination_matrix,
    describe_matrix,
)
from .resolver import resolve_variants
from .selection import get_initial_selections, repair_selection

logger = logging.getLogger(__name__)

CACHE_KEY_TEMPLATE = 'catalog:variant-options:{product_id}'


@dataclass
class ProductOptions:
    """Everything derived from a product's active variants, cached as one unit."""
    matrix: CombinationMatrix
    domain: Dict[str, List[str]]
    variants: Tuple[VariantSpec, ...] = ()
    attribute_names: Dict[str, str] = field(default_factory=dict)
    option_details: Dict[str, Dict[str, Dict[str, Any]]] = field(default_factory=dict)


class VariantNavigationService:
    """
    Service to handle navigation between the variants of a product.
    Dependencies are INFERRED from actual variant data, not configured manually.
    """

    @staticmethod
    def cache_key(product_id) -> str:
        return CACHE_KEY_TEMPLATE.format(product_id=product_id)

    @staticmethod
    def invalidate(product_id) -> None:
        """Drop the cached options of a product so the next call rebuilds them."""
        cache.delete(VariantNavigationService.cache_key(product_id))
        logger.debug("Invalidated variant options for product %s", product_id)

    @staticmethod
    def get_variant_specs(product: Product) -> Tuple[VariantSpec, ...]:
        """Snapshot the active variants of ``product``."""
        return product.get_variant_specs()

    @staticmethod
    def build_product_options(product: Product) -> ProductOptions:
        variants = VariantNavigationService.get_variant_specs(product)
        matrix = build_combination_matrix(variants)
        present = build_attribute_domain(variants, sort=False)

        options = product.get_attribute_options(type_slugs=present)

        attribute_names: Dict[str, str] = {}
        option_details: Dict[str, Dict[str, Dict[str, Any]]] = {}
        ordered_domain: Dict[str, List[str]] = {}

        for opt in options:
            slug = opt.attribute_type.slug
            if opt.value not in present.get(slug, ()):
                continue
            attribute_names[slug] = opt.attribute_type.name
            option_details.setdefault(slug, {})[opt.value] = opt.get_option_details()
            ordered_domain.setdefault(slug, []).append(opt.value)

        if get_option_ordering() == 'natural':
            domain = build_attribute_domain(variants, sort=True)
        else:
            domain = ordered_domain

        describe_matrix(matrix)
        return ProductOptions(
            matrix=matrix,
            domain=domain,
            variants=variants,
            attribute_names=attribute_names,
            option_details=option_details,
        )

    @staticmethod
    def get_combination_data(product: Product) -> ProductOptions:
        """
        Return the product's matrix and attribute domain, building them on a
        cache miss. Signals drop the cached copy whenever variants change.
        """
        key = VariantNavigationService.cache_key(product.pk)
        data = cache.get(key)
        if data is not None:
            logger.debug("Variant options cache hit for product %s", product.pk)
            return data

        logger.debug("Variant options cache miss for product %s", product.pk)
        data = VariantNavigationService.build_product_options(product)
        cache.set(key, data, catalog_setting('OPTIONS_CACHE_TIMEOUT'))
        return data

    @staticmethod
    def get_all_available_options(
        product: Product,
        current_selections: Dict[str, str],
        data: Optional[ProductOptions] = None
    ) -> List[Dict[str, Any]]:
        """
        Get every option of every attribute with its availability, given
        current selections.

        Example:
            current_selections = {'color': 'Silver'}
            -> storage '1TB' comes back with is_available False because no
               Silver variant has 1TB

        Returns:
            List of attributes in display order, each with its options
        """
        if data is None:
            data = VariantNavigationService.get_combination_data(product)

        availability = calculate_availability(
            data.matrix,
            current_selections,
            data.domain,
            variants=data.variants,
            inventory_aware=catalog_setting('INVENTORY_AWARE'),
            strict=catalog_setting('STRICT_AVAILABILITY'),
        )

        result = []
        for slug, values in data.domain.items():
            details = data.option_details.get(slug, {})
            options = []
            for value in values:
                state = availability[slug][value]
                option = {
                    'id': details.get(value, {}).get('id'),
                    'value': value,
                    'display_value': details.get(value, {}).get('display_value', value),
                    'color_hex': details.get(value, {}).get('color_hex', ''),
                }
                option.update(state.as_dict())
                options.append(option)

            result.append({
                'name': data.attribute_names.get(slug, slug),
                'slug': slug,
                'options': options,
            })

        return result

    @staticmethod
    def find_matching_variants(
        product: Product,
        selections: Dict[str, str],
        data: Optional[ProductOptions] = None
    ) -> List[Hashable]:
        """Ids of the active variants carrying every selected option."""
        if data is None:
            data = VariantNavigationService.get_combination_data(product)
        return resolve_variants(selections, data.matrix)

    @staticmethod
    def get_options_payload(product: Product, selections: Dict[str, str]) -> Dict[str, Any]:
        """
        Availability for ``selections``. When nothing is selected yet the
        suggested pre-selection is included.
        """
        data = VariantNavigationService.get_combination_data(product)
        payload = {
            'product_slug': product.slug,
            'selections': selections,
            'attributes': VariantNavigationService.get_all_available_options(
                product, selections, data
            ),
            'matching_variant_ids': resolve_variants(selections, data.matrix),
        }
        if not selections:
            payload['initial_selections'] = get_initial_selections(data.domain, data.matrix)
        return payload

    @staticmethod
    def select_option(
        product: Product,
        selections: Dict[str, str],
        changed_attribute: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Reconcile the selection after the user picked ``changed_attribute``.

        Conflicting older picks are replaced by their closest compatible
        value when one exists, otherwise dropped.
        """
        data = VariantNavigationService.get_combination_data(product)
        repaired, outcomes = repair_selection(
            selections,
            data.matrix,
            changed_attribute=changed_attribute,
            matcher=get_option_matcher(),
        )
        variant_ids = resolve_variants(repaired, data.matrix)
        is_complete = bool(data.domain) and set(repaired) == set(data.domain)

        return {
            'product_slug': product.slug,
            'selections': repaired,
            'changes': outcomes,
            'is_complete': is_complete,
            'attributes': VariantNavigationService.get_all_available_options(
                product, repaired, data
            ),
            'matching_variant_ids': variant_ids,
            'variant': VariantNavigationService._variant_summary(
                variant_ids if is_complete else []
            ),
        }

    @staticmethod
    def find_best_match(product: Product, selections: Dict[str, str]) -> Dict[str, Any]:
        """
        Resolve ``selections`` to a purchasable variant.

        Returns dict with:
        - type: 'variant' when exactly one variant matches, 'variants' when the
          selection is partial, 'none' when nothing matches
        - variant_ids: every matching variant id
        - variant: the resolved variant, only for type 'variant'
        """
        variant_ids = VariantNavigationService.find_matching_variants(product, selections)

        if len(variant_ids) == 1:
            match_type = 'variant'
        elif variant_ids:
            match_type = 'variants'
        else:
            match_type = 'none'

        return {
            'type': match_type,
            'product_slug': product.slug,
            'selections': selections,
            'variant_ids': variant_ids,
            'variant': VariantNavigationService._variant_summary(variant_ids),
        }

    @staticmethod
    def _variant_summary(variant_ids: List[Hashable]) -> Optional[Dict[str, Any]]:
        if len(variant_ids) != 1:
            return None

        variant = Variant.objects.select_related('product').prefetch_related(
            'variantattribute_set__attribute_option__attribute_type'
        ).filter(pk=variant_ids[0]).first()
        if variant is None:
            return None

        return {
            'id': variant.id,
            'sku': variant.sku,
            'name': variant.name or variant.get_display_name(),
            'sell_price': str(variant.sell_price),
            'is_in_stock': variant.is_in_stock,
            'attributes': variant.get_options_dict(),
        }
