"""
Combination matrix for product variants.

The matrix is INFERRED from the variants themselves: for every
(attribute, value) pair it records which variants carry the pair and which
values of every other attribute appear next to it on at least one variant.

Example, for the variants (Space Gray, 512GB), (Space Gray, 1TB),
(Silver, 512GB):

    matrix.co_occurring('color', 'Silver', 'storage')   -> ('512GB',)
    matrix.items('storage', '512GB')                      -> (v1, v3)

Only pairwise co-occurrence is stored. Joint validity of three or more
values must be checked against the item sets (see resolver.py).
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, List, Optional, Tuple

from .ordering import sort_attributes_and_values

logger = logging.getLogger(__name__)

Selection = Dict[str, str]


@dataclass(frozen=True)
class DefiningValue:
    """One defining specification value of a variant, e.g. Color=Silver."""
    name: str
    value: str
    display_label: Optional[str] = None


@dataclass(frozen=True)
class VariantSpec:
    """
    Immutable snapshot of a purchasable variant.

    Stock data is optional and only read by inventory-aware availability.
    """
    id: Hashable
    values: Tuple[DefiningValue, ...] = ()
    stock_quantity: Optional[int] = None
    in_stock: bool = True

    def value_for(self, name: str) -> Optional[str]:
        for spec in self.values:
            if spec.name == name:
                return spec.value
        return None

    def carries(self, selection: Selection) -> bool:
        """True if this variant has every (name, value) pair of ``selection``."""
        return all(
            self.value_for(name) == value
            for name, value in selection.items()
        )


@dataclass(frozen=True)
class MatrixEntry:
    items: Tuple[Hashable, ...] = ()
    combinations: Dict[str, Tuple[str, ...]] = field(default_factory=dict)


class CombinationMatrix:
    """
    Read-only view of attribute -> value -> MatrixEntry.

    Instances are never mutated after build_combination_matrix() returns,
    so one matrix can be shared between callers and stored in the cache.
    """

    def __init__(self, entries: Optional[Dict[str, Dict[str, MatrixEntry]]] = None):
        self._entries = entries or {}

    def __repr__(self):
        return f"<CombinationMatrix attributes={list(self._entries)}>"

    def __eq__(self, other):
        if not isinstance(other, CombinationMatrix):
            return NotImplemented
        return self._entries == other._entries

    def __bool__(self):
        return bool(self._entries)

    def __contains__(self, name):
        return name in self._entries

    def attributes(self) -> List[str]:
        return list(self._entries)

    def values(self, name: str) -> List[str]:
        """Values of ``name`` that appear on at least one variant."""
        return list(self._entries.get(name, {}))

    def entry(self, name: str, value: str) -> Optional[MatrixEntry]:
        return self._entries.get(name, {}).get(value)

    def has(self, name: str, value: str) -> bool:
        return self.entry(name, value) is not None

    def items(self, name: str, value: str) -> Tuple[Hashable, ...]:
        entry = self.entry(name, value)
        return entry.items if entry else ()

    def co_occurring(self, name: str, value: str, other_name: str) -> Tuple[str, ...]:
        entry = self.entry(name, value)
        if entry is None:
            return ()
        return entry.combinations.get(other_name, ())

    def is_compatible(self, name: str, value: str, other_name: str, other_value: str) -> bool:
        """
        Pairwise test: does ``other_value`` appear next to (name, value)?

        An unknown (name, value) pair is never compatible with anything.
        """
        return other_value in self.co_occurring(name, value, other_name)

    def to_dict(self) -> Dict[str, Dict[str, Dict[str, Any]]]:
        """Plain nested dict, for debugging and API payloads."""
        return {
            name: {
                value: {
                    'available_items': list(entry.items),
                    'valid_combinations': {
                        other: list(values)
                        for other, values in entry.combinations.items()
                    },
                }
                for value, entry in values.items()
            }
            for name, values in self._entries.items()
        }


def build_combination_matrix(variants: Iterable[VariantSpec]) -> CombinationMatrix:
    """
    Scan all variants and build the pairwise compatibility index.

    Never raises. A pair with an empty attribute name or value contributes
    nothing; a variant with a single attribute registers its item membership
    but no combinations.
    """
    items: Dict[str, Dict[str, List[Hashable]]] = {}
    combinations: Dict[str, Dict[str, Dict[str, List[str]]]] = {}
    variant_count = 0

    for variant in variants:
        variant_count += 1
        pairs = [
            (spec.name, spec.value)
            for spec in variant.values
            if spec.name and spec.value is not None
        ]

        for name, value in pairs:
            value_items = items.setdefault(name, {}).setdefault(value, [])
            if variant.id not in value_items:
                value_items.append(variant.id)

            value_combinations = combinations.setdefault(name, {}).setdefault(value, {})

            # Map this value to every other attribute on the same variant
            for other_name, other_value in pairs:
                if other_name == name:
                    continue
                seen = value_combinations.setdefault(other_name, [])
                if other_value not in seen:
                    seen.append(other_value)

    entries = {
        name: {
            value: MatrixEntry(
                items=tuple(value_items),
                combinations={
                    other: tuple(seen)
                    for other, seen in combinations[name][value].items()
                },
            )
            for value, value_items in values.items()
        }
        for name, values in items.items()
    }

    logger.debug(
        "Built combination matrix from %d variants: %d attributes",
        variant_count, len(entries)
    )
    return CombinationMatrix(entries)


def build_attribute_domain(
    variants: Iterable[VariantSpec],
    sort: bool = True
) -> Dict[str, List[str]]:
    """
    Every attribute name and its distinct values across ``variants``.

    With ``sort`` the domain is put in storefront order (color first, sizes
    and capacities numerically), otherwise first-seen order is kept.
    """
    domain: Dict[str, List[str]] = {}

    for variant in variants:
        for spec in variant.values:
            if not spec.name or spec.value is None:
                continue
            values = domain.setdefault(spec.name, [])
            if spec.value not in values:
                values.append(spec.value)

    if sort:
        return sort_attributes_and_values(domain)
    return domain


def get_display_label(variants: Iterable[VariantSpec], name: str, value: str) -> str:
    """First display label recorded for (name, value), or the value itself."""
    for variant in variants:
        for spec in variant.values:
            if spec.name == name and spec.value == value and spec.display_label:
                return spec.display_label
    return value


def get_all_attribute_names(variants: Iterable[VariantSpec]) -> List[str]:
    return sorted({
        spec.name
        for variant in variants
        for spec in variant.values
        if spec.name
    })


def describe_matrix(matrix: CombinationMatrix) -> None:
    """Dump the matrix structure to the debug log."""
    if not logger.isEnabledFor(logging.DEBUG):
        return

    logger.debug("=== Attribute Combination Matrix ===")
    for name, values in matrix.to_dict().items():
        logger.debug("%s:", name)
        for value, data in values.items():
            logger.debug("  %s:", value)
            logger.debug(
                "    Available items: %s",
                ', '.join(str(item) for item in data['available_items'])
            )
            logger.debug("    Valid combinations:")
            for other_name, other_values in data['valid_combinations'].items():
                logger.debug("      %s: %s", other_name, ', '.join(other_values))
