"""
Availability of attribute options for a (possibly partial) selection.

Given current selections, calculates which options should be available,
disabled or selected for each attribute. The result is recomputed from
scratch on every call.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from .matrix import CombinationMatrix, Selection, VariantSpec
from .resolver import resolve_variants


@dataclass
class OptionState:
    is_available: bool = True
    is_selected: bool = False
    has_stock: Optional[bool] = None
    inventory_count: Optional[int] = None

    def as_dict(self) -> Dict[str, object]:
        data = {
            'is_available': self.is_available,
            'is_selected': self.is_selected,
        }
        if self.has_stock is not None:
            data['has_stock'] = self.has_stock
            data['inventory_count'] = self.inventory_count
        return data


Availability = Dict[str, Dict[str, OptionState]]


def _stock_for(variants: Sequence[VariantSpec], selection: Selection):
    matching = [variant for variant in variants if variant.carries(selection)]
    total = sum(variant.stock_quantity or 0 for variant in matching)
    # A variant without a quantity is not inventory tracked
    has_stock = any(
        variant.in_stock and (variant.stock_quantity is None or variant.stock_quantity > 0)
        for variant in matching
    )
    return has_stock, total


def _is_compatible(
    matrix: CombinationMatrix,
    selection: Selection,
    name: str,
    value: str
) -> bool:
    """Pairwise check of (name, value) against every selection on another attribute."""
    for selected_name, selected_value in selection.items():
        if selected_name == name:
            continue
        if not matrix.is_compatible(selected_name, selected_value, name, value):
            return False
    return True


def calculate_availability(
    matrix: CombinationMatrix,
    selection: Selection,
    domain: Dict[str, List[str]],
    variants: Optional[Iterable[VariantSpec]] = None,
    inventory_aware: bool = False,
    strict: bool = False
) -> Availability:
    """
    Compute is_available / is_selected for every value of ``domain``.

    Values of an attribute that is already selected keep their default
    availability, so a selected value keeps rendering as selected even if it
    went stale; run clean_selections() to reconcile.
    With inventory_aware every value carries has_stock and inventory_count,
    selected attributes included.

    Args:
        matrix: Combination matrix of the product
        selection: Dict of {attribute_name: value}
        domain: Dict of {attribute_name: [values...]}
        variants: Variant snapshots, needed for inventory_aware
        inventory_aware: Also require stock for a value to be available
        strict: Check the whole selection plus the candidate against the
            variants' item sets instead of pairwise co-occurrence

    Returns:
        Dict of {attribute_name: {value: OptionState}}
    """
    variant_list = list(variants or [])
    track_stock = inventory_aware and bool(variant_list)

    availability: Availability = {
        name: {
            value: OptionState(is_selected=selection.get(name) == value)
            for value in values
        }
        for name, values in domain.items()
    }

    if not selection:
        if track_stock:
            for name, states in availability.items():
                for value, state in states.items():
                    has_stock, total = _stock_for(variant_list, {name: value})
                    state.has_stock = has_stock
                    state.inventory_count = total
                    state.is_available = has_stock
        return availability

    for name, states in availability.items():
        if name in selection:
            if track_stock:
                # Stock of each value next to the other selections; its
                # availability stays untouched.
                others = {k: v for k, v in selection.items() if k != name}
                for value, state in states.items():
                    has_stock, total = _stock_for(variant_list, {**others, name: value})
                    state.has_stock = has_stock
                    state.inventory_count = total
            continue

        for value, state in states.items():
            if strict:
                compatible = bool(resolve_variants({**selection, name: value}, matrix))
            else:
                compatible = _is_compatible(matrix, selection, name, value)

            if not compatible:
                state.is_available = False
                if track_stock:
                    state.has_stock = False
                    state.inventory_count = 0
                continue

            if track_stock:
                has_stock, total = _stock_for(variant_list, {**selection, name: value})
                state.has_stock = has_stock
                state.inventory_count = total
                state.is_available = has_stock

    return availability


def availability_as_dict(availability: Availability) -> Dict[str, Dict[str, Dict[str, object]]]:
    return {
        name: {value: state.as_dict() for value, state in states.items()}
        for name, states in availability.items()
    }
