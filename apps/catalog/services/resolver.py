"""
Resolve a selection to the concrete variants that carry it.

Unlike the pairwise checks, this intersects the item sets of the selected
values directly, so the answer is exact for any number of attributes.
"""

from typing import Hashable, Iterable, List

from .matrix import CombinationMatrix, Selection, VariantSpec


def resolve_variants(selection: Selection, matrix: CombinationMatrix) -> List[Hashable]:
    """
    Return ids of the variants that carry every (name, value) of ``selection``.

    An empty selection resolves to nothing. A complete selection yields at
    most one id; a partial one yields every variant matching it. Ids keep the
    order of the first selected value's item set.
    """
    if not selection:
        return []

    pairs = list(selection.items())
    first_name, first_value = pairs[0]
    valid_items = list(matrix.items(first_name, first_value))

    # Intersect with items from other selections
    for name, value in pairs[1:]:
        if not valid_items:
            break
        items_for_selection = set(matrix.items(name, value))
        valid_items = [item for item in valid_items if item in items_for_selection]

    return valid_items


def has_available_items(selection: Selection, variants: Iterable[VariantSpec]) -> bool:
    """Check the variants directly, without a matrix."""
    variant_list = list(variants)
    if not selection:
        return bool(variant_list)
    return any(variant.carries(selection) for variant in variant_list)
