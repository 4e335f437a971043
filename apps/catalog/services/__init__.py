"""
Variant combination services.

The modules here are plain Python and never touch the ORM, so a built
matrix can be shared and cached freely. variant_navigation.py is the
Django-facing adapter and is imported from there directly.
"""

from .similarity import bigram_similarity, find_closest_option
from .matrix import (
    CombinationMatrix,
    DefiningValue,
    MatrixEntry,
    VariantSpec,
    build_attribute_domain,
    build_combination_matrix,
    describe_matrix,
    get_all_attribute_names,
    get_display_label,
)
from .availability import OptionState, availability_as_dict, calculate_availability
from .selection import (
    clean_selections,
    get_initial_selections,
    is_valid_combination,
    repair_selection,
)
from .resolver import has_available_items, resolve_variants

__all__ = [
    'bigram_similarity',
    'find_closest_option',
    'CombinationMatrix',
    'DefiningValue',
    'MatrixEntry',
    'VariantSpec',
    'build_attribute_domain',
    'build_combination_matrix',
    'describe_matrix',
    'get_all_attribute_names',
    'get_display_label',
    'OptionState',
    'availability_as_dict',
    'calculate_availability',
    'clean_selections',
    'get_initial_selections',
    'is_valid_combination',
    'repair_selection',
    'has_available_items',
    'resolve_variants',
]
