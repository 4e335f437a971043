"""
Storefront ordering of attributes and their values.

1. Color attributes come first, the others alphabetically
   regardless of case.
2. Values are sorted by attribute kind:
   - colors: alphabetically
   - sizes: numerically when every value is a number with an optional unit
   - storage / memory / capacity: by capacity (128GB < 1TB)
   - everything else: alphabetically
"""

import re
from typing import Dict, List

NUMERIC_SIZE_PATTERN = re.compile(r'^(\d+(?:\.\d+)?)\s*([a-zA-Z"\']*)?$')
STORAGE_SIZE_PATTERN = re.compile(r'^(\d+(?:\.\d+)?)(k|m|g|t)?')

STORAGE_MULTIPLIERS = {
    'k': 1024,
    'm': 1024 ** 2,
    'g': 1024 ** 3,
    't': 1024 ** 4,
}


def _is_color(name: str) -> bool:
    lowered = name.lower()
    return 'color' in lowered or 'colour' in lowered


def _is_capacity(name: str) -> bool:
    lowered = name.lower()
    return 'storage' in lowered or 'memory' in lowered or 'capacity' in lowered


def parse_storage_size(storage: str) -> float:
    """
    Parse a storage string to bytes for sorting.
    Handles: 128GB, 1TB, 512 GB SSD, etc. Unparseable values are 0.
    """
    clean = re.sub(r'[^0-9.kmgt]', '', storage.lower())
    match = STORAGE_SIZE_PATTERN.match(clean)
    if not match:
        return 0
    value = float(match.group(1))
    return value * STORAGE_MULTIPLIERS.get(match.group(2), 1)


def sort_attribute_values(name: str, values: List[str]) -> List[str]:
    if _is_color(name):
        return sorted(values)

    if 'size' in name.lower():
        if all(NUMERIC_SIZE_PATTERN.match(value.strip()) for value in values):
            return sorted(
                values,
                key=lambda value: float(NUMERIC_SIZE_PATTERN.match(value.strip()).group(1))
            )

    if _is_capacity(name):
        return sorted(values, key=parse_storage_size)

    return sorted(values)


def sort_attributes_and_values(attributes: Dict[str, List[str]]) -> Dict[str, List[str]]:
    ordered_names = sorted(
        attributes,
        key=lambda name: (not _is_color(name), name.lower(), name)
    )
    return {
        name: sort_attribute_values(name, attributes[name])
        for name in ordered_names
    }
