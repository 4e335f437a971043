"""
Validation, cleaning and repair of attribute selections.
"""

import logging
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .matrix import CombinationMatrix, Selection
from .similarity import find_closest_option

logger = logging.getLogger(__name__)

OptionMatcher = Callable[[str, Iterable[str]], Optional[str]]

REPAIR_REPLACED = 'replaced'
REPAIR_DROPPED = 'dropped'
REPAIR_UNKNOWN = 'unknown'


def _conflicts(
    matrix: CombinationMatrix,
    selection: Selection,
    name: str,
    value: str
) -> bool:
    for other_name, other_value in selection.items():
        if other_name == name:
            continue
        if not matrix.is_compatible(name, value, other_name, other_value):
            return True
    return False


def clean_selections(selection: Selection, matrix: CombinationMatrix) -> Selection:
    """
    Remove selections that are unknown or conflict with the others.

    First pass drops values missing from the matrix. Second pass walks the
    remaining entries in order and drops an entry as soon as it is not
    compatible with every entry still kept, so the earlier of two
    conflicting entries goes. Never raises; worst case returns {}.
    """
    valid: Selection = {
        name: value
        for name, value in selection.items()
        if matrix.has(name, value)
    }

    for name, value in list(valid.items()):
        if _conflicts(matrix, valid, name, value):
            del valid[name]

    return valid


def is_valid_combination(selection: Selection, matrix: CombinationMatrix) -> bool:
    """
    Check if a specific combination of attributes is valid.

    Pairwise only: with three or more attributes a True here can still
    resolve to no variant.
    """
    if not selection:
        return True

    for name, value in selection.items():
        if not matrix.has(name, value):
            return False
        if _conflicts(matrix, selection, name, value):
            return False
    return True


def _cleaning_order(selection: Selection, changed_attribute: Optional[str]) -> Selection:
    # The cleaner drops the earlier entry of a conflict, so the user's last
    # click goes last.
    if not changed_attribute or changed_attribute not in selection:
        return dict(selection)
    ordered = {
        name: value
        for name, value in selection.items()
        if name != changed_attribute
    }
    ordered[changed_attribute] = selection[changed_attribute]
    return ordered


def _replacement_candidates(
    matrix: CombinationMatrix,
    kept: Selection,
    name: str,
    dropped_value: str
) -> List[str]:
    return [
        value
        for value in matrix.values(name)
        if value != dropped_value and not _conflicts(matrix, kept, name, value)
    ]


def repair_selection(
    selection: Selection,
    matrix: CombinationMatrix,
    changed_attribute: Optional[str] = None,
    matcher: OptionMatcher = find_closest_option
) -> Tuple[Selection, Dict[str, str]]:
    """
    Clean ``selection`` and try to re-populate what got dropped.

    For every dropped attribute other than ``changed_attribute``, stale
    values included, the matcher
    picks the closest value among those still compatible with the kept
    selection. The pick is accepted only if cleaning leaves the trial
    selection intact.

    Returns:
        (repaired selection in the caller's key order,
         {attribute_name: 'replaced' | 'dropped' | 'unknown'})
    """
    cleaned = clean_selections(_cleaning_order(selection, changed_attribute), matrix)
    outcomes: Dict[str, str] = {}

    for name, value in selection.items():
        if name in cleaned:
            continue

        failed = REPAIR_DROPPED if matrix.has(name, value) else REPAIR_UNKNOWN
        if name == changed_attribute:
            outcomes[name] = failed
            continue

        candidates = _replacement_candidates(matrix, cleaned, name, value)
        replacement = matcher(value, candidates)

        if replacement is None:
            outcomes[name] = failed
            continue

        trial = {**cleaned, name: replacement}
        if clean_selections(trial, matrix) == trial:
            cleaned = trial
            outcomes[name] = REPAIR_REPLACED
            logger.info(
                "Replaced %s=%r with %r after selection change",
                name, value, replacement
            )
        else:
            outcomes[name] = failed

    repaired = {
        name: cleaned[name]
        for name in selection
        if name in cleaned
    }
    return repaired, outcomes


def get_initial_selections(
    domain: Dict[str, List[str]],
    matrix: CombinationMatrix
) -> Selection:
    """
    Pre-select only the first attribute with its first value.

    Returns {} when the domain is empty or that value is not in the matrix.
    """
    if not domain:
        return {}

    first_name = next(iter(domain))
    first_values = domain[first_name]
    if not first_values:
        return {}

    first_value = first_values[0]
    if matrix.has(first_name, first_value):
        return {first_name: first_value}
    return {}
