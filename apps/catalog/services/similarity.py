"""
String similarity used to suggest a replacement option when a selection
has to be dropped.

This is a UX convenience only. Catalog correctness never depends on it.
"""

from typing import Callable, Iterable, List, Optional, Set


def get_bigrams(text: str) -> Set[str]:
    """Return the set of character bigrams of ``text``."""
    return {text[i:i + 2] for i in range(len(text) - 1)}


def bigram_similarity(first: str, second: str) -> float:
    """
    Jaccard similarity of the character bigrams of two strings.

    Comparison is case-insensitive. Identical strings score 1.0; a string
    shorter than two characters scores 0.0 against anything else.
    """
    first = (first or '').lower()
    second = (second or '').lower()

    if first == second:
        return 1.0
    if len(first) < 2 or len(second) < 2:
        return 0.0

    bigrams1 = get_bigrams(first)
    bigrams2 = get_bigrams(second)

    union = bigrams1 | bigrams2
    if not union:
        return 0.0
    return len(bigrams1 & bigrams2) / len(union)


def find_closest_option(
    target_value: str,
    candidates: Iterable[str],
    scorer: Callable[[str, str], float] = bigram_similarity
) -> Optional[str]:
    """
    Find the candidate most similar to ``target_value``.

    Example:
        find_closest_option('Gray', ['Space Gray', 'Silver', 'Gold'])
        -> 'Space Gray'

    Returns None when there are no candidates and the only candidate when
    there is just one. Ties keep the first candidate in input order, so when
    nothing overlaps at all the first candidate wins.
    """
    options: List[str] = list(candidates)
    if not options:
        return None
    if len(options) == 1:
        return options[0]

    best_match = options[0]
    best_score = 0.0

    for option in options:
        score = scorer(target_value, option)
        if score > best_score:
            best_score = score
            best_match = option

    return best_match
