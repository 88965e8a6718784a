"""
Cheap similarity estimates used to skip alignment of unrelated lines.

Both ratios follow the definitions in ``difflib.SequenceMatcher`` and are upper
bounds on ``SequenceMatcher.ratio()``, so a value under the threshold guarantees
the real ratio is under it too.
"""

from collections import Counter
from typing import Sequence

DEFAULT_SIMILARITY_THRESHOLD = 0.4


def _calculate_ratio(matches: int, length: int) -> float:
    if length:
        return 2.0 * matches / length
    return 1.0


def real_quick_ratio(old_tokens: Sequence[str], new_tokens: Sequence[str]) -> float:
    """Upper bound from the sequence lengths alone."""
    la, lb = len(old_tokens), len(new_tokens)
    return _calculate_ratio(min(la, lb), la + lb)


def quick_ratio(old_tokens: Sequence[str], new_tokens: Sequence[str]) -> float:
    """
    Upper bound on the alignment ratio from token multiset overlap.

    Ordering is ignored, so ``quick_ratio(["a", "b"], ["b", "a"])`` is 1.0 even though
    only one of the tokens can be matched in order.
    """
    overlap = Counter(old_tokens) & Counter(new_tokens)
    return _calculate_ratio(sum(overlap.values()), len(old_tokens) + len(new_tokens))


def is_dissimilar(old_tokens: Sequence[str], new_tokens: Sequence[str],
                  threshold: float = DEFAULT_SIMILARITY_THRESHOLD) -> bool:
    """True when the sequences are too different to be worth aligning."""
    if real_quick_ratio(old_tokens, new_tokens) < threshold:
        return True
    return quick_ratio(old_tokens, new_tokens) < threshold


def validate_threshold(threshold) -> float:
    threshold = float(threshold)
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f'Similarity threshold must be between 0 and 1, got {threshold}')
    return threshold
