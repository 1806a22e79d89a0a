"""Token overlap scoring for pairing edited lines."""

from collections import Counter
from typing import Sequence


def token_similarity(a: Sequence[str], b: Sequence[str]) -> float:
    """
    Score how alike two token sequences are.

    Uses the Dice coefficient over token multisets, so a token repeated in one
    sequence only counts as shared as many times as it occurs in the other.

    Args:
        a: First token sequence
        b: Second token sequence

    Returns:
        Score from 0.0 (nothing shared) to 1.0 (same tokens).  The score is
        symmetric in its arguments.
    """
    if not a and not b:
        return 1.0

    if not a or not b:
        return 0.0

    shared = sum((Counter(a) & Counter(b)).values())
    return (2.0 * shared) / (len(a) + len(b))
