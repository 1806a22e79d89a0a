"""Hunk-to-hunk navigation over parsed rows."""

import bisect
from typing import Sequence


def next_hunk(hunk_positions: Sequence[int], cursor: int) -> int | None:
    """
    Find the first hunk header after the cursor.

    Args:
        hunk_positions: Ascending row indices of hunk headers
        cursor: Current row index

    Returns:
        Row index of the next hunk header, or None if there isn't one
    """
    index = bisect.bisect_right(hunk_positions, cursor)
    if index >= len(hunk_positions):
        return None

    return hunk_positions[index]


def previous_hunk(hunk_positions: Sequence[int], cursor: int) -> int | None:
    """
    Find the last hunk header before the cursor.

    Args:
        hunk_positions: Ascending row indices of hunk headers
        cursor: Current row index

    Returns:
        Row index of the previous hunk header, or None if there isn't one
    """
    index = bisect.bisect_left(hunk_positions, cursor)
    if index == 0:
        return None

    return hunk_positions[index - 1]
