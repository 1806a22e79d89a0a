"""Longest-common-subsequence diff over token sequences."""

from typing import List, Sequence

from tdiff.tdiff_types import TokenOp, TokenOpKind


def diff_tokens(a: Sequence[str], b: Sequence[str]) -> List[TokenOp]:
    """
    Compute an edit script that turns one token sequence into another.

    The full LCS table is kept because the script is recovered by walking it
    forwards from the start. Where deleting and inserting are equally good the
    deletion is emitted first, so symmetric inputs always give the same script.

    Args:
        a: Old tokens
        b: New tokens

    Returns:
        Ordered edit script.  EQUAL and DELETE tokens rebuild `a`; EQUAL and
        INSERT tokens rebuild `b`.
    """
    n = len(a)
    m = len(b)
    if n == 0 and m == 0:
        return []

    # dp[i][j] is the LCS length of a[i:] and b[j:]
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        row = dp[i]
        below = dp[i + 1]
        for j in range(m - 1, -1, -1):
            if a[i] == b[j]:
                row[j] = below[j + 1] + 1

            else:
                row[j] = max(below[j], row[j + 1])

    ops: List[TokenOp] = []
    i = 0
    j = 0
    while i < n and j < m:
        if a[i] == b[j]:
            ops.append(TokenOp(TokenOpKind.EQUAL, a[i]))
            i += 1
            j += 1
            continue

        if dp[i + 1][j] >= dp[i][j + 1]:
            ops.append(TokenOp(TokenOpKind.DELETE, a[i]))
            i += 1

        else:
            ops.append(TokenOp(TokenOpKind.INSERT, b[j]))
            j += 1

    while i < n:
        ops.append(TokenOp(TokenOpKind.DELETE, a[i]))
        i += 1

    while j < m:
        ops.append(TokenOp(TokenOpKind.INSERT, b[j]))
        j += 1

    return ops
