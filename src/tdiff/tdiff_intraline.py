"""Word-level highlighting for paired edit rows."""

from typing import List, Tuple

from tdiff.tdiff_token_differ import diff_tokens
from tdiff.tdiff_tokenizer import tokenize
from tdiff.tdiff_types import IntralineSegment, Row, TokenOpKind


def is_edit_row(row: Row) -> bool:
    """
    Determine if a row pairs two different lines.

    Args:
        row: Row to check

    Returns:
        True if the row is content with differing, non-empty old and new text
    """
    if not row.is_content:
        return False

    if not row.old_text or not row.new_text:
        return False

    return row.old_text != row.new_text


def _append_segment(segments: List[IntralineSegment], text: str, changed: bool) -> None:
    """Add text to a segment list, merging with the last segment where possible."""
    if segments and segments[-1].changed == changed:
        segments[-1] = IntralineSegment(segments[-1].text + text, changed)
        return

    segments.append(IntralineSegment(text, changed))


def highlight_intraline(
    old_text: str,
    new_text: str
) -> Tuple[List[IntralineSegment], List[IntralineSegment]]:
    """
    Split both sides of an edit into changed and unchanged segments.

    Args:
        old_text: Old side of the edit
        new_text: New side of the edit

    Returns:
        Tuple of (old segments, new segments).  Joining the segment texts of a
        side gives back that side's text.
    """
    old_segments: List[IntralineSegment] = []
    new_segments: List[IntralineSegment] = []

    for op in diff_tokens(tokenize(old_text), tokenize(new_text)):
        if op.kind == TokenOpKind.EQUAL:
            _append_segment(old_segments, op.token, False)
            _append_segment(new_segments, op.token, False)

        elif op.kind == TokenOpKind.DELETE:
            _append_segment(old_segments, op.token, True)

        else:
            _append_segment(new_segments, op.token, True)

    return old_segments, new_segments
