"""Shared dataclasses for diff interpretation."""

from dataclasses import dataclass
from enum import Enum, auto


class RowKind(Enum):
    """Kinds of row in the side-by-side model."""
    META = auto()
    HUNK_HEADER = auto()
    DELETION = auto()
    ADDITION = auto()
    CONTEXT = auto()  # Unchanged lines and paired edits


@dataclass(frozen=True)
class Row:
    """Represents one renderable line of a side-by-side diff."""

    kind: RowKind
    old_text: str = ""
    new_text: str = ""
    old_line_number: int | None = None  # 1-indexed, None if no old-side content
    new_line_number: int | None = None  # 1-indexed, None if no new-side content

    @property
    def is_pure_deletion(self) -> bool:
        """True if only the old side is present."""
        return self.old_line_number is not None and self.new_line_number is None

    @property
    def is_pure_addition(self) -> bool:
        """True if only the new side is present."""
        return self.new_line_number is not None and self.old_line_number is None

    @property
    def is_content(self) -> bool:
        """True for rows that carry hunk content rather than diff metadata."""
        return self.kind not in (RowKind.META, RowKind.HUNK_HEADER)


class TokenOpKind(Enum):
    """Kinds of step in a token-level edit script."""
    EQUAL = auto()
    DELETE = auto()
    INSERT = auto()


@dataclass(frozen=True)
class TokenOp:
    """One step of a token-level edit script."""

    kind: TokenOpKind
    token: str


@dataclass(frozen=True)
class AlignedPair:
    """
    One output row of edit-block alignment.

    Indices refer to the deletion and insertion lists handed to the aligner.
    A pair with both indices set is a paired edit.
    """

    del_index: int | None
    add_index: int | None


@dataclass(frozen=True)
class IntralineSegment:
    """A run of text within one side of a paired edit."""

    text: str
    changed: bool
