"""
Unified diff interpretation for side-by-side viewing.

This package turns unified diff text into line-addressable rows, pairs deleted
and inserted lines that represent the same edit, and computes word-level
differences for paired lines.
"""

from tdiff.tdiff_aligner import EditBlockAligner, align_block
from tdiff.tdiff_exceptions import TDiffError, TDiffSettingsError
from tdiff.tdiff_intraline import highlight_intraline, is_edit_row
from tdiff.tdiff_navigation import next_hunk, previous_hunk
from tdiff.tdiff_parser import UnifiedDiffParser, parse_unified
from tdiff.tdiff_settings import TDiffSettings
from tdiff.tdiff_similarity import token_similarity
from tdiff.tdiff_token_differ import diff_tokens
from tdiff.tdiff_tokenizer import TokenClass, token_class, tokenize
from tdiff.tdiff_types import (
    AlignedPair,
    IntralineSegment,
    Row,
    RowKind,
    TokenOp,
    TokenOpKind,
)

__all__ = [
    # Exceptions
    'TDiffError',
    'TDiffSettingsError',
    # Types
    'AlignedPair',
    'IntralineSegment',
    'Row',
    'RowKind',
    'TokenOp',
    'TokenOpKind',
    'TokenClass',
    # Settings
    'TDiffSettings',
    # Core
    'tokenize',
    'token_class',
    'diff_tokens',
    'token_similarity',
    'EditBlockAligner',
    'align_block',
    'UnifiedDiffParser',
    'parse_unified',
    # Presentation helpers
    'highlight_intraline',
    'is_edit_row',
    'next_hunk',
    'previous_hunk',
]
