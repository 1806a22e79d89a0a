"""Shared fixtures and utilities for tdiff tests."""

from typing import List

import pytest

from tdiff.tdiff_aligner import EditBlockAligner
from tdiff.tdiff_parser import UnifiedDiffParser
from tdiff.tdiff_settings import TDiffSettings
from tdiff.tdiff_types import Row, RowKind


@pytest.fixture
def parser():
    """Create a parser with default settings."""
    return UnifiedDiffParser()


@pytest.fixture
def parser_custom():
    """Factory for parsers with custom settings."""
    def _create_parser(**kwargs):
        return UnifiedDiffParser(TDiffSettings(**kwargs))
    return _create_parser


@pytest.fixture
def aligner():
    """Create an aligner with default settings."""
    return EditBlockAligner()


class RowTestHelpers:
    """Helper utilities for row assertions."""

    @staticmethod
    def content_rows(rows: List[Row]) -> List[Row]:
        """Drop META and HUNK_HEADER rows."""
        return [row for row in rows if row.is_content]

    @staticmethod
    def assert_pair(row: Row, old_text: str, new_text: str) -> None:
        """Check a row is a paired edit."""
        assert row.kind == RowKind.CONTEXT
        assert row.old_text == old_text
        assert row.new_text == new_text
        assert row.old_line_number is not None
        assert row.new_line_number is not None

    @staticmethod
    def assert_deletion(row: Row, old_text: str) -> None:
        """Check a row is a pure deletion."""
        assert row.kind == RowKind.DELETION
        assert row.old_text == old_text
        assert row.new_text == ""
        assert row.old_line_number is not None
        assert row.new_line_number is None

    @staticmethod
    def assert_addition(row: Row, new_text: str) -> None:
        """Check a row is a pure addition."""
        assert row.kind == RowKind.ADDITION
        assert row.new_text == new_text
        assert row.old_text == ""
        assert row.new_line_number is not None
        assert row.old_line_number is None

    @staticmethod
    def assert_row_invariants(rows: List[Row]) -> None:
        """Check every row's kind agrees with its line numbers."""
        for row in rows:
            if row.kind == RowKind.DELETION:
                assert row.old_line_number is not None and row.new_line_number is None

            elif row.kind == RowKind.ADDITION:
                assert row.new_line_number is not None and row.old_line_number is None

            elif row.kind == RowKind.CONTEXT:
                assert (row.old_line_number is None) == (row.new_line_number is None)


@pytest.fixture
def helpers():
    """Provide row helper utilities."""
    return RowTestHelpers
