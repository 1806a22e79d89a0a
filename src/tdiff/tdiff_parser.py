"""
Unified diff interpretation.

Turns unified diff text into rows for a side-by-side view.  Runs of deleted
and inserted lines are buffered and handed to the edit-block aligner at each
block boundary, so that lines representing the same logical edit share a row.
"""

from enum import Enum, auto
import logging
import re
from typing import List, Tuple

from tdiff.tdiff_aligner import EditBlockAligner
from tdiff.tdiff_settings import TDiffSettings
from tdiff.tdiff_types import Row, RowKind


class ParserState(Enum):
    """Where the parser is within the diff."""
    PREAMBLE = auto()
    IN_HUNK = auto()


class UnifiedDiffParser:
    """
    Parser for unified diff text.

    The parser never raises on bad input.  Anything it cannot place inside a
    hunk is emitted unchanged as a META row.
    """

    HUNK_HEADER_PATTERN = re.compile(r'^@@ -(\d+)(?:,\d+)? \+(\d+)(?:,\d+)? @@')

    META_PREFIXES = (
        'diff --git ',
        'index ',
        '--- ',
        '+++ ',
        'new file mode ',
        'deleted file mode ',
        'similarity index ',
        'rename from ',
        'rename to ',
        'old mode ',
        'new mode ',
        'Binary files ',
        'GIT binary patch',
    )

    FILE_HEADER_PREFIXES = (
        'diff --git ',
        'index ',
        '--- ',
        '+++ ',
    )

    def __init__(self, settings: TDiffSettings | None = None):
        """
        Initialize the parser.

        Args:
            settings: Engine settings, or None to use the defaults
        """
        self._settings = settings or TDiffSettings.create_default()
        self._aligner = EditBlockAligner(
            similarity_threshold=self._settings.similarity_threshold,
            comparison_limit=self._settings.comparison_limit
        )
        self._logger = logging.getLogger("UnifiedDiffParser")

    def settings(self) -> TDiffSettings:
        """Get the settings this parser was created with."""
        return self._settings

    def parse(self, diff_text: str) -> Tuple[List[Row], List[int]]:
        """
        Parse unified diff text into side-by-side rows.

        Args:
            diff_text: Unified diff text

        Returns:
            Tuple of (rows, indices of the hunk header rows)
        """
        diff_text = diff_text.replace('\r\n', '\n')
        if not diff_text.strip():
            return [], []

        if 'Binary files' in diff_text and ' differ' in diff_text:
            self._logger.debug("Binary file change, skipping diff body")
            placeholder = self._settings.binary_placeholder
            return [Row(RowKind.META, placeholder, placeholder)], []

        rows: List[Row] = []
        hunk_positions: List[int] = []
        deletions: List[str] = []
        insertions: List[str] = []
        old_line = 0
        new_line = 0
        state = ParserState.PREAMBLE

        def flush() -> None:
            nonlocal old_line, new_line
            if not deletions and not insertions:
                return

            for pair in self._aligner.align(deletions, insertions):
                old_text = ""
                new_text = ""
                old_number: int | None = None
                new_number: int | None = None
                if pair.del_index is not None:
                    old_text = deletions[pair.del_index]
                    old_number = old_line
                    old_line += 1

                if pair.add_index is not None:
                    new_text = insertions[pair.add_index]
                    new_number = new_line
                    new_line += 1

                kind = RowKind.CONTEXT
                if new_number is None:
                    kind = RowKind.DELETION

                elif old_number is None:
                    kind = RowKind.ADDITION

                rows.append(Row(kind, old_text, new_text, old_number, new_number))

            deletions.clear()
            insertions.clear()

        for line in diff_text.rstrip('\n').split('\n'):
            if line.startswith('@@ '):
                flush()
                old_line, new_line = self._parse_hunk_header(line)
                state = ParserState.IN_HUNK
                hunk_positions.append(len(rows))
                rows.append(Row(RowKind.HUNK_HEADER, line, line))
                continue

            if state == ParserState.PREAMBLE:
                if self.is_meta_line(line) and self._is_hidden_file_header(line):
                    continue

                # Preamble text is never hunk content, whether or not we recognise it
                rows.append(Row(RowKind.META, line, line))
                continue

            if not line:
                flush()
                rows.append(Row(RowKind.CONTEXT))
                continue

            marker = line[0]
            if marker == '-':
                deletions.append(line[1:])

            elif marker == '+':
                insertions.append(line[1:])

            elif marker == ' ':
                flush()
                rows.append(Row(RowKind.CONTEXT, line[1:], line[1:], old_line, new_line))
                old_line += 1
                new_line += 1

            else:
                # "\ No newline at end of file" and anything we don't understand
                flush()
                rows.append(Row(RowKind.META, line, line))

        flush()
        return rows, hunk_positions

    def is_meta_line(self, line: str) -> bool:
        """
        Determine if a line is a recognised diff metadata line.

        Args:
            line: Line to check

        Returns:
            True if the line starts with a known metadata prefix
        """
        return line.startswith(self.META_PREFIXES)

    def _is_hidden_file_header(self, line: str) -> bool:
        """Check if a line is a file header that the settings say to drop."""
        return self._settings.hide_file_headers and line.startswith(self.FILE_HEADER_PREFIXES)

    def _parse_hunk_header(self, line: str) -> Tuple[int, int]:
        """
        Get the old and new start line numbers from a hunk header.

        Args:
            line: Hunk header line

        Returns:
            Tuple of (old start, new start), each 1 if the header can't be read
        """
        match = self.HUNK_HEADER_PATTERN.match(line)
        if not match:
            self._logger.debug("Unparsable hunk header: %s", line)
            return 1, 1

        return int(match.group(1)), int(match.group(2))


def parse_unified(diff_text: str) -> Tuple[List[Row], List[int]]:
    """
    Parse unified diff text using default settings.

    Args:
        diff_text: Unified diff text

    Returns:
        Tuple of (rows, indices of the hunk header rows)
    """
    return UnifiedDiffParser().parse(diff_text)
