"""Pairing of deleted and inserted lines within one edit block."""

from dataclasses import dataclass
import logging
from typing import List, Sequence

from tdiff.tdiff_settings import DEFAULT_COMPARISON_LIMIT, DEFAULT_SIMILARITY_THRESHOLD
from tdiff.tdiff_similarity import token_similarity
from tdiff.tdiff_tokenizer import tokenize
from tdiff.tdiff_types import AlignedPair


@dataclass(frozen=True)
class _PairCandidate:
    """A deletion/insertion pair that scored above the similarity threshold."""

    del_index: int
    add_index: int
    score: float
    distance: int


class EditBlockAligner:
    """
    Decide which deleted lines and inserted lines belong on the same row.

    Every deletion/insertion combination in a block is scored by token
    similarity.  Candidates are then accepted greedily, best first, as long as
    they do not reuse a line or cross a pair that was already accepted, so the
    output keeps both sides in their original order.
    """

    def __init__(
        self,
        similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
        comparison_limit: int = DEFAULT_COMPARISON_LIMIT
    ):
        """
        Initialize the aligner.

        Args:
            similarity_threshold: Minimum score (0.0-1.0) for a candidate pair
            comparison_limit: Maximum number of candidate pairs to score before
                falling back to positional pairing
        """
        self._similarity_threshold = similarity_threshold
        self._comparison_limit = comparison_limit
        self._logger = logging.getLogger("EditBlockAligner")

    def similarity_threshold(self) -> float:
        """Get the minimum score for a candidate pair."""
        return self._similarity_threshold

    def comparison_limit(self) -> int:
        """Get the candidate pair limit."""
        return self._comparison_limit

    def align(self, deletions: Sequence[str], insertions: Sequence[str]) -> List[AlignedPair]:
        """
        Align a block of deleted lines with a block of inserted lines.

        Args:
            deletions: Deleted lines, in diff order
            insertions: Inserted lines, in diff order

        Returns:
            Rows in display order.  Each row holds a deletion index, an insertion
            index, or both when the two lines were paired.
        """
        if not deletions:
            return [AlignedPair(None, j) for j in range(len(insertions))]

        if not insertions:
            return [AlignedPair(i, None) for i in range(len(deletions))]

        if len(deletions) * len(insertions) > self._comparison_limit:
            self._logger.debug(
                "Block of %d deletions and %d insertions exceeds %d comparisons, pairing by position",
                len(deletions), len(insertions), self._comparison_limit
            )
            return self._align_by_index(len(deletions), len(insertions))

        matches = self._greedy_match(deletions, insertions)
        if not matches:
            return self._align_unmatched(len(deletions), len(insertions))

        matches.sort(key=lambda match: (match.del_index, match.add_index))

        rows: List[AlignedPair] = []
        next_del = 0
        next_add = 0
        for match in matches:
            assert match.del_index is not None and match.add_index is not None
            rows.extend(AlignedPair(i, None) for i in range(next_del, match.del_index))
            rows.extend(AlignedPair(None, j) for j in range(next_add, match.add_index))
            rows.append(match)
            next_del = match.del_index + 1
            next_add = match.add_index + 1

        rows.extend(AlignedPair(i, None) for i in range(next_del, len(deletions)))
        rows.extend(AlignedPair(None, j) for j in range(next_add, len(insertions)))
        return rows

    def _align_by_index(self, del_count: int, add_count: int) -> List[AlignedPair]:
        """
        Pair lines purely by position.

        Args:
            del_count: Number of deleted lines
            add_count: Number of inserted lines

        Returns:
            One row per position, with the longer side's remainder unpaired
        """
        rows: List[AlignedPair] = []
        for k in range(max(del_count, add_count)):
            rows.append(AlignedPair(
                k if k < del_count else None,
                k if k < add_count else None
            ))

        return rows

    def _align_unmatched(self, del_count: int, add_count: int) -> List[AlignedPair]:
        """All deletions unpaired, then all insertions unpaired."""
        rows = [AlignedPair(i, None) for i in range(del_count)]
        rows.extend(AlignedPair(None, j) for j in range(add_count))
        return rows

    def _greedy_match(self, deletions: Sequence[str], insertions: Sequence[str]) -> List[AlignedPair]:
        """
        Accept the best non-crossing pairs.

        Args:
            deletions: Deleted lines
            insertions: Inserted lines

        Returns:
            Accepted pairs, in acceptance order
        """
        del_tokens = [tokenize(line.strip()) for line in deletions]
        add_tokens = [tokenize(line.strip()) for line in insertions]

        candidates: List[_PairCandidate] = []
        for i, old_tokens in enumerate(del_tokens):
            for j, new_tokens in enumerate(add_tokens):
                score = token_similarity(old_tokens, new_tokens)
                if score < self._similarity_threshold:
                    continue

                candidates.append(_PairCandidate(i, j, score, abs(i - j)))

        candidates.sort(key=lambda c: (-c.score, c.distance, c.del_index, c.add_index))

        used_del = [False] * len(deletions)
        used_add = [False] * len(insertions)
        matches: List[AlignedPair] = []
        for candidate in candidates:
            if used_del[candidate.del_index] or used_add[candidate.add_index]:
                continue

            if self._crosses(candidate, matches):
                continue

            used_del[candidate.del_index] = True
            used_add[candidate.add_index] = True
            matches.append(AlignedPair(candidate.del_index, candidate.add_index))

        return matches

    def _crosses(self, candidate: _PairCandidate, matches: List[AlignedPair]) -> bool:
        """
        Check whether accepting a candidate would reorder either side.

        Args:
            candidate: Candidate pair
            matches: Pairs accepted so far

        Returns:
            True if the candidate crosses any accepted pair
        """
        for match in matches:
            assert match.del_index is not None and match.add_index is not None
            if candidate.del_index < match.del_index and candidate.add_index > match.add_index:
                return True

            if candidate.del_index > match.del_index and candidate.add_index < match.add_index:
                return True

        return False


def align_block(deletions: Sequence[str], insertions: Sequence[str]) -> List[AlignedPair]:
    """
    Align a block using the default threshold and comparison limit.

    Args:
        deletions: Deleted lines, in diff order
        insertions: Inserted lines, in diff order

    Returns:
        Rows in display order
    """
    return EditBlockAligner().align(deletions, insertions)
