"""Settings that tune diff interpretation."""

from dataclasses import dataclass
import json
import os
from typing import Any, Dict

from tdiff.tdiff_exceptions import TDiffSettingsError


DEFAULT_SIMILARITY_THRESHOLD = 0.45
DEFAULT_COMPARISON_LIMIT = 10_000
DEFAULT_BINARY_PLACEHOLDER = "(binary file changed)"


@dataclass(frozen=True)
class TDiffSettings:
    """
    Engine settings.

    Attributes:
        similarity_threshold: Minimum token similarity (0.0-1.0) for a deletion and an
            insertion to be paired on one row
        comparison_limit: Maximum number of deletion/insertion candidate pairs scored
            per block before falling back to positional pairing
        binary_placeholder: Text shown in place of a binary file change
        hide_file_headers: Drop "diff --git", "index", "---" and "+++" lines from the output
    """
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD
    comparison_limit: int = DEFAULT_COMPARISON_LIMIT
    binary_placeholder: str = DEFAULT_BINARY_PLACEHOLDER
    hide_file_headers: bool = False

    def __post_init__(self) -> None:
        threshold = self.similarity_threshold
        if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
            raise TDiffSettingsError(
                f"similarity_threshold must be a number, got {type(threshold).__name__}",
                {'field': 'similarity_threshold', 'value': threshold}
            )

        if not 0.0 <= threshold <= 1.0:
            raise TDiffSettingsError(
                f"similarity_threshold must be between 0.0 and 1.0, got {threshold}",
                {'field': 'similarity_threshold', 'value': threshold}
            )

        limit = self.comparison_limit
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
            raise TDiffSettingsError(
                f"comparison_limit must be a non-negative integer, got {limit!r}",
                {'field': 'comparison_limit', 'value': limit}
            )

        if not isinstance(self.binary_placeholder, str):
            raise TDiffSettingsError(
                "binary_placeholder must be a string",
                {'field': 'binary_placeholder', 'value': self.binary_placeholder}
            )

        if not isinstance(self.hide_file_headers, bool):
            raise TDiffSettingsError(
                "hide_file_headers must be a boolean",
                {'field': 'hide_file_headers', 'value': self.hide_file_headers}
            )

    @classmethod
    def create_default(cls) -> "TDiffSettings":
        """Create a new TDiffSettings object with default values."""
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TDiffSettings":
        """
        Build settings from a decoded JSON object.

        Missing keys keep their default values.

        Args:
            data: Dictionary using the settings file key names

        Returns:
            TDiffSettings object

        Raises:
            TDiffSettingsError: If the data is not an object or holds invalid values
        """
        if not isinstance(data, dict):
            raise TDiffSettingsError(
                f"Settings must be a JSON object, got {type(data).__name__}"
            )

        return cls(
            similarity_threshold=data.get("similarityThreshold", DEFAULT_SIMILARITY_THRESHOLD),
            comparison_limit=data.get("comparisonLimit", DEFAULT_COMPARISON_LIMIT),
            binary_placeholder=data.get("binaryPlaceholder", DEFAULT_BINARY_PLACEHOLDER),
            hide_file_headers=data.get("hideFileHeaders", False)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to the settings file format."""
        return {
            "similarityThreshold": self.similarity_threshold,
            "comparisonLimit": self.comparison_limit,
            "binaryPlaceholder": self.binary_placeholder,
            "hideFileHeaders": self.hide_file_headers,
        }

    @classmethod
    def load(cls, path: str) -> "TDiffSettings":
        """
        Load settings from file.

        Args:
            path: Path to the settings file

        Returns:
            TDiffSettings object with loaded values

        Raises:
            json.JSONDecodeError: If file contains invalid JSON
            TDiffSettingsError: If file contains invalid settings values
        """
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        return cls.from_dict(data)

    def save(self, path: str) -> None:
        """
        Save settings to file.

        Args:
            path: Path to save the settings file

        Raises:
            OSError: If there's an issue creating the directory or writing the file
        """
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=4)
