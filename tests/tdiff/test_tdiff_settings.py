"""Tests for engine settings."""

import dataclasses
import json

import pytest

from tdiff.tdiff_exceptions import TDiffError, TDiffSettingsError
from tdiff.tdiff_settings import TDiffSettings


class TestSettingsDefaults:
    """Test default values."""

    def test_defaults(self):
        """Test the default settings values."""
        settings = TDiffSettings.create_default()

        assert settings.similarity_threshold == 0.45
        assert settings.comparison_limit == 10_000
        assert settings.binary_placeholder == "(binary file changed)"
        assert settings.hide_file_headers is False

    def test_create_default_matches_constructor(self):
        """Test that create_default gives the same as the bare constructor."""
        assert TDiffSettings.create_default() == TDiffSettings()

    def test_frozen(self):
        """Test that settings can't be changed after creation."""
        settings = TDiffSettings()
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.comparison_limit = 5  # type: ignore[misc]


class TestSettingsValidation:
    """Test rejection of bad values."""

    @pytest.mark.parametrize("threshold", [-0.01, 1.01, 2])
    def test_threshold_out_of_range(self, threshold):
        """Test that thresholds outside 0-1 are rejected."""
        with pytest.raises(TDiffSettingsError, match="between 0.0 and 1.0"):
            TDiffSettings(similarity_threshold=threshold)

    @pytest.mark.parametrize("threshold", ["0.5", None, True])
    def test_threshold_wrong_type(self, threshold):
        """Test that non-numeric thresholds are rejected."""
        with pytest.raises(TDiffSettingsError, match="must be a number"):
            TDiffSettings(similarity_threshold=threshold)

    @pytest.mark.parametrize("threshold", [0, 0.0, 1, 1.0, 0.45])
    def test_threshold_boundaries_accepted(self, threshold):
        """Test that thresholds at and inside the bounds are accepted."""
        assert TDiffSettings(similarity_threshold=threshold).similarity_threshold == threshold

    @pytest.mark.parametrize("limit", [-1, 1.5, "100", False])
    def test_bad_comparison_limit(self, limit):
        """Test that negative or non-integer limits are rejected."""
        with pytest.raises(TDiffSettingsError, match="comparison_limit"):
            TDiffSettings(comparison_limit=limit)

    def test_zero_comparison_limit_accepted(self):
        """Test that a zero limit is allowed."""
        assert TDiffSettings(comparison_limit=0).comparison_limit == 0

    def test_bad_placeholder(self):
        """Test that a non-string placeholder is rejected."""
        with pytest.raises(TDiffSettingsError, match="binary_placeholder"):
            TDiffSettings(binary_placeholder=42)

    def test_bad_hide_file_headers(self):
        """Test that a non-boolean flag is rejected."""
        with pytest.raises(TDiffSettingsError, match="hide_file_headers"):
            TDiffSettings(hide_file_headers="yes")

    def test_error_details(self):
        """Test that validation errors name the offending field."""
        with pytest.raises(TDiffSettingsError) as exc_info:
            TDiffSettings(comparison_limit=-5)

        assert exc_info.value.error_details == {'field': 'comparison_limit', 'value': -5}
        assert isinstance(exc_info.value, TDiffError)


class TestSettingsFile:
    """Test loading and saving settings files."""

    def test_save_and_load(self, tmp_path):
        """Test that saved settings load back unchanged."""
        path = str(tmp_path / "settings.json")
        settings = TDiffSettings(
            similarity_threshold=0.6,
            comparison_limit=500,
            binary_placeholder="<binary>",
            hide_file_headers=True
        )

        settings.save(path)

        assert TDiffSettings.load(path) == settings

    def test_saved_file_format(self, tmp_path):
        """Test the key names written to the settings file."""
        path = tmp_path / "settings.json"
        TDiffSettings().save(str(path))

        data = json.loads(path.read_text(encoding='utf-8'))
        assert data == {
            "similarityThreshold": 0.45,
            "comparisonLimit": 10_000,
            "binaryPlaceholder": "(binary file changed)",
            "hideFileHeaders": False,
        }

    def test_save_creates_directory(self, tmp_path):
        """Test that missing parent directories are created."""
        path = tmp_path / "nested" / "dir" / "settings.json"
        TDiffSettings().save(str(path))

        assert path.exists()

    def test_missing_keys_keep_defaults(self, tmp_path):
        """Test that a partial file only overrides what it names."""
        path = tmp_path / "settings.json"
        path.write_text('{"hideFileHeaders": true}', encoding='utf-8')

        settings = TDiffSettings.load(str(path))

        assert settings.hide_file_headers is True
        assert settings.similarity_threshold == 0.45
        assert settings.comparison_limit == 10_000

    def test_invalid_json(self, tmp_path):
        """Test that malformed JSON raises a decode error."""
        path = tmp_path / "settings.json"
        path.write_text('{"similarityThreshold": ', encoding='utf-8')

        with pytest.raises(json.JSONDecodeError):
            TDiffSettings.load(str(path))

    def test_non_object_json(self, tmp_path):
        """Test that a JSON value other than an object is rejected."""
        path = tmp_path / "settings.json"
        path.write_text('[1, 2, 3]', encoding='utf-8')

        with pytest.raises(TDiffSettingsError, match="JSON object"):
            TDiffSettings.load(str(path))

    def test_invalid_value_in_file(self, tmp_path):
        """Test that bad values in a file are rejected."""
        path = tmp_path / "settings.json"
        path.write_text('{"similarityThreshold": 3}', encoding='utf-8')

        with pytest.raises(TDiffSettingsError):
            TDiffSettings.load(str(path))

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises the usual OS error."""
        with pytest.raises(FileNotFoundError):
            TDiffSettings.load(str(tmp_path / "absent.json"))
