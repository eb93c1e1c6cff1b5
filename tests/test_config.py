# ABOUTME: Tests for the configuration module.
# ABOUTME: Covers Settings defaults, environment variable overrides and data directory creation.

import os
import tempfile
from pathlib import Path
from unittest import mock

import pytest
from pydantic import ValidationError

from whisper_core.config import Settings, ensure_data_dir, get_settings


class TestSettingsDefaults:
    """Tests for Settings class default values."""

    def test_db_path_default(self) -> None:
        """Test that db_path defaults to ~/.whisper-core/data.db."""
        settings = Settings()
        assert settings.db_path == Path.home() / ".whisper-core" / "data.db"

    def test_matchmaking_defaults(self) -> None:
        """Test that matchmaking bounds default to 100, 10, 24 hours and 50."""
        settings = Settings()
        assert settings.candidate_pool_size == 100
        assert settings.top_match_count == 10
        assert settings.anti_repeat_hours == 24
        assert settings.max_recent_matches == 50

    def test_cleanup_batch_size_default(self) -> None:
        """Test that cleanup_batch_size defaults to 500."""
        assert Settings().cleanup_batch_size == 500

    def test_logging_defaults(self) -> None:
        """Test that logging defaults to INFO without a file."""
        settings = Settings()
        assert settings.log_level == "INFO"
        assert settings.log_file is None


class TestSettingsEnvironmentOverrides:
    """Tests for environment variable overrides."""

    def test_db_path_from_env(self) -> None:
        """Test that db_path can be overridden via environment variable."""
        with tempfile.TemporaryDirectory() as tmpdir:
            custom_path = Path(tmpdir) / "custom.db"
            with mock.patch.dict(os.environ, {"WHISPER_CORE_DB_PATH": str(custom_path)}):
                assert Settings().db_path == custom_path

    def test_candidate_pool_size_from_env(self) -> None:
        """Test that candidate_pool_size can be overridden via environment variable."""
        with mock.patch.dict(os.environ, {"WHISPER_CORE_CANDIDATE_POOL_SIZE": "25"}):
            assert Settings().candidate_pool_size == 25

    def test_invalid_value_rejected(self) -> None:
        """Test that non-positive bounds fail validation."""
        with mock.patch.dict(os.environ, {"WHISPER_CORE_TOP_MATCH_COUNT": "0"}):
            with pytest.raises(ValidationError):
                Settings()


class TestGetSettings:
    """Tests for the cached settings accessor."""

    def test_get_settings_is_cached(self) -> None:
        """Test that get_settings returns the same instance until cleared."""
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()


class TestEnsureDataDir:
    """Tests for ensure_data_dir."""

    def test_creates_directory(self) -> None:
        """Test that ensure_data_dir creates the database's parent directory."""
        with tempfile.TemporaryDirectory() as tmpdir:
            db_path = Path(tmpdir) / "nested" / "data.db"
            with mock.patch.dict(os.environ, {"WHISPER_CORE_DB_PATH": str(db_path)}):
                get_settings.cache_clear()
                try:
                    data_dir = ensure_data_dir()
                finally:
                    get_settings.cache_clear()
                assert data_dir == db_path.parent
                assert data_dir.exists()
