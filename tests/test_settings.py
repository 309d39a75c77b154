"""Tests for environment-driven settings."""

import pytest

from biotools.settings import Settings


class TestSettings:
    def test_defaults(self):
        config = Settings()
        assert config.max_input_length == 10_000_000
        assert config.batch_max_workers == 4
        assert config.id_placeholder_prefix == "seq_"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("BIOTOOLS_BATCH_MAX_WORKERS", "8")
        monkeypatch.setenv("BIOTOOLS_LOG_LEVEL", "debug")
        config = Settings()
        assert config.batch_max_workers == 8
        assert config.log_level == "DEBUG"

    @pytest.mark.parametrize(
        "field_name", ["max_input_length", "batch_parallel_threshold", "batch_max_workers", "report_max_errors"]
    )
    def test_rejects_non_positive(self, field_name):
        with pytest.raises(ValueError, match=field_name.upper()):
            Settings(**{field_name: 0})

    def test_rejects_unknown_log_level(self):
        with pytest.raises(ValueError, match="LOG_LEVEL"):
            Settings(log_level="chatty")
