"""Unit tests for configuration models."""

import pytest
from pydantic import ValidationError

from polyedit.config import (
    GeometryConfig,
    LoggingConfig,
    PolyEditSettings,
    ViewportConfig,
    get_default_settings,
)


class TestDefaults:
    """Tests for default settings."""

    def test_default_settings(self):
        settings = get_default_settings()
        assert isinstance(settings, PolyEditSettings)
        assert settings.geometry.collinear_epsilon == 1e-12
        assert settings.geometry.orientation_anchor == (1.1, 1.1)
        assert settings.geometry.check_simple is False
        assert (settings.viewport.width, settings.viewport.height) == (800, 600)
        assert settings.logging.log_file is None

    def test_exact_comparisons_allowed(self):
        assert GeometryConfig(collinear_epsilon=0.0).collinear_epsilon == 0.0


class TestValidation:
    """Tests for field bounds."""

    def test_negative_epsilon_rejected(self):
        with pytest.raises(ValidationError):
            GeometryConfig(collinear_epsilon=-1e-9)

    def test_large_epsilon_rejected(self):
        with pytest.raises(ValidationError):
            GeometryConfig(collinear_epsilon=0.5)

    def test_tiny_viewport_rejected(self):
        with pytest.raises(ValidationError):
            ViewportConfig(width=1)

    def test_logging_levels(self):
        config = LoggingConfig(log_level="INFO")
        assert config.log_level == "INFO"
        assert config.file_log_level == "DEBUG"
