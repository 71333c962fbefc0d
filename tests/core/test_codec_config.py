"""Unit tests for codec configuration"""

import pytest
from dataclasses import FrozenInstanceError

from src.core import CodecConfig, DEFAULT_CODEC_CONFIG, DimensionMode, WKB_CONSTANTS


class TestCodecConfig:
    """Tests for CodecConfig"""

    def test_defaults(self):
        """Test default configuration values"""
        assert DEFAULT_CODEC_CONFIG.hex_uppercase is False
        assert DEFAULT_CODEC_CONFIG.dimension_mode == DimensionMode.PER_GEOMETRY
        assert DEFAULT_CODEC_CONFIG.strict_trailing_bytes is False
        assert DEFAULT_CODEC_CONFIG.max_depth == 128

    def test_config_is_immutable(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CODEC_CONFIG.hex_uppercase = True

    def test_from_env_defaults(self, monkeypatch):
        """Test that missing variables fall back to defaults"""
        monkeypatch.delenv("WKB_HEX_UPPERCASE", raising=False)
        monkeypatch.delenv("WKB_DIMENSION_MODE", raising=False)
        monkeypatch.delenv("WKB_STRICT_TRAILING_BYTES", raising=False)
        monkeypatch.delenv("WKB_MAX_DEPTH", raising=False)
        assert CodecConfig.from_env() == CodecConfig()

    def test_from_env_values(self, monkeypatch):
        monkeypatch.setenv("WKB_HEX_UPPERCASE", "true")
        monkeypatch.setenv("WKB_DIMENSION_MODE", "OUTERMOST")
        monkeypatch.setenv("WKB_STRICT_TRAILING_BYTES", "1")
        monkeypatch.setenv("WKB_MAX_DEPTH", "16")
        config = CodecConfig.from_env()
        assert config.hex_uppercase is True
        assert config.dimension_mode == DimensionMode.OUTERMOST
        assert config.strict_trailing_bytes is True
        assert config.max_depth == 16

    def test_from_env_invalid_mode(self, monkeypatch):
        monkeypatch.setenv("WKB_DIMENSION_MODE", "sometimes")
        with pytest.raises(ValueError, match="Invalid WKB_DIMENSION_MODE"):
            CodecConfig.from_env()

    def test_negative_max_depth_rejected(self):
        with pytest.raises(ValueError, match="max_depth must be non-negative"):
            CodecConfig(max_depth=-1)

    def test_configs_are_hashable(self):
        """Test that equal configurations share a hash"""
        assert hash(CodecConfig(max_depth=8)) == hash(CodecConfig(max_depth=8))
        assert CodecConfig(max_depth=8) != CodecConfig()


class TestWireConstants:
    """Tests for WKB wire constants"""

    def test_sizes(self):
        assert WKB_CONSTANTS.HEADER_SIZE == 5
        assert WKB_CONSTANTS.COUNT_SIZE == 4
        assert WKB_CONSTANTS.DOUBLE_SIZE == 8

    def test_coordinate_size(self):
        assert WKB_CONSTANTS.coordinate_size(2) == 16
        assert WKB_CONSTANTS.coordinate_size(4) == 32
