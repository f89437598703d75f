"""Tests for configuration module."""

import os
from unittest.mock import patch

import pytest

from pdf_splitter.core.config import SplitterConfig


class TestSplitterConfig:
    """Tests for SplitterConfig class."""

    def test_default_values(self):
        """Config should have sensible defaults."""
        config = SplitterConfig()

        assert config.max_upload_mb == 50
        assert config.max_upload_bytes == 50 * 1024 * 1024
        assert config.compression == "deflated"
        assert config.compress_level == 6
        assert config.garbage == 4
        assert config.deflate is True
        assert config.host == "127.0.0.1"
        assert config.port == 5000

    def test_custom_values(self):
        config = SplitterConfig(max_upload_mb=10, compression="stored", port=8080)

        assert config.max_upload_bytes == 10 * 1024 * 1024
        assert config.compression == "stored"
        assert config.port == 8080

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_upload_mb": 0},
            {"compression": "bzip2"},
            {"compress_level": 10},
            {"garbage": 5},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            SplitterConfig(**kwargs)


class TestFromEnvironment:
    """Tests for building config from environment variables."""

    def test_empty_environment(self):
        with patch.dict(os.environ, {}, clear=True):
            assert SplitterConfig.from_environment() == SplitterConfig()

    def test_reads_variables(self):
        env = {
            "PDF_SPLITTER_MAX_UPLOAD_MB": "5",
            "PDF_SPLITTER_COMPRESSION": " Stored ",
            "PDF_SPLITTER_HOST": "0.0.0.0",
            "PDF_SPLITTER_PORT": "9000",
        }
        with patch.dict(os.environ, env, clear=True):
            config = SplitterConfig.from_environment()

        assert config.max_upload_mb == 5
        assert config.compression == "stored"
        assert config.host == "0.0.0.0"
        assert config.port == 9000

    def test_cors_origins(self):
        env = {"PDF_SPLITTER_CORS_ORIGINS": "https://a.example.com, https://b.example.com,"}
        with patch.dict(os.environ, env, clear=True):
            config = SplitterConfig.from_environment()

        assert config.cors_origins == ["https://a.example.com", "https://b.example.com"]

    def test_cors_default_allows_all(self):
        assert SplitterConfig().cors_origins == ["*"]

    def test_non_integer_port(self):
        with patch.dict(os.environ, {"PDF_SPLITTER_PORT": "http"}, clear=True):
            with pytest.raises(ValueError, match="PDF_SPLITTER_PORT must be an integer"):
                SplitterConfig.from_environment()

    def test_invalid_compression(self):
        with patch.dict(os.environ, {"PDF_SPLITTER_COMPRESSION": "lzma"}, clear=True):
            with pytest.raises(ValueError, match="Unknown compression"):
                SplitterConfig.from_environment()
