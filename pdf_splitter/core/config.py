"""Configuration management for PDF Splitter."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Literal

CompressionType = Literal["deflated", "stored"]

ENV_PREFIX = "PDF_SPLITTER_"


@dataclass
class SplitterConfig:
    """
    Configuration for splitting and serving.

    Attributes:
        max_upload_mb: Largest accepted upload, in megabytes
        compression: Archive compression - 'deflated' or 'stored'
        compress_level: zlib level used when compression is 'deflated'
        garbage: PyMuPDF garbage collection level when saving outputs (0-4)
        deflate: Compress streams of the output PDFs
        host: Interface the HTTP server binds to
        port: Port the HTTP server listens on
        cors_origins: Origins allowed to call the API from a browser
    """

    max_upload_mb: int = 50
    compression: CompressionType = "deflated"
    compress_level: int = 6

    # PyMuPDF save options for every output document
    garbage: int = 4
    deflate: bool = True

    host: str = "127.0.0.1"
    port: int = 5000
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.max_upload_mb < 1:
            raise ValueError("max_upload_mb must be at least 1")
        if self.compression not in ("deflated", "stored"):
            raise ValueError(f"Unknown compression: {self.compression}")
        if not 0 <= self.compress_level <= 9:
            raise ValueError("compress_level must be between 0 and 9")
        if not 0 <= self.garbage <= 4:
            raise ValueError("garbage must be between 0 and 4")

    @property
    def max_upload_bytes(self) -> int:
        """Upload limit in bytes."""
        return self.max_upload_mb * 1024 * 1024

    @classmethod
    def from_environment(cls) -> SplitterConfig:
        """Build a config from PDF_SPLITTER_* environment variables."""
        env = os.environ
        kwargs: dict[str, object] = {}

        if f"{ENV_PREFIX}MAX_UPLOAD_MB" in env:
            kwargs["max_upload_mb"] = _int_setting("MAX_UPLOAD_MB")
        if f"{ENV_PREFIX}COMPRESSION" in env:
            kwargs["compression"] = env[f"{ENV_PREFIX}COMPRESSION"].strip().lower()
        if f"{ENV_PREFIX}HOST" in env:
            kwargs["host"] = env[f"{ENV_PREFIX}HOST"]
        if f"{ENV_PREFIX}PORT" in env:
            kwargs["port"] = _int_setting("PORT")
        if f"{ENV_PREFIX}CORS_ORIGINS" in env:
            kwargs["cors_origins"] = [
                origin.strip()
                for origin in env[f"{ENV_PREFIX}CORS_ORIGINS"].split(",")
                if origin.strip()
            ]

        return cls(**kwargs)  # type: ignore[arg-type]


def _int_setting(name: str) -> int:
    value = os.environ[f"{ENV_PREFIX}{name}"]
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {value!r}") from None
