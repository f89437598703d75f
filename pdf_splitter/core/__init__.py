"""Core modules for PDF splitting."""

from pdf_splitter.core.archive import Archive, archive_filename, build_archive
from pdf_splitter.core.config import SplitterConfig
from pdf_splitter.core.errors import (
    DocumentError,
    InputValidationError,
    PageRangeError,
    ParseError,
    SplitError,
    UnexpectedError,
)
from pdf_splitter.core.jobs import InMemoryJobRepository, Job, JobRepository, JobStatus
from pdf_splitter.core.service import SplitResult, SplitService
from pdf_splitter.core.splitter import PDFSplitter, SplitOutput

__all__ = [
    "SplitterConfig",
    "PDFSplitter",
    "SplitOutput",
    "Archive",
    "archive_filename",
    "build_archive",
    "SplitService",
    "SplitResult",
    "Job",
    "JobStatus",
    "JobRepository",
    "InMemoryJobRepository",
    "SplitError",
    "InputValidationError",
    "ParseError",
    "PageRangeError",
    "DocumentError",
    "UnexpectedError",
]
