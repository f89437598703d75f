"""Split request orchestration, independent of the HTTP layer."""

from __future__ import annotations

import base64
import binascii
import logging
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from pdf_splitter.core.archive import Archive, build_archive
from pdf_splitter.core.config import SplitterConfig
from pdf_splitter.core.errors import (
    InputValidationError,
    SplitError,
    UnexpectedError,
)
from pdf_splitter.core.jobs import InMemoryJobRepository, Job, JobRepository, JobStatus
from pdf_splitter.core.splitter import PDFSplitter, SplitOutput
from pdf_splitter.utils.page_range import parse_instructions

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"
DEFAULT_FILENAME = "document.pdf"


class SplitInstructions(BaseModel):
    """Validated form payload for a split request."""

    instructions: str = Field(min_length=1)


@dataclass
class SplitResult:
    """Everything a successful request produced."""

    job: Job
    outputs: list[SplitOutput]
    archive: Archive
    archive_data: bytes

    @property
    def archive_filename(self) -> str:
        return self.archive.filename


class SplitService:
    """
    Runs split requests end to end and records their outcome.

    Input problems are reported before a job exists. Once a job is
    created, every failure marks it FAILED with the error message and
    is re-raised; no partial archive is ever returned.

    Example:
        >>> service = SplitService()
        >>> result = service.split_upload(data, "report.pdf", "application/pdf", "1-3, 10")
        >>> result.archive_filename
        'report-split.zip'
    """

    def __init__(
        self,
        config: SplitterConfig | None = None,
        jobs: JobRepository | None = None,
        splitter: PDFSplitter | None = None,
    ):
        self.config = config or SplitterConfig()
        self.jobs = jobs if jobs is not None else InMemoryJobRepository()
        self.splitter = splitter or PDFSplitter(self.config)

    def validate_upload(
        self,
        data: bytes | None,
        filename: str | None,
        content_type: str | None,
        instructions: str | None,
    ) -> tuple[bytes, str, str]:
        """
        Check an upload before any work starts.

        Returns:
            The upload bytes, filename and instruction string, all present

        Raises:
            InputValidationError: Missing file, wrong type, too large, or
                missing instructions
        """
        if data is None or filename is None:
            raise InputValidationError("No PDF file uploaded")

        if content_type != PDF_CONTENT_TYPE:
            raise InputValidationError("File must be a PDF")

        if len(data) > self.config.max_upload_bytes:
            raise InputValidationError(
                f"File exceeds the {self.config.max_upload_mb} MB upload limit"
            )

        return data, filename, self._validate_instructions(instructions)

    def split_upload(
        self,
        data: bytes | None,
        filename: str | None,
        content_type: str | None,
        instructions: str | None,
    ) -> SplitResult:
        """
        Validate an upload, split it, and archive the results.

        Args:
            data: Raw bytes of the uploaded PDF
            filename: Name of the uploaded file
            content_type: MIME type reported for the upload
            instructions: Page selection string, e.g. "1-3, 5"

        Returns:
            SplitResult with the finished job, outputs and archive bytes
        """
        data, filename, instructions = self.validate_upload(
            data, filename, content_type, instructions
        )
        return self._run(data, filename, instructions)

    def split_base64(
        self,
        base64_file: str | None,
        instructions: str | None,
        filename: str | None = None,
    ) -> dict[str, Any]:
        """
        Split a base64-encoded PDF and answer with base64 payloads.

        Returns:
            Dict with 'success', 'results' (filename, base64_data, pages,
            size per output), 'zip_base64' and 'zip_filename'
        """
        if not base64_file or not instructions:
            raise InputValidationError(
                "Missing required fields: base64_file and instructions"
            )

        try:
            data = base64.b64decode(base64_file, validate=True)
        except (binascii.Error, ValueError):
            raise InputValidationError("base64_file is not valid base64") from None

        filename = filename or DEFAULT_FILENAME
        if len(data) > self.config.max_upload_bytes:
            raise InputValidationError(
                f"File exceeds the {self.config.max_upload_mb} MB upload limit"
            )

        result = self._run(data, filename, instructions)

        return {
            "success": True,
            "results": [
                {
                    "filename": output.filename,
                    "base64_data": _b64(output.data),
                    "pages": output.pages,
                    "size": output.size,
                }
                for output in result.outputs
            ],
            "zip_base64": _b64(result.archive_data),
            "zip_filename": result.archive_filename,
        }

    def get_job(self, job_id: str) -> Job | None:
        """Look up a job record."""
        return self.jobs.get(job_id)

    def _run(self, data: bytes, filename: str, instructions: str) -> SplitResult:
        job = self.jobs.create(filename, instructions)
        logger.info("Job %s started: %r pages %r", job.id, filename, instructions)

        try:
            groups = parse_instructions(instructions)
            outputs = self.splitter.split(data, groups, filename)
            archive = build_archive(outputs, filename, self.config)
            archive_data = archive.to_bytes()
        except SplitError as e:
            self._fail(job, e.message)
            raise
        except Exception as e:
            logger.exception("Job %s hit an unexpected error", job.id)
            message = str(e) or "Failed to process PDF"
            self._fail(job, message)
            raise UnexpectedError(message) from e

        job = self.jobs.update(
            job.id,
            status=JobStatus.COMPLETED,
            result_files=[output.filename for output in outputs],
        ) or job
        logger.info(
            "Job %s completed: %d files in %s (%d bytes)",
            job.id,
            len(outputs),
            archive.filename,
            len(archive_data),
        )

        return SplitResult(
            job=job,
            outputs=outputs,
            archive=archive,
            archive_data=archive_data,
        )

    def _fail(self, job: Job, message: str) -> None:
        self.jobs.update(job.id, status=JobStatus.FAILED, error_message=message)
        logger.warning("Job %s failed: %s", job.id, message)

    def _validate_instructions(self, instructions: str | None) -> str:
        try:
            payload = SplitInstructions(instructions=instructions)
        except ValidationError as e:
            raise InputValidationError(
                "Invalid instructions",
                errors=[
                    {
                        "path": list(err["loc"]),
                        "message": (
                            "Instructions are required"
                            if err["type"] in ("string_too_short", "string_type", "missing")
                            else err["msg"]
                        ),
                    }
                    for err in e.errors()
                ],
            ) from None
        return payload.instructions


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")
