"""Job records tracking each split request."""

from __future__ import annotations

import threading
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Protocol


class JobStatus(str, Enum):
    """Lifecycle states of a split job."""

    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class JobStateError(Exception):
    """Raised when a finished job is asked to change again."""


@dataclass(frozen=True)
class Job:
    """
    A single split request and its outcome.

    Created as PROCESSING and moved exactly once to COMPLETED (with the
    result file names) or FAILED (with the error message).
    """

    id: str
    original_filename: str
    instructions: str
    status: JobStatus = JobStatus.PROCESSING
    result_files: list[str] | None = None
    error_message: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_finished(self) -> bool:
        """True once the job has completed or failed."""
        return self.status is not JobStatus.PROCESSING

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the camelCase keys the HTTP API exposes."""
        return {
            "id": self.id,
            "originalFilename": self.original_filename,
            "instructions": self.instructions,
            "status": self.status.value,
            "resultFiles": list(self.result_files) if self.result_files is not None else None,
            "errorMessage": self.error_message,
            "createdAt": self.created_at.isoformat(),
        }


class JobRepository(Protocol):
    """Storage for job records. Swap in a persistent backend as needed."""

    def create(self, original_filename: str, instructions: str) -> Job: ...

    def get(self, job_id: str) -> Job | None: ...

    def update(self, job_id: str, **changes: Any) -> Job | None: ...


class InMemoryJobRepository:
    """
    Process-local job store.

    Every read-modify-write happens under one lock, so concurrent
    updates to the same job cannot interleave.
    """

    def __init__(self) -> None:
        self._jobs: dict[str, Job] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._jobs)

    def create(self, original_filename: str, instructions: str) -> Job:
        """Create a new job in the PROCESSING state."""
        job = Job(
            id=str(uuid.uuid4()),
            original_filename=original_filename,
            instructions=instructions,
        )
        with self._lock:
            self._jobs[job.id] = job
        return job

    def get(self, job_id: str) -> Job | None:
        """Look up a job by id, or None if unknown."""
        with self._lock:
            return self._jobs.get(job_id)

    def update(self, job_id: str, **changes: Any) -> Job | None:
        """
        Apply field changes to a job.

        Args:
            job_id: Job to update
            **changes: Job fields to replace (e.g. status, result_files)

        Returns:
            The updated job, or None if the id is unknown

        Raises:
            JobStateError: If the job has already completed or failed
        """
        with self._lock:
            existing = self._jobs.get(job_id)
            if existing is None:
                return None
            if existing.is_finished:
                raise JobStateError(
                    f"Job {job_id} is already {existing.status.value}"
                )

            updated = replace(existing, **changes)
            self._jobs[job_id] = updated
            return updated
