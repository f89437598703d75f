"""Error types raised while splitting a PDF."""

from __future__ import annotations

from typing import Any


class SplitError(Exception):
    """
    Base class for every failure a split request can report.

    The message is shown to the end user verbatim, so ``str(error)``
    is always exactly the message passed in.

    Attributes:
        message: Human-readable description of the failure
        errors: Optional structured details (e.g. field validation issues)
        status_code: HTTP status the API answers with for this error
    """

    status_code = 400

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.message = message
        self.errors = errors


class InputValidationError(SplitError):
    """The upload itself is unusable: missing file, wrong type, no instructions."""


class ParseError(SplitError):
    """A token in the page selection string is malformed."""


class PageRangeError(SplitError):
    """A selected page does not exist in the source document."""


class DocumentError(SplitError):
    """The uploaded bytes could not be opened as a PDF."""


class UnexpectedError(SplitError):
    """Anything else that went wrong while processing."""

    status_code = 500
