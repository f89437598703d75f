"""Split a PDF into one document per page group using PyMuPDF."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import TYPE_CHECKING

from pdf_splitter.core.config import SplitterConfig
from pdf_splitter.core.errors import DocumentError, PageRangeError
from pdf_splitter.utils.page_range import PageGroup, parse_instructions

if TYPE_CHECKING:
    import fitz

logger = logging.getLogger(__name__)


@dataclass
class SplitOutput:
    """One serialized sub-document and the pages it was built from."""

    filename: str
    data: bytes = field(repr=False)
    pages: PageGroup

    @property
    def size(self) -> int:
        """Length of the serialized document in bytes."""
        return len(self.data)


def file_stem(filename: str) -> str:
    """Return the filename without directories or its final extension."""
    return PurePath(filename).stem


def output_filename(stem: str, group: PageGroup) -> str:
    """
    Name the output document for a page group.

    Examples:
        >>> output_filename("report", [10])
        'report-page-10.pdf'
        >>> output_filename("report", [1, 2, 3])
        'report-pages-1-3.pdf'
    """
    if len(group) == 1:
        return f"{stem}-page-{group[0]}.pdf"
    return f"{stem}-pages-{group[0]}-{group[-1]}.pdf"


def validate_groups(groups: list[PageGroup], total_pages: int) -> None:
    """
    Check every page of every group against the document length.

    Raises:
        PageRangeError: On the first page outside 1..total_pages
    """
    for group in groups:
        for page in group:
            if page < 1 or page > total_pages:
                raise PageRangeError(
                    f"Page {page} does not exist. PDF has {total_pages} pages."
                )


class PDFSplitter:
    """
    Builds one PDF per page group from a source document held in memory.

    The whole request is validated before any output is produced, so a
    bad page number never yields a partial result.
    """

    def __init__(self, config: SplitterConfig | None = None):
        self.config = config or SplitterConfig()

    def page_count(self, source: bytes) -> int:
        """Get the number of pages in a PDF given as bytes."""
        with self._open(source) as doc:
            return doc.page_count

    def split(
        self,
        source: bytes,
        groups: list[PageGroup],
        original_filename: str,
    ) -> list[SplitOutput]:
        """
        Split a PDF into one output per page group.

        Args:
            source: The source PDF as bytes
            groups: Parsed page groups (1-based page numbers)
            original_filename: Upload name, used to derive output names

        Returns:
            One SplitOutput per group, in group order

        Raises:
            DocumentError: If the source is not a loadable PDF
            PageRangeError: If any group references a missing page
        """
        stem = file_stem(original_filename)

        with self._open(source) as src:
            total_pages = src.page_count
            validate_groups(groups, total_pages)

            logger.info(
                "Splitting %d-page PDF %r into %d documents",
                total_pages,
                original_filename,
                len(groups),
            )

            outputs: list[SplitOutput] = []
            for group in groups:
                data = self._extract(src, group)
                outputs.append(
                    SplitOutput(
                        filename=output_filename(stem, group),
                        data=data,
                        pages=list(group),
                    )
                )
                logger.debug(
                    "Created %s (%.1fKB)", outputs[-1].filename, len(data) / 1024
                )

        return outputs

    def split_from_instructions(
        self, source: bytes, instructions: str, original_filename: str
    ) -> list[SplitOutput]:
        """Parse a page selection string and split in one step."""
        return self.split(source, parse_instructions(instructions), original_filename)

    def _extract(self, src: fitz.Document, group: PageGroup) -> bytes:
        """Copy the group's pages, in order, into a new document."""
        import fitz

        out = fitz.open()
        try:
            for page in group:
                out.insert_pdf(src, from_page=page - 1, to_page=page - 1)
            return out.tobytes(garbage=self.config.garbage, deflate=self.config.deflate)
        finally:
            out.close()

    def _open(self, source: bytes) -> fitz.Document:
        """
        Open a PDF from bytes.

        Documents encrypted with an empty user password (owner-password
        only) open normally; anything else that needs a password fails.
        """
        import fitz

        try:
            doc = fitz.open(stream=source, filetype="pdf")
        except (RuntimeError, ValueError) as e:
            raise DocumentError(f"Failed to load PDF: {e}") from e

        if doc.needs_pass and not doc.authenticate(""):
            doc.close()
            raise DocumentError("PDF is password protected")

        return doc
