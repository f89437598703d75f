"""Pytest configuration and shared fixtures."""

import fitz
import pytest

from pdf_splitter.core.config import SplitterConfig
from pdf_splitter.core.jobs import InMemoryJobRepository
from pdf_splitter.core.service import SplitService


def _build_pdf(num_pages: int) -> bytes:
    doc = fitz.open()
    for number in range(1, num_pages + 1):
        page = doc.new_page(width=612, height=792)
        page.insert_text((72, 72), f"Page {number}")
    data = doc.tobytes()
    doc.close()
    return data


def _page_texts(data: bytes) -> list[str]:
    with fitz.open(stream=data, filetype="pdf") as doc:
        return [page.get_text("text").strip() for page in doc]


@pytest.fixture
def make_pdf():
    """Factory building an in-memory PDF whose pages read 'Page 1', 'Page 2', ..."""
    return _build_pdf


@pytest.fixture
def page_texts():
    """Read back the text of every page of a PDF given as bytes."""
    return _page_texts


@pytest.fixture
def sample_pdf():
    """A 12-page PDF."""
    return _build_pdf(12)


@pytest.fixture
def twenty_page_pdf():
    """A 20-page PDF."""
    return _build_pdf(20)


@pytest.fixture
def temp_pdf(tmp_path):
    """A 5-page PDF file on disk."""
    pdf_file = tmp_path / "report.pdf"
    pdf_file.write_bytes(_build_pdf(5))
    return pdf_file


@pytest.fixture
def splitter_config():
    """Small config used across tests."""
    return SplitterConfig(max_upload_mb=1)


@pytest.fixture
def job_repository():
    return InMemoryJobRepository()


@pytest.fixture
def service(splitter_config, job_repository):
    return SplitService(splitter_config, job_repository)
