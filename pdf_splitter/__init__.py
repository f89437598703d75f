"""
PDF Splitter - Split a PDF into several documents from a page selection.

Give it a PDF and a string like "1-3, 5-7, 10" and it produces one PDF
per range or page, bundled into a single zip archive.
"""

from pdf_splitter.core.config import SplitterConfig
from pdf_splitter.core.service import SplitService
from pdf_splitter.core.splitter import PDFSplitter
from pdf_splitter.utils.page_range import parse_instructions

__version__ = "0.1.0"

__all__ = [
    "PDFSplitter",
    "SplitService",
    "SplitterConfig",
    "parse_instructions",
    "__version__",
]
