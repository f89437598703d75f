"""Utility functions for PDF Splitter."""

from pdf_splitter.utils.page_range import PageGroup, flatten, parse_instructions

__all__ = ["PageGroup", "flatten", "parse_instructions"]
