"""Page selection parsing utilities."""

from __future__ import annotations

import re

from pdf_splitter.core.errors import ParseError

PageGroup = list[int]

_INT_LITERAL = re.compile(r"\+?[0-9]+")


def parse_instructions(instructions: str) -> list[PageGroup]:
    """
    Parse a human-friendly page selection string into page groups.

    Each comma-separated token becomes one group, in the order given.
    Ranges expand to every page they cover; single pages become
    one-element groups. Page numbers stay 1-based and are not checked
    against any document here.

    Args:
        instructions: String like "1-3, 5-7, 10"

    Returns:
        List of page groups, one per token

    Raises:
        ParseError: If any token is not a valid page or range

    Examples:
        >>> parse_instructions("1-3,5")
        [[1, 2, 3], [5]]
        >>> parse_instructions("2, 4-5")
        [[2], [4, 5]]
    """
    groups: list[PageGroup] = []

    for part in instructions.split(","):
        token = part.strip()
        if "-" in token:
            groups.append(_parse_range(token))
        else:
            groups.append(_parse_single(token))

    return groups


def _parse_range(token: str) -> PageGroup:
    """Parse a range like '1-5' into its ascending run of pages."""
    pieces = token.split("-")
    if len(pieces) != 2:
        raise ParseError(f"Invalid range: {token}")

    start = _to_int(pieces[0])
    end = _to_int(pieces[1])
    if start is None or end is None or start > end or start < 1:
        raise ParseError(f"Invalid range: {token}")

    return list(range(start, end + 1))


def _parse_single(token: str) -> PageGroup:
    """Parse a single page number."""
    page = _to_int(token)
    if page is None or page < 1:
        raise ParseError(f"Invalid page number: {token}")
    return [page]


def _to_int(text: str) -> int | None:
    """Read an ASCII integer literal, or None if the text is anything else."""
    text = text.strip()
    if not _INT_LITERAL.fullmatch(text):
        return None
    return int(text)


def flatten(groups: list[PageGroup]) -> list[int]:
    """Concatenate groups into the page list a reader would see, in order."""
    return [page for group in groups for page in group]
