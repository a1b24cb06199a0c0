"""Shared utilities for CLI commands."""

from pathlib import Path


def load_page_ids(page_ids_file: Path) -> list[int]:
    """Load page ids from a text file (one per line, "#" starts a comment line).

    Args:
        page_ids_file: Path to file containing page ids

    Returns:
        List of page ids

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file is empty or a line is not an integer
    """
    if not page_ids_file.exists():
        raise FileNotFoundError(f"Page IDs file not found: {page_ids_file}")

    page_ids = []
    with page_ids_file.open("r") as f:
        for line_number, line in enumerate(f, 1):
            stripped_line = line.strip()
            if not stripped_line or stripped_line.startswith("#"):
                continue
            try:
                page_ids.append(int(stripped_line))
            except ValueError as e:
                raise ValueError(
                    f"Invalid page ID on line {line_number} of {page_ids_file}: {stripped_line!r}"
                ) from e

    if not page_ids:
        raise ValueError(f"No page IDs found in file: {page_ids_file}")

    return page_ids
