"""Unit tests for shared CLI helpers."""

from pathlib import Path

import pytest

from src.cli.utils import load_page_ids


class TestLoadPageIds:
    """Test page id file loading."""

    def test_reads_ids_skipping_comments_and_blanks(self, tmp_path: Path) -> None:
        """Test that comments and blank lines are ignored."""
        path = tmp_path / "ids.txt"
        path.write_text("# Primarchs\n10\n\n  12  \n# end\n")

        assert load_page_ids(path) == [10, 12]

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_page_ids(tmp_path / "missing.txt")

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test that a file without ids raises ValueError."""
        path = tmp_path / "ids.txt"
        path.write_text("# nothing here\n")

        with pytest.raises(ValueError, match="No page IDs"):
            load_page_ids(path)

    def test_invalid_line(self, tmp_path: Path) -> None:
        """Test that non-numeric lines report their line number."""
        path = tmp_path / "ids.txt"
        path.write_text("10\nhorus\n")

        with pytest.raises(ValueError, match="line 2"):
            load_page_ids(path)
