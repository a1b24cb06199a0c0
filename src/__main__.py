"""Main entry point: python -m src DUMP.xml [--jsonl] [--page-ids-file PATH]."""

from src.cli.parse_dump import parse_dump


def main() -> None:
    """Run the dump parsing command."""
    parse_dump(prog_name="wiki-article-parser")


if __name__ == "__main__":
    main()
