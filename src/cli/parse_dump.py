"""CLI command for parsing a wiki XML dump into the article element model."""

import json
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import click
from tqdm import tqdm

from src.cli.utils import load_page_ids
from src.common.constants import STATUS_SUCCESS
from src.ingestion.dump_reader import WikiDumpReader
from src.models.article import Article
from src.parser.assembler import ArticleAssembler
from src.utils.config import Config
from src.utils.exceptions import ConfigurationError, IngestionError
from src.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


@dataclass
class ParseStatistics:
    """Statistics for a dump parsing run.

    Attributes:
        articles_parsed: Articles parsed successfully
        articles_failed: Articles that produced an error record
        page_types: Count of successfully parsed articles per page type
        elements: Count of produced elements per kind
    """

    articles_parsed: int = 0
    articles_failed: int = 0
    page_types: Counter[str] = field(default_factory=Counter)
    elements: Counter[str] = field(default_factory=Counter)

    def record(self, article: Article) -> None:
        """Add one article to the statistics."""
        if article.parser_message != STATUS_SUCCESS:
            self.articles_failed += 1
            return

        self.articles_parsed += 1
        self.page_types[article.page_type] += 1
        self.elements["headers"] += len(article.headers)
        self.elements["texts"] += len(article.texts)
        self.elements["templates"] += len(article.templates)
        self.elements["links"] += len(article.links)
        self.elements["tags"] += len(article.tags)
        self.elements["tables"] += len(article.tables)

    def to_dict(self) -> dict[str, Any]:
        """Convert statistics to dictionary for JSON serialization."""
        return {
            "articles_parsed": self.articles_parsed,
            "articles_failed": self.articles_failed,
            "page_types": dict(self.page_types.most_common()),
            "elements": dict(self.elements),
        }


def _display_summary(stats: ParseStatistics) -> None:
    """Display the run summary on stderr, keeping stdout for article output."""
    click.echo("-" * 80, err=True)
    click.echo("Summary", err=True)
    click.echo("-" * 80, err=True)
    click.echo(f"  Articles parsed: {stats.articles_parsed:,}", err=True)
    click.echo(f"  Articles failed: {stats.articles_failed:,}", err=True)
    for page_type, count in stats.page_types.most_common():
        click.echo(f"  {page_type}: {count:,}", err=True)
    for kind, count in stats.elements.items():
        click.echo(f"  Total {kind}: {count:,}", err=True)


@click.command()
@click.argument("xml_path", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--page-ids-file",
    type=click.Path(exists=True, path_type=Path),
    help="Optional file containing page IDs to parse (one per line)",
)
@click.option(
    "--jsonl",
    is_flag=True,
    default=False,
    help="Write every parsed article to stdout as one JSON line",
)
def parse_dump(xml_path: Path, page_ids_file: Path | None, jsonl: bool) -> None:
    """Parse a MediaWiki XML dump into headers, texts, templates, links, tags and tables.

    Parser toggles are read from the environment (PARSE_TEXT, PARSE_LINKS,
    PARSE_TEMPLATES, PARSE_TAGS, PARSE_TABLES, PARSE_REF_TAGS).
    """
    try:
        config = Config()
    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        raise click.Abort() from e

    configure_logging(config.log_level)
    click.echo(f"Parsing wiki dump from: {xml_path}", err=True)

    page_ids = None
    if page_ids_file:
        try:
            page_ids = load_page_ids(page_ids_file)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            raise click.Abort() from e
        click.echo(f"Filtering to {len(page_ids)} page IDs", err=True)

    reader = WikiDumpReader()
    assembler = ArticleAssembler(config.parser_config())
    stats = ParseStatistics()

    try:
        for page in tqdm(reader.read_pages(xml_path, page_ids), unit=" pages", disable=None):
            article = assembler.parse(page)
            stats.record(article)
            if jsonl:
                click.echo(json.dumps(article.to_dict(), ensure_ascii=False))

    except KeyboardInterrupt:
        click.echo("\nParsing interrupted by user", err=True)
    except IngestionError as e:
        logger.error("parse_dump_failed", error=str(e))
        click.echo(f"Error: {e}", err=True)
        raise click.Abort() from e

    _display_summary(stats)
    logger.info("parse_dump_complete", **stats.to_dict())


if __name__ == "__main__":
    parse_dump()
