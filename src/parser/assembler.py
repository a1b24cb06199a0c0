"""Builds Article aggregates from raw page records.

Wikitext is parsed with mwparserfromhell, which produces a deep and exact
syntax tree. For most analytics that is overkill, so the tree is walked into
a flat element stream, grouped by kind and assembled into an Article.
"""

from datetime import UTC, datetime

import structlog

from src.common.constants import (
    DEFAULT_REVISION_TIMESTAMP,
    EMPTY_TITLE,
    LEAD_HEADER_ID,
    LEAD_HEADER_TITLE,
    STATUS_ERROR_PREFIX,
    STATUS_SUCCESS,
)
from src.models.article import Article, Element, Header, Link, Table, Tag, Template, Text
from src.models.page import PageRecord
from src.parser.classifier import classify_page, has_disambiguation_template, namespace_name
from src.parser.engine import MarkupEngine
from src.parser.state import ParseState
from src.parser.walker import SyntaxTreeWalker
from src.utils.config import ParserConfig

logger = structlog.get_logger(__name__)


def parse_timestamp(value: str) -> int:
    """Convert an ISO-8601 timestamp to epoch seconds (UTC when no offset is given).

    Raises:
        ValueError: If the timestamp is malformed
    """
    parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return int(parsed.timestamp())


def merge_texts(article_id: int, texts: list[Text]) -> tuple[Text, ...]:
    """Concatenate text fragments per header, in document order, and trim them."""
    fragments: dict[int, list[str]] = {}
    for text in texts:
        fragments.setdefault(text.parent_header_id, []).append(text.text)

    return tuple(
        Text(article_id, header_id, "".join(parts).strip())
        for header_id, parts in fragments.items()
    )


class ArticleAssembler:
    """Converts page records into Articles.

    Any failure while parsing a page is caught and reported in the Article's
    parser message, so one bad page never stops a batch.
    """

    def __init__(
        self, config: ParserConfig | None = None, engine: MarkupEngine | None = None
    ) -> None:
        """Initialize the assembler.

        Args:
            config: Processing toggles (all enabled by default)
            engine: Markup engine adapter
        """
        self.config = config or ParserConfig()
        self.engine = engine or MarkupEngine()
        self.walker = SyntaxTreeWalker()
        self.logger = logger.bind(component="article_assembler")

    def parse(self, page: PageRecord) -> Article:
        """Parse a page, returning an error Article instead of raising.

        Args:
            page: Raw page record

        Returns:
            Article with parser message SUCCESS, or "Error: ..." on failure
        """
        try:
            article = self._assemble(page)
        except Exception as e:
            self.logger.warning(
                "article_parsing_failed",
                article_id=page.id,
                title=page.title,
                error=str(e),
            )
            return self._error_article(page, e)

        self.logger.debug(
            "article_parsed",
            article_id=article.id,
            page_type=article.page_type,
            headers=len(article.headers),
            links=len(article.links),
            templates=len(article.templates),
        )
        return article

    def _assemble(self, page: PageRecord) -> Article:
        title = page.title if page.title is not None else EMPTY_TITLE
        redirect = page.redirect or ""

        revision = page.revision
        revision_id = revision.id if revision is not None else 0
        timestamp = revision.timestamp if revision is not None and revision.timestamp else None
        last_revision_date = parse_timestamp(timestamp or DEFAULT_REVISION_TIMESTAMP)
        wikitext = revision.text if revision is not None and revision.text else ""

        name_space = namespace_name(page.ns)

        # Redirect pages have no body worth parsing
        elements = [] if redirect else self._walk_page(page.id, title, wikitext)

        lead = Header(page.id, LEAD_HEADER_ID, LEAD_HEADER_ID, LEAD_HEADER_TITLE, 0)
        headers = (lead, *(e for e in elements if isinstance(e, Header)))
        templates = tuple(e for e in elements if isinstance(e, Template))
        texts = merge_texts(page.id, [e for e in elements if isinstance(e, Text)])

        is_disambiguation = has_disambiguation_template(templates)

        return Article(
            id=page.id,
            title=title,
            redirect=redirect,
            name_space=name_space,
            page_type=classify_page(title, redirect, name_space, is_disambiguation),
            last_revision_id=revision_id,
            last_revision_date=last_revision_date,
            parser_message=STATUS_SUCCESS,
            headers=headers,
            texts=texts,
            templates=templates,
            links=tuple(e for e in elements if isinstance(e, Link)),
            tags=tuple(e for e in elements if isinstance(e, Tag)),
            tables=tuple(e for e in elements if isinstance(e, Table)),
        )

    def _walk_page(self, page_id: int, title: str, wikitext: str) -> list[Element]:
        root = self.engine.parse(page_id, title, wikitext)
        state = ParseState(
            article_id=page_id, article_name=title, config=self.config, engine=self.engine
        )
        return self.walker.walk(state, root)

    def _error_article(self, page: PageRecord, error: Exception) -> Article:
        message = str(error) or type(error).__name__
        return Article(
            id=page.id,
            title=page.title if page.title is not None else EMPTY_TITLE,
            redirect="",
            name_space="",
            page_type="",
            last_revision_id=0,
            last_revision_date=0,
            parser_message=STATUS_ERROR_PREFIX + message,
        )
