"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest

from src.models.article import Element
from src.models.page import PageRecord, RevisionRecord
from src.parser.engine import MarkupEngine
from src.parser.state import ParseState
from src.parser.walker import SyntaxTreeWalker
from src.utils.config import ParserConfig

SAMPLE_DUMP = """<mediawiki xmlns="http://www.mediawiki.org/xml/export-0.11/" version="0.11" xml:lang="en">
  <siteinfo>
    <sitename>Lexicanum</sitename>
  </siteinfo>
  <page>
    <title>Horus</title>
    <ns>0</ns>
    <id>10</id>
    <revision>
      <id>100</id>
      <timestamp>2020-01-01T00:00:00Z</timestamp>
      <text bytes="44" xml:space="preserve">Horus was the [[Primarch]] of the Luna Wolves.</text>
    </revision>
  </page>
  <page>
    <title>Warmaster</title>
    <ns>0</ns>
    <id>11</id>
    <redirect title="Horus" />
    <revision>
      <id>101</id>
      <timestamp>2020-01-02T00:00:00Z</timestamp>
      <text bytes="19" xml:space="preserve">#REDIRECT [[Horus]]</text>
    </revision>
  </page>
  <page>
    <title>Category:Primarchs</title>
    <ns>14</ns>
    <id>12</id>
    <revision>
      <id>102</id>
      <timestamp>2020-01-03T00:00:00Z</timestamp>
      <text bytes="23" xml:space="preserve">The twenty [[Primarch]]s.</text>
    </revision>
  </page>
</mediawiki>
"""


@pytest.fixture
def sample_dump_path(tmp_path: Path) -> Path:
    """Write a small three-page dump and return its path."""
    path = tmp_path / "dump.xml"
    path.write_text(SAMPLE_DUMP, encoding="utf-8")
    return path


@pytest.fixture
def engine() -> MarkupEngine:
    """Create a MarkupEngine instance for testing."""
    return MarkupEngine()


@pytest.fixture
def walker() -> SyntaxTreeWalker:
    """Create a SyntaxTreeWalker instance for testing."""
    return SyntaxTreeWalker()


@pytest.fixture
def make_state(engine: MarkupEngine) -> Callable[..., ParseState]:
    """Factory for parse states of a test article titled "Baz"."""

    def _make(config: ParserConfig | None = None, article_name: str = "Baz") -> ParseState:
        return ParseState(
            article_id=1,
            article_name=article_name,
            config=config or ParserConfig(),
            engine=engine,
        )

    return _make


@pytest.fixture
def walk_text(
    engine: MarkupEngine,
    walker: SyntaxTreeWalker,
    make_state: Callable[..., ParseState],
) -> Callable[..., list[Element]]:
    """Parse wikitext and walk it, returning the flat element stream."""

    def _walk(text: str, config: ParserConfig | None = None, article_name: str = "Baz") -> list[Element]:
        state = make_state(config, article_name)
        return walker.walk(state, engine.parse(1, article_name, text))

    return _walk


@pytest.fixture
def make_page() -> Callable[..., PageRecord]:
    """Factory for page records with sensible defaults."""

    def _make(
        text: str | None = "",
        title: str | None = "Baz",
        page_id: int = 1,
        ns: int = 0,
        redirect: str | None = None,
        timestamp: str | None = "2020-01-01T00:00:00Z",
        revision_id: int = 7,
        with_revision: bool = True,
    ) -> PageRecord:
        revision = (
            RevisionRecord(id=revision_id, timestamp=timestamp, text=text) if with_revision else None
        )
        return PageRecord(id=page_id, title=title, ns=ns, redirect=redirect, revision=revision)

    return _make
