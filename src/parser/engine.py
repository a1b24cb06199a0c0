"""Adapter around mwparserfromhell, the external markup engine.

mwparserfromhell returns a flat node list in which headings are just markers.
The article model needs the section structure, so the adapter regroups every
heading and the nodes that follow it into a ``Section`` node. A section runs
until the next heading of the same or a higher level, which nests
"===Sub===" sections inside their "==Parent==" section.
"""

from collections.abc import Iterator

import mwparserfromhell  # type: ignore[import-untyped]
import structlog
from mwparserfromhell.nodes import Heading, Node  # type: ignore[import-untyped]
from mwparserfromhell.parser import ParserError  # type: ignore[import-untyped]
from mwparserfromhell.wikicode import Wikicode  # type: ignore[import-untyped]

from src.utils.exceptions import MarkupEngineError

logger = structlog.get_logger(__name__)


class Section(Node):  # type: ignore[misc]
    """A heading plus the body that belongs to it."""

    def __init__(self, heading: Heading, body: Wikicode | None = None) -> None:
        super().__init__()
        self.heading = heading
        self.body = body if body is not None else Wikicode([])

    def __str__(self) -> str:
        return str(self.heading) + str(self.body)

    def __children__(self) -> Iterator[Wikicode]:
        yield self.heading.title
        yield self.body

    @property
    def level(self) -> int:
        """Heading level as written ("==H2==" is 2)."""
        return int(self.heading.level)


def sectionize(code: Wikicode) -> Wikicode:
    """Regroup a flat node list into nested sections.

    Nodes before the first heading stay at the top level (the lead).

    Args:
        code: Wikicode as returned by mwparserfromhell

    Returns:
        New Wikicode whose headings are wrapped in Section nodes
    """
    root: list[Node] = []
    stack: list[tuple[int, list[Node]]] = [(0, root)]

    for node in code.nodes:
        if isinstance(node, Heading):
            while stack[-1][0] >= node.level:
                stack.pop()
            section = Section(node)
            stack[-1][1].append(section)
            stack.append((node.level, section.body.nodes))
        else:
            stack[-1][1].append(node)

    return Wikicode(root)


class MarkupEngine:
    """Parses wikitext into a sectioned syntax tree.

    The engine keeps no per-page state, so one instance can serve any number
    of articles.
    """

    def parse(self, page_id: int, title: str, text: str) -> Wikicode:
        """Parse the full text of a page.

        Args:
            page_id: Page id (used for diagnostics)
            title: Page title (used for diagnostics)
            text: Raw wikitext

        Returns:
            Root node list of the page

        Raises:
            MarkupEngineError: If the engine fails on the text
        """
        try:
            return sectionize(mwparserfromhell.parse(text))
        except ParserError as e:
            logger.debug("markup_engine_failed", page_id=page_id, title=title, error=str(e))
            raise MarkupEngineError(f"Could not parse page {title!r}: {e}") from e

    def parse_fragment(self, text: str) -> Wikicode:
        """Parse a standalone fragment such as a <ref> body.

        Args:
            text: Raw wikitext of the fragment

        Returns:
            Root node list of the fragment

        Raises:
            MarkupEngineError: If the engine fails on the fragment
        """
        try:
            return sectionize(mwparserfromhell.parse(text))
        except ParserError as e:
            raise MarkupEngineError(f"Could not parse fragment: {e}") from e
