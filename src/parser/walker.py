"""Recursive dispatcher over the markup engine's syntax tree."""

from typing import Any

import structlog
from mwparserfromhell import nodes  # type: ignore[import-untyped]
from mwparserfromhell.nodes.extras import Parameter  # type: ignore[import-untyped]
from mwparserfromhell.wikicode import Wikicode  # type: ignore[import-untyped]

from src.models.article import Element
from src.parser.builders import ElementBuilder, is_image_link
from src.parser.engine import Section
from src.parser.node_text import is_extension_tag
from src.parser.state import ParseState
from src.parser.tables import is_table

logger = structlog.get_logger(__name__)


class SyntaxTreeWalker:
    """Walks a syntax tree and converts it into a flat element stream.

    Dispatch order:
    1. Heading markers are dropped (titles are read from their section).
    2. Sections become headers.
    3. Leaf kinds are converted only when their toggle is enabled; otherwise
       they are dropped together with everything inside them.
    4. Containers pass the recursion through. Unknown kinds yield nothing.

    The walker itself is stateless; all state lives in the ParseState.
    """

    def __init__(self) -> None:
        self.builder = ElementBuilder(self.walk)

    def walk(self, state: ParseState, node: Any) -> list[Element]:
        """Convert a node, node list or sequence of nodes.

        Args:
            state: Parse state of the current article
            node: Syntax node, Wikicode or list of either

        Returns:
            Elements in document order
        """
        if isinstance(node, Wikicode):
            return self._walk_all(state, node.nodes)
        if isinstance(node, list | tuple):
            return self._walk_all(state, node)
        return self._dispatch(state, node)

    def _walk_all(self, state: ParseState, children: Any) -> list[Element]:
        elements: list[Element] = []
        for child in children:
            elements.extend(self.walk(state, child))
        return elements

    def _dispatch(self, state: ParseState, node: Any) -> list[Element]:
        config = state.config
        builder = self.builder

        if isinstance(node, nodes.Heading):
            return []
        if isinstance(node, Section):
            return builder.header(state, node)

        # Leaf kinds
        if isinstance(node, nodes.Text):
            return builder.text(state, node) if config.parse_text else []
        if isinstance(node, nodes.HTMLEntity):
            return builder.html_entity(state, node) if config.parse_text else []
        if isinstance(node, nodes.Wikilink):
            if not config.parse_links:
                return []
            if is_image_link(node):
                return builder.image_link(state, node)
            return builder.internal_link(state, node)
        if isinstance(node, nodes.ExternalLink):
            return builder.external_link(state, node) if config.parse_links else []
        if isinstance(node, nodes.Template):
            return builder.template(state, node) if config.parse_templates else []
        if is_table(node):
            return builder.table(state, node) if config.parse_tables else []
        if is_extension_tag(node):
            return builder.tag(state, node) if config.parse_tags else []

        # Containers: HTML elements, bold/italic, table rows and cells, template arguments
        if isinstance(node, nodes.Tag):
            return self.walk(state, node.contents)
        if isinstance(node, Parameter):
            return self.walk(state, [node.name, node.value])

        # Comments and {{{arguments}}} have no meaning of their own
        if not isinstance(node, nodes.Comment | nodes.Argument):
            logger.debug("unhandled_node_skipped", node_type=type(node).__name__)
        return []
