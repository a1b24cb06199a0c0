"""Converters from syntax nodes to article elements.

Each converter consumes one node plus the parse state and returns zero or more
elements. Converters that need nested content call back into the walker.
"""

import re
from collections.abc import Callable, Sequence
from typing import Any
from urllib.parse import urlsplit

import structlog
from mwparserfromhell import nodes  # type: ignore[import-untyped]
from mwparserfromhell.nodes.extras import Parameter  # type: ignore[import-untyped]

from src.common.constants import (
    ANCILLARY_HEADERS,
    IMAGE_NAMESPACES,
    INFOBOX_PREFIX,
    INFOBOX_TEMPLATES,
    LINK_NAMESPACES,
    LINK_SUBTYPE_DEFAULT,
    LINK_SUBTYPE_FILE,
    LINK_SUBTYPE_INVALID_URI,
    MAIN_ARTICLE_SEARCH_DEPTH,
    MAIN_ARTICLE_TEMPLATES,
    POSITIONAL_PARAMETER_PREFIX,
    URL_VALUE_PREFIXES,
)
from src.models.article import Element, Header, Link, LinkType, Table, Tag, Template, Text
from src.parser.engine import Section
from src.parser.node_text import tag_body, text_of
from src.parser.state import ParseState
from src.parser.tables import table_caption, table_html

logger = structlog.get_logger(__name__)

WalkFn = Callable[[ParseState, Any], list[Element]]

# Hostnames may be internationalized or IPv6 literals, but never contain spaces
HOST_PATTERN = re.compile(r"^[\w.\-:]+$")


def resolve_host(uri: str) -> str | None:
    """Extract the host of a URL.

    Scheme-less destinations such as "www.example.com/page" are read as
    network locations.

    Args:
        uri: URL without bookmark

    Returns:
        Lower-cased host, or None if no valid host can be found
    """
    try:
        parts = urlsplit(uri)
        if not parts.scheme and not parts.netloc:
            parts = urlsplit("//" + uri)
        host = parts.hostname
    except ValueError:
        return None

    if not host or not HOST_PATTERN.match(host):
        return None
    return host


def is_image_link(node: nodes.Wikilink) -> bool:
    """Whether a wikilink embeds a file ([[File:...]] or [[Image:...]])."""
    prefix, separator, _ = str(node.title).strip().partition(":")
    return bool(separator) and prefix.strip().upper() in IMAGE_NAMESPACES


def is_url_value(value: str) -> bool:
    """Whether a template parameter value is a bare URL."""
    return value.upper().startswith(URL_VALUE_PREFIXES)


def without_text(elements: Sequence[Element]) -> list[Element]:
    """Drop Text elements, keeping links, templates, tags, tables and headers."""
    return [element for element in elements if not isinstance(element, Text)]


def _main_article(elements: Sequence[Element]) -> str | None:
    for element in elements[:MAIN_ARTICLE_SEARCH_DEPTH]:
        if (
            isinstance(element, Template)
            and element.template_type.upper() in MAIN_ARTICLE_TEMPLATES
        ):
            return element.parameters[0][1] if element.parameters else None
    return None


def _parameter(index: int, param: Parameter) -> tuple[str, str]:
    name = text_of(param.name) if param.showkey else ""
    if not name:
        name = f"{POSITIONAL_PARAMETER_PREFIX}{index}"
    return name, text_of(param.value)


class ElementBuilder:
    """Builds article elements from syntax nodes.

    Args:
        walk: Walker entry point used to convert nested content
    """

    def __init__(self, walk: WalkFn) -> None:
        self._walk = walk

    def header(self, state: ParseState, section: Section) -> list[Element]:
        """Header section (==Title== is level 1) followed by everything nested in it."""
        title = text_of(section.heading.title)
        level = section.level - 1

        # Everything inside the section is attributed to the new header
        parent_header_id = state.current_header_id
        header_id = state.next_header_id()
        nested = self._walk(state, section.body)
        state.current_header_id = parent_header_id

        header = Header(
            parent_article_id=state.article_id,
            parent_header_id=parent_header_id,
            header_id=header_id,
            title=title,
            level=level,
            main_article=_main_article(nested),
            is_ancillary=title.upper() in ANCILLARY_HEADERS,
        )
        return [header, *nested]

    def text(self, state: ParseState, node: nodes.Text) -> list[Element]:
        """Natural language text with line endings standardized."""
        content = str(node.value).replace("\r\n", "\n").replace("\r", "\n")
        return [Text(state.article_id, state.current_header_id, content)]

    def html_entity(self, state: ParseState, node: nodes.HTMLEntity) -> list[Element]:
        """HTML entities (&gt; &amp; &nbsp; ...) converted to text."""
        return [Text(state.article_id, state.current_header_id, str(node.normalize()))]

    def internal_link(self, state: ParseState, node: nodes.Wikilink) -> list[Element]:
        """Link to another wiki page, plus its display text.

        Links are usually part of the sentence they appear in, so the display
        text also goes to the text stream.
        """
        # [[Page#Section]] carries a bookmark; [[#Section]] points at this page
        destination, _, bookmark = str(node.title).strip().partition("#")
        destination = destination.strip() or state.article_name

        text = text_of(node.text) if node.text is not None else destination

        # [[Namespace:Page]]
        prefix, separator, _ = destination.partition(":")
        namespace = prefix.strip().upper()
        sub_type = namespace if separator and namespace in LINK_NAMESPACES else LINK_SUBTYPE_DEFAULT

        link = Link(
            parent_article_id=state.article_id,
            parent_header_id=state.current_header_id,
            element_id=state.next_element_id(),
            destination=destination,
            text=text,
            link_type=LinkType.WIKIMEDIA,
            sub_type=sub_type,
            page_bookmark=bookmark.strip(),
        )
        return [link, *self._link_text(state, text)]

    def image_link(self, state: ParseState, node: nodes.Wikilink) -> list[Element]:
        """Embedded file. The caption is the last "|" option of the title."""
        destination = str(node.title).strip()
        title = text_of(node.text) if node.text is not None else ""
        text = title.split("|")[-1].strip() if title else destination

        link = Link(
            parent_article_id=state.article_id,
            parent_header_id=state.current_header_id,
            element_id=state.next_element_id(),
            destination=destination,
            text=text,
            link_type=LinkType.WIKIMEDIA,
            sub_type=LINK_SUBTYPE_FILE,
        )
        return [link, *self._link_text(state, text)]

    def external_link(self, state: ParseState, node: nodes.ExternalLink) -> list[Element]:
        """Bracketed or bare URL."""
        title = text_of(node.title) if node.title is not None else ""
        destination = str(node.url).strip() if node.url is not None else ""
        return self.build_external_link(state, title, destination)

    def build_external_link(self, state: ParseState, title: str, destination: str) -> list[Element]:
        """External link from already extracted fields.

        The bookmark is split off the destination, and the host becomes the
        subtype. An unparseable host still yields a link, flagged INVALID URI.

        Args:
            state: Parse state
            title: Display text
            destination: URL, possibly with a "#bookmark"

        Returns:
            Single external link
        """
        clean_destination, _, bookmark = destination.partition("#")

        host = resolve_host(clean_destination)
        if host is None:
            logger.debug(
                "invalid_external_link",
                article_id=state.article_id,
                destination=clean_destination,
            )

        return [
            Link(
                parent_article_id=state.article_id,
                parent_header_id=state.current_header_id,
                element_id=state.next_element_id(),
                destination=clean_destination,
                text=title,
                link_type=LinkType.EXTERNAL,
                sub_type=host if host is not None else LINK_SUBTYPE_INVALID_URI,
                page_bookmark=bookmark,
            )
        ]

    def tag(self, state: ParseState, node: nodes.Tag) -> list[Element]:
        """Extension tag such as <ref> or <math>.

        With ref reparsing enabled, a <ref> body is sent back to the engine and
        only the links, templates, tags and tables inside it are kept.
        """
        name = str(node.tag).strip()
        body = tag_body(node)

        if name.upper() == "REF" and state.config.parse_ref_tags:
            fragment = state.engine.parse_fragment(body)
            elements = without_text(self._walk(state, fragment))
            logger.debug("ref_tag_reparsed", article_id=state.article_id, elements=len(elements))
            return elements

        return [Tag(state.article_id, state.current_header_id, state.next_element_id(), name, body)]

    def template(self, state: ParseState, node: nodes.Template) -> list[Element]:
        """Template, then elements nested in its arguments, then links from URL arguments.

        Template bodies are not prose, so nested text is dropped.
        """
        parent_header_id = state.current_header_id
        element_id = state.next_element_id()
        name = text_of(node.name)

        params = list(node.params)
        parameters = tuple(_parameter(index, param) for index, param in enumerate(params))

        url_values = [value for _, value in parameters if is_url_value(value)]
        walked: list[Any] = []
        for param, (_, value) in zip(params, parameters):
            if is_url_value(value):
                # The URL itself is surfaced below as a parameter link
                walked.append(param.name)
                walked.extend(
                    node for node in param.value.nodes if not isinstance(node, nodes.ExternalLink)
                )
            else:
                walked.append(param)
        nested = without_text(self._walk(state, walked))

        links: list[Element] = []
        if state.config.parse_links:
            for value in url_values:
                links.extend(self.build_external_link(state, value, value))

        upper_name = name.upper()
        template = Template(
            parent_article_id=state.article_id,
            parent_header_id=parent_header_id,
            element_id=element_id,
            template_type=name,
            is_info_box=upper_name.startswith(INFOBOX_PREFIX) or upper_name in INFOBOX_TEMPLATES,
            parameters=parameters,
        )
        return [template, *nested, *links]

    def table(self, state: ParseState, node: nodes.Tag) -> list[Element]:
        """Table as HTML, then the non-text elements found in its cells."""
        table = Table(
            parent_article_id=state.article_id,
            parent_header_id=state.current_header_id,
            element_id=state.next_element_id(),
            caption=table_caption(node),
            html=table_html(node),
        )
        nested = without_text(self._walk(state, node.contents))
        return [table, *nested]

    def _link_text(self, state: ParseState, text: str) -> list[Element]:
        if not state.config.parse_text:
            return []
        return [Text(state.article_id, state.current_header_id, text)]
