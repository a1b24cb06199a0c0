"""Text collection from syntax nodes.

Text is often buried deep inside a node (header titles, template names and
parameter values, table cells), so it has to be gathered recursively.
"""

from typing import Any

from mwparserfromhell.nodes import (  # type: ignore[import-untyped]
    ExternalLink,
    Heading,
    HTMLEntity,
    Tag,
    Text,
    Wikilink,
)
from mwparserfromhell.wikicode import Wikicode  # type: ignore[import-untyped]

from src.common.constants import EXTENSION_TAGS


def tag_name(node: Tag) -> str:
    """Lower-cased tag name ("ref", "table", "td", ...)."""
    return str(node.tag).strip().lower()


def is_extension_tag(node: Any) -> bool:
    """Whether a node is a parser extension tag such as <ref> or <math>."""
    return isinstance(node, Tag) and tag_name(node) in EXTENSION_TAGS


def tag_body(node: Tag) -> str:
    """Raw, unparsed body of a tag."""
    return str(node.contents) if node.contents is not None else ""


def text_of(node: Any) -> str:
    """Concatenated text and tag content of a node, trimmed.

    Args:
        node: Syntax node, node list or None

    Returns:
        Plain text with line breaks removed
    """
    return _collect(node).strip()


def _collect(node: Any) -> str:
    if node is None:
        return ""
    if isinstance(node, Wikicode):
        return "".join(_collect(child) for child in node.nodes)
    if isinstance(node, Text):
        return str(node.value).replace("\r", "").replace("\n", "")
    if isinstance(node, HTMLEntity):
        return str(node.normalize())
    if isinstance(node, Tag):
        if is_extension_tag(node):
            return tag_body(node)
        return _collect(node.contents)
    if isinstance(node, Wikilink):
        return _collect(node.text) if node.text is not None else _collect(node.title)
    if isinstance(node, ExternalLink):
        return _collect(node.title) if node.title is not None else str(node.url).strip()
    if isinstance(node, Heading):
        return _collect(node.title)
    # Templates, comments and template arguments carry no readable text
    return ""
