"""Caption extraction and HTML serialization for wiki tables.

The HTML is a rendering aid only; it is never reparsed or validated.
"""

from typing import Any

from mwparserfromhell.nodes import Tag  # type: ignore[import-untyped]
from mwparserfromhell.wikicode import Wikicode  # type: ignore[import-untyped]

from src.common.constants import (
    TABLE_BODY_TAGS,
    TABLE_CAPTION_TAG,
    TABLE_CELL_TAG,
    TABLE_HEADER_TAG,
    TABLE_ROW_TAG,
    TABLE_TAG,
)
from src.parser.node_text import tag_name, text_of

CELL_TAGS = frozenset({TABLE_HEADER_TAG, TABLE_CELL_TAG})


def is_table(node: Any) -> bool:
    """Whether a node is a table ({| ... |} or <table>)."""
    return isinstance(node, Tag) and tag_name(node) == TABLE_TAG


def _children(node: Tag) -> list[Any]:
    contents = node.contents
    if isinstance(contents, Wikicode):
        return list(contents.nodes)
    return []


def is_wiki_caption(node: Any) -> bool:
    """Whether a node is a "|+ Caption" line.

    mwparserfromhell has no caption node for wiki tables; it reads "|+" as a
    cell whose contents start with "+".
    """
    return (
        isinstance(node, Tag)
        and tag_name(node) == TABLE_CELL_TAG
        and node.wiki_markup == "|"
        and str(node.contents).startswith("+")
    )


def table_caption(table: Tag) -> str:
    """Captions of a table, searched through its body wrappers and joined by a space."""
    return " ".join(_captions(table))


def _captions(node: Tag) -> list[str]:
    captions: list[str] = []
    for child in _children(node):
        if not isinstance(child, Tag):
            continue
        name = tag_name(child)
        if is_wiki_caption(child):
            captions.append(text_of(child).removeprefix("+").strip())
        elif name == TABLE_CAPTION_TAG:
            captions.append(text_of(child))
        elif name in TABLE_BODY_TAGS:
            captions.extend(_captions(child))
    return captions


def table_html(table: Tag) -> str:
    """Serialize a table to <table><tr><th/td>...</tr></table>."""
    return f"<table>{_rows_html(table)}</table>"


def _rows_html(node: Tag) -> str:
    parts: list[str] = []
    # Cells written before the first "|-" have no row of their own
    implicit_row: list[str] = []

    for child in _children(node):
        if not isinstance(child, Tag) or is_wiki_caption(child):
            continue
        name = tag_name(child)
        if name in CELL_TAGS:
            implicit_row.append(_cell_html(child))
            continue
        if implicit_row:
            parts.append(f"<tr>{''.join(implicit_row)}</tr>")
            implicit_row = []
        if name == TABLE_ROW_TAG:
            parts.append(f"<tr>{_cells_html(child)}</tr>")
        elif name in TABLE_BODY_TAGS:
            parts.append(_rows_html(child))

    if implicit_row:
        parts.append(f"<tr>{''.join(implicit_row)}</tr>")
    return "".join(parts)


def _cells_html(row: Tag) -> str:
    return "".join(
        _cell_html(child)
        for child in _children(row)
        if isinstance(child, Tag) and tag_name(child) in CELL_TAGS and not is_wiki_caption(child)
    )


def _cell_html(cell: Tag) -> str:
    element = tag_name(cell)
    parts: list[str] = []
    run: list[Any] = []
    for child in _children(cell):
        if is_table(child):
            parts.append(text_of(Wikicode(run)))
            parts.append(table_html(child))
            run = []
        else:
            run.append(child)
    parts.append(text_of(Wikicode(run)))
    content = " ".join(part for part in parts if part)
    return f"<{element}>{content}</{element}>"
