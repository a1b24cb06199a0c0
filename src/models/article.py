"""Simplified element model for a parsed wiki article.

The goal is a middle ground between the deep syntax tree produced by the
markup engine and completely flat text:

    Article
      Header sections
      Text
      Template
      Link
      Tag
      Table
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class LinkType(str, Enum):
    """Kind of hyperlink target."""

    WIKIMEDIA = "WIKIMEDIA"
    EXTERNAL = "EXTERNAL"


@dataclass(frozen=True)
class Header:
    """A header section of an article.

    Attributes:
        parent_article_id: Page id of the article
        parent_header_id: Header id of the enclosing section (0 for top-level sections)
        header_id: Unique (to the article) header identifier, 0 for the lead
        title: Header text
        level: Header depth. 0 is the lead, "==H2==" is 1, "===H3===" is 2, etc.
        main_article: Section's main article, taken from a {{Main}} template
        is_ancillary: References, External links, See also, etc.
    """

    parent_article_id: int
    parent_header_id: int
    header_id: int
    title: str
    level: int
    main_article: str | None = None
    is_ancillary: bool = False


@dataclass(frozen=True)
class Text:
    """Natural language fragment of an article.

    Parsing wikitext is not exact, so some markup artifacts are to be expected.
    """

    parent_article_id: int
    parent_header_id: int
    text: str


@dataclass(frozen=True)
class Template:
    """A MediaWiki template invocation such as {{Infobox person|name=...}}.

    Attributes:
        parent_article_id: Page id of the article
        parent_header_id: Header the template appears under
        element_id: Unique (to the article) element identifier
        template_type: Template name
        is_info_box: Whether the template belongs to the infobox family
        parameters: (name, value) pairs in argument order. Unnamed arguments
            get a "*POS_<index>" placeholder name.
    """

    parent_article_id: int
    parent_header_id: int
    element_id: int
    template_type: str
    is_info_box: bool
    parameters: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True)
class Link:
    """Internal or external hyperlink.

    Attributes:
        parent_article_id: Page id of the article
        parent_header_id: Header the link appears under
        element_id: Unique (to the article) element identifier
        destination: Page title for internal links, URL for external links.
            Internal destinations frequently point at redirects.
        text: Display text. Falls back to the destination.
        link_type: WIKIMEDIA or EXTERNAL
        sub_type: Namespace for internal links, host for external links
        page_bookmark: Fragment after "#", kept apart from the destination
    """

    parent_article_id: int
    parent_header_id: int
    element_id: int
    destination: str
    text: str
    link_type: LinkType
    sub_type: str
    page_bookmark: str = ""


@dataclass(frozen=True)
class Tag:
    """Extension tag (ref, math, nowiki, ...) with its raw body."""

    parent_article_id: int
    parent_header_id: int
    element_id: int
    tag: str
    tag_value: str


@dataclass(frozen=True)
class Table:
    """A wiki table serialized to HTML.

    Rows and columns can be merged and header cells are often misused, so the
    table is left as HTML for the caller to interpret.
    """

    parent_article_id: int
    parent_header_id: int
    element_id: int
    caption: str
    html: str


Element = Header | Text | Template | Link | Tag | Table


@dataclass(frozen=True)
class Article:
    """Structured representation of a page's metadata plus parsed wikitext.

    Attributes:
        id: Page id from the dump
        title: Page title
        redirect: Redirect target title, empty if the page is not a redirect
        name_space: Namespace name (ARTICLE, TALK, CATEGORY, ...)
        page_type: ARTICLE, REDIRECT, DISAMBIGUATION, CATEGORY, LIST or the namespace
        last_revision_id: Id of the last revision
        last_revision_date: Last revision time as epoch seconds
        parser_message: SUCCESS or the error message
    """

    id: int
    title: str
    redirect: str
    name_space: str
    page_type: str
    last_revision_id: int
    last_revision_date: int
    parser_message: str
    headers: tuple[Header, ...] = ()
    texts: tuple[Text, ...] = ()
    templates: tuple[Template, ...] = ()
    links: tuple[Link, ...] = ()
    tags: tuple[Tag, ...] = ()
    tables: tuple[Table, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Convert the article to a dictionary for JSON serialization."""
        data = asdict(self)
        for link in data["links"]:
            link["link_type"] = link["link_type"].value
        return data
