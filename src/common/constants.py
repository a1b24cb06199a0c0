"""Constants for wiki article parsing and page classification."""

# Parser status messages
STATUS_SUCCESS = "SUCCESS"
STATUS_ERROR_PREFIX = "Error: "

# Defaults for missing page fields
EMPTY_TITLE = "EMPTY"
DEFAULT_REVISION_TIMESTAMP = "2000-01-01T00:00:45Z"

# Synthetic lead section (content before the first heading)
LEAD_HEADER_ID = 0
LEAD_HEADER_TITLE = "LEAD"

# Positional template arguments get "*POS_<index>" names
POSITIONAL_PARAMETER_PREFIX = "*POS_"

# Only this many elements at the top of a section are checked for {{Main}}
MAIN_ARTICLE_SEARCH_DEPTH = 3

MAIN_ARTICLE_TEMPLATES = frozenset({"MAIN", "MAIN ARTICLE"})

ANCILLARY_HEADERS = frozenset(
    {
        "REFERENCES",
        "EXTERNAL LINKS",
        "SEE ALSO",
        "NOTES",
        "BIBLIOGRAPHY",
        "FURTHER READING",
        "SOURCES",
        "FOOTNOTES",
        "PUBLICATIONS",
    }
)

# Infobox family: "Infobox ..." prefix plus a few legacy names
INFOBOX_PREFIX = "INFOBOX"
INFOBOX_TEMPLATES = frozenset({"TAXOBOX", "GEOBOX"})

DISAMBIGUATION_TEMPLATES = frozenset(
    {
        "DISAMBIGUATION",
        "DISAMBIG",
        "DISAMBIG-ACRONYM",
        "DISAMBIGUATION CATEGORY",
        "DAB",
    }
)

# Template parameter values with these prefixes are surfaced as external links
URL_VALUE_PREFIXES = ("HTTP", "WWW.")

# Link subtypes
LINK_SUBTYPE_DEFAULT = "WIKIMEDIA"
LINK_SUBTYPE_FILE = "FILE"
LINK_SUBTYPE_INVALID_URI = "INVALID URI"

# Namespace prefixes recognized on internal link targets ([[Category:Foo]])
LINK_NAMESPACES = frozenset(
    {
        "USER",
        "WIKIPEDIA",
        "FILE",
        "MEDIAWIKI",
        "TEMPLATE",
        "HELP",
        "CATEGORY",
        "PORTAL",
        "BOOK",
    }
)

# Wikilinks with these prefixes embed media rather than link to a page
IMAGE_NAMESPACES = frozenset({"FILE", "IMAGE"})

# Page namespace codes from the dump (https://en.wikipedia.org/wiki/Wikipedia:Namespace)
NAMESPACE_ARTICLE = "ARTICLE"
NAMESPACE_OTHER = "OTHER"

NAMESPACES = {
    0: NAMESPACE_ARTICLE,
    1: "TALK",
    2: "USER",
    4: "WIKIPEDIA",
    6: "FILE",
    8: "MEDIAWIKI",
    10: "TEMPLATE",
    12: "HELP",
    14: "CATEGORY",
    100: "PORTAL",
    108: "BOOK",
    118: "DRAFT",
    446: "EDUCATION",
    710: "TIMEDTEXT",
    828: "MODULE",
    2300: "GADGET",
    2302: "GADGET DEFINITION",
    -1: "SPECIAL",
    -2: "MEDIA",
}

# Page types
PAGE_TYPE_ARTICLE = "ARTICLE"
PAGE_TYPE_REDIRECT = "REDIRECT"
PAGE_TYPE_DISAMBIGUATION = "DISAMBIGUATION"
PAGE_TYPE_CATEGORY = "CATEGORY"
PAGE_TYPE_LIST = "LIST"

# Tags handled by MediaWiki parser extensions. Everything else mwparserfromhell
# reports as a Tag (HTML elements, bold/italic markup) is a plain container.
EXTENSION_TAGS = frozenset(
    {
        "ref",
        "references",
        "math",
        "chem",
        "ce",
        "nowiki",
        "pre",
        "gallery",
        "source",
        "syntaxhighlight",
        "poem",
        "score",
        "timeline",
        "hiero",
        "imagemap",
        "inputbox",
        "categorytree",
        "templatedata",
        "templatestyles",
        "graph",
        "mapframe",
        "maplink",
        "section",
        "indicator",
        "charinsert",
    }
)

# Table markup
TABLE_TAG = "table"
TABLE_ROW_TAG = "tr"
TABLE_HEADER_TAG = "th"
TABLE_CELL_TAG = "td"
TABLE_CAPTION_TAG = "caption"
TABLE_BODY_TAGS = frozenset({"tbody", "thead", "tfoot"})
