"""Per-article state threaded through the syntax tree walk."""

from dataclasses import dataclass, field

from src.common.constants import LEAD_HEADER_ID
from src.parser.engine import MarkupEngine
from src.utils.config import ParserConfig


@dataclass
class ParseState:
    """Mutable context for converting one article.

    Created immediately before walking an article's tree and discarded
    afterwards. Never shared between articles.

    Attributes:
        article_id: Page id of the article being parsed
        article_name: Page title, used as the destination of same-page bookmark links
        config: Processing toggles
        engine: Markup engine used to reparse fragments such as <ref> bodies
        current_header_id: Header that newly produced elements belong to
    """

    article_id: int
    article_name: str
    config: ParserConfig
    engine: MarkupEngine
    current_header_id: int = LEAD_HEADER_ID
    _last_header_id: int = field(default=LEAD_HEADER_ID, repr=False)
    _next_element_id: int = field(default=0, repr=False)

    def next_header_id(self) -> int:
        """Allocate the next header id (starting at 1) and make it current."""
        self._last_header_id += 1
        self.current_header_id = self._last_header_id
        return self.current_header_id

    def next_element_id(self) -> int:
        """Allocate the next id from the counter shared by links, templates, tags and tables."""
        element_id = self._next_element_id
        self._next_element_id += 1
        return element_id
