"""Unit tests for syntax tree dispatch and processing toggles."""

from collections.abc import Callable

from mwparserfromhell.nodes import Comment

from src.models.article import Element, Header, Link, Table, Tag, Template, Text
from src.parser.state import ParseState
from src.parser.walker import SyntaxTreeWalker
from src.utils.config import ParserConfig

WalkText = Callable[..., list[Element]]

ALL_OFF = ParserConfig(
    parse_text=False,
    parse_links=False,
    parse_templates=False,
    parse_tags=False,
    parse_tables=False,
    parse_ref_tags=False,
)

MIXED = (
    "Intro [[Horus]] {{Quote|text}} <math>y</math>\n"
    "{|\n|-\n| [[Luna Wolves]]\n|}\n"
    "[http://example.org Site] <ref>[[Isstvan]]</ref>\n"
    "== History ==\nMore [[Cthonia]]"
)


def _element_ids(elements: list[Element]) -> list[int]:
    return [e.element_id for e in elements if isinstance(e, Link | Template | Tag | Table)]


class TestDispatch:
    """Test how node kinds are routed to converters."""

    def test_plain_text(self, walk_text: WalkText) -> None:
        """Test that plain text becomes a single text element."""
        assert walk_text("Horus was the Warmaster.") == [Text(1, 0, "Horus was the Warmaster.")]

    def test_empty_input(self, walk_text: WalkText) -> None:
        """Test that empty wikitext yields nothing."""
        assert walk_text("") == []

    def test_comments_yield_nothing(self, walk_text: WalkText) -> None:
        """Test that HTML comments are skipped."""
        assert walk_text("<!-- hidden -->") == []

    def test_template_arguments_yield_nothing(self, walk_text: WalkText) -> None:
        """Test that {{{arguments}}} are skipped."""
        assert walk_text("{{{1}}}") == []

    def test_heading_marker_is_not_text(self, walk_text: WalkText) -> None:
        """Test that heading titles appear only on the header."""
        elements = walk_text("== History ==")

        assert [type(e) for e in elements] == [Header]
        assert elements[0].title == "History"

    def test_html_container_passes_content_through(self, walk_text: WalkText) -> None:
        """Test that ordinary HTML elements are transparent."""
        elements = walk_text("<div>[[Horus]]</div>")
        assert [link.destination for link in elements if isinstance(link, Link)] == ["Horus"]

    def test_unknown_node_yields_nothing(
        self, walker: SyntaxTreeWalker, make_state: Callable[..., ParseState]
    ) -> None:
        """Test that an unexpected object is skipped rather than raising."""
        assert walker.walk(make_state(), object()) == []

    def test_walks_plain_lists(
        self, walker: SyntaxTreeWalker, make_state: Callable[..., ParseState]
    ) -> None:
        """Test that node lists are walked in order."""
        state = make_state()
        assert walker.walk(state, [Comment(" a "), Comment(" b ")]) == []

    def test_element_ids_increase_in_emission_order(self, walk_text: WalkText) -> None:
        """Test that element ids are unique and follow output order."""
        ids = _element_ids(walk_text(MIXED))

        assert ids == list(range(len(ids)))
        assert len(ids) >= 7


class TestToggles:
    """Test the processing toggles."""

    def test_all_disabled_yields_nothing(self, walk_text: WalkText) -> None:
        """Test that headers alone remain when every toggle is off."""
        elements = walk_text(MIXED, ALL_OFF)
        assert [type(e) for e in elements] == [Header]

    def test_text_disabled(self, walk_text: WalkText) -> None:
        """Test that only the link remains for a linked sentence."""
        elements = walk_text("Horus was [[Warmaster]].", ParserConfig(parse_text=False))
        assert [type(e) for e in elements] == [Link]

    def test_links_disabled(self, walk_text: WalkText) -> None:
        """Test that links and their display text are dropped together."""
        elements = walk_text("Horus was [[Warmaster]].", ParserConfig(parse_links=False))
        assert elements == [Text(1, 0, "Horus was "), Text(1, 0, ".")]

    def test_tables_disabled_keeps_other_kinds(self, walk_text: WalkText) -> None:
        """Test that disabling one kind does not affect the others."""
        elements = walk_text(MIXED, ParserConfig(parse_tables=False))
        destinations = [e.destination for e in elements if isinstance(e, Link)]

        assert not any(isinstance(e, Table) for e in elements)
        assert "Luna Wolves" not in destinations
        assert "Horus" in destinations

    def test_ids_stay_dense_with_toggles(self, walk_text: WalkText) -> None:
        """Test that dropped elements do not consume ids."""
        ids = _element_ids(walk_text(MIXED, ParserConfig(parse_templates=False)))
        assert ids == list(range(len(ids)))

    def test_disabled_section_content_keeps_headers(self, walk_text: WalkText) -> None:
        """Test that headers are always emitted."""
        elements = walk_text("== A ==\n[[Horus]]\n=== B ===\ntext", ALL_OFF)
        assert [e.title for e in elements] == ["A", "B"]
