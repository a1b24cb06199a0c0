"""Streaming reader for MediaWiki XML dumps."""

from collections.abc import Iterator
from pathlib import Path

import structlog
from lxml import etree

from src.models.page import PageRecord, RevisionRecord
from src.utils.exceptions import IngestionError

logger = structlog.get_logger(__name__)


def _namespace(elem: etree._Element) -> str:
    """Namespace prefix ("{http://www.mediawiki.org/xml/export-0.11/}") of an element."""
    tag = elem.tag
    if isinstance(tag, str) and tag.startswith("{"):
        return tag[: tag.index("}") + 1]
    return ""


def _child_text(elem: etree._Element, ns: str, name: str) -> str | None:
    child = elem.find(f"{ns}{name}")
    if child is None or child.text is None:
        return None
    return str(child.text)


class WikiDumpReader:
    """Reads page records from a MediaWiki XML export.

    Uses iterparse so that dumps far larger than memory can be streamed. Every
    namespace is read; classification happens later. The dump's schema
    version is taken from each page element, so export-0.10 and export-0.11
    files both work.
    """

    def __init__(self) -> None:
        """Initialize the WikiDumpReader."""
        self.logger = logger.bind(component="wiki_dump_reader")
        self.pages_read = 0
        self.pages_skipped = 0

    def read_pages(
        self,
        xml_path: str | Path,
        page_ids: list[int] | None = None,
    ) -> Iterator[PageRecord]:
        """Yield a PageRecord for each page in the dump.

        Args:
            xml_path: Path to the XML export file
            page_ids: Optional list of page ids to keep

        Yields:
            PageRecord objects in dump order

        Raises:
            FileNotFoundError: If the XML file doesn't exist
            IngestionError: If the XML is malformed
        """
        xml_path = Path(xml_path)
        if not xml_path.exists():
            raise FileNotFoundError(f"XML file not found: {xml_path}")

        self.logger.info("parsing_xml_dump", path=str(xml_path), page_ids_filter=bool(page_ids))

        page_id_set = set(page_ids) if page_ids else None
        context = etree.iterparse(str(xml_path), events=("end",))

        try:
            for _, elem in context:
                if etree.QName(elem).localname != "page":
                    continue
                try:
                    page = self._process_page_element(elem, page_id_set)
                    if page is None:
                        self.pages_skipped += 1
                        continue

                    self.pages_read += 1
                    if self.pages_read % 1000 == 0:
                        self.logger.info(
                            "parsing_progress",
                            pages_read=self.pages_read,
                            pages_skipped=self.pages_skipped,
                        )
                    yield page
                except ValueError as e:
                    self.pages_skipped += 1
                    self.logger.error("page_record_error", error=str(e))
                finally:
                    # Always clear element to free memory
                    elem.clear()
        except etree.XMLSyntaxError as e:
            raise IngestionError(f"Malformed XML in {xml_path}: {e}") from e
        finally:
            self.logger.info(
                "parsing_complete",
                total_read=self.pages_read,
                total_skipped=self.pages_skipped,
            )

    def _process_page_element(
        self, elem: etree._Element, page_id_set: set[int] | None
    ) -> PageRecord | None:
        """Convert one <page> element.

        Args:
            elem: The page element
            page_id_set: Page ids to keep, or None for all pages

        Returns:
            PageRecord, or None if the page is filtered out or has no id

        Raises:
            ValueError: If a numeric field is not a number
        """
        ns = _namespace(elem)

        page_id_text = _child_text(elem, ns, "id")
        if page_id_text is None:
            self.logger.warning("missing_page_id")
            return None

        page_id = int(page_id_text.strip())
        if page_id_set and page_id not in page_id_set:
            return None

        namespace_text = _child_text(elem, ns, "ns")
        redirect_elem = elem.find(f"{ns}redirect")

        return PageRecord(
            id=page_id,
            title=_child_text(elem, ns, "title"),
            ns=int(namespace_text.strip()) if namespace_text else 0,
            redirect=redirect_elem.get("title") if redirect_elem is not None else None,
            revision=self._extract_revision(elem, ns),
        )

    def _extract_revision(self, elem: etree._Element, ns: str) -> RevisionRecord | None:
        """Last revision of a page (full-history dumps list several)."""
        revisions = elem.findall(f"{ns}revision")
        if not revisions:
            return None

        revision = revisions[-1]
        revision_id = _child_text(revision, ns, "id")
        return RevisionRecord(
            id=int(revision_id.strip()) if revision_id else 0,
            timestamp=_child_text(revision, ns, "timestamp"),
            text=_child_text(revision, ns, "text"),
        )
