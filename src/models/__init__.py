"""Domain models for the application."""

from src.models.article import Article, Element, Header, Link, LinkType, Table, Tag, Template, Text
from src.models.page import PageRecord, RevisionRecord

__all__ = [
    "Article",
    "Element",
    "Header",
    "Link",
    "LinkType",
    "PageRecord",
    "RevisionRecord",
    "Table",
    "Tag",
    "Template",
    "Text",
]
