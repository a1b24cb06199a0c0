"""Namespace naming and logical page type classification.

Page types are unofficial groupings, mostly used to filter pages. Some of
them can only be inferred heuristically from the title or from templates.
"""

from collections.abc import Iterable

from src.common.constants import (
    DISAMBIGUATION_TEMPLATES,
    NAMESPACE_ARTICLE,
    NAMESPACE_OTHER,
    NAMESPACES,
    PAGE_TYPE_ARTICLE,
    PAGE_TYPE_CATEGORY,
    PAGE_TYPE_DISAMBIGUATION,
    PAGE_TYPE_LIST,
    PAGE_TYPE_REDIRECT,
)
from src.models.article import Template


def namespace_name(code: int) -> str:
    """Convert a namespace code from the dump to its name (OTHER if unknown)."""
    return NAMESPACES.get(code, NAMESPACE_OTHER)


def has_disambiguation_template(templates: Iterable[Template]) -> bool:
    """Whether any template marks the page as a disambiguation page."""
    return any(template.template_type.upper() in DISAMBIGUATION_TEMPLATES for template in templates)


def classify_page(title: str, redirect: str, name_space: str, is_disambiguation: bool) -> str:
    """Classify a page.

    Rules are evaluated in order; the first match wins.

    Args:
        title: Page title
        redirect: Redirect target, empty if none
        name_space: Namespace name
        is_disambiguation: Whether the page contains a disambiguation template

    Returns:
        REDIRECT, the namespace name, DISAMBIGUATION, CATEGORY, LIST or ARTICLE
    """
    title_upper = title.upper()

    if redirect:
        return PAGE_TYPE_REDIRECT
    if name_space != NAMESPACE_ARTICLE:
        return name_space
    if "DISAMBIGUATION" in title_upper:
        return PAGE_TYPE_DISAMBIGUATION
    if is_disambiguation:
        return PAGE_TYPE_DISAMBIGUATION
    if "CATEGORY" in title_upper:
        return PAGE_TYPE_CATEGORY
    if title_upper.startswith("LIST OF"):
        return PAGE_TYPE_LIST
    return PAGE_TYPE_ARTICLE
