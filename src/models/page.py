"""Input page records as read from a wiki dump."""

from pydantic import BaseModel, ConfigDict


class RevisionRecord(BaseModel):
    """Last revision of a page."""

    model_config = ConfigDict(frozen=True)

    id: int = 0
    timestamp: str | None = None
    text: str | None = None


class PageRecord(BaseModel):
    """A raw page from the dump.

    Attributes:
        id: Page id
        title: Page title (may be missing in damaged dumps)
        ns: Namespace code
        redirect: Redirect target title, if the page is a redirect
        revision: Last revision, if present
    """

    model_config = ConfigDict(frozen=True)

    id: int
    title: str | None = None
    ns: int = 0
    redirect: str | None = None
    revision: RevisionRecord | None = None
