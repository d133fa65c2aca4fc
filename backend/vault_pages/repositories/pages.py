# vault_pages/repositories/pages.py
from typing import Optional
from sqlalchemy import select
from vault_pages.extensions import db
from vault_pages.domain.lifecycle.page import get_statuses
from vault_pages.models.page import Page
from vault_pages.utils.versioning import snapshot_fields

SORTABLE_FIELDS = {"title", "slug", "status", "created_at", "updated_at"}


def find_by_pk(page_id) -> Optional[Page]:
    if not page_id:
        return None
    return Page.query.filter_by(id=str(page_id), deleted_at=None).first()


def find_by_slug(slug: str, *, exclude: Optional[Page] = None) -> Optional[Page]:
    query = Page.query.filter_by(slug=slug, deleted_at=None)
    if exclude is not None and exclude.id is not None:
        query = query.filter(Page.id != exclude.id)
    return query.first()


def find(*, status: Optional[str] = None, sort: str = "updated_at", order: str = "desc"):
    """Live pages as a query, optionally filtered by status."""
    query = Page.query.filter_by(deleted_at=None)
    if status:
        query = query.filter_by(status=status)

    if sort not in SORTABLE_FIELDS:
        sort = "updated_at"

    column = getattr(Page, sort)
    ordering = column.asc() if order == "asc" else column.desc()
    return query.order_by(ordering, Page.id.asc())


def create() -> Page:
    """New, unsaved page in the default status."""
    page = Page()
    page.title = ""
    page.slug = ""
    page.source = ""
    page.keywords = ""
    page.description = ""
    page.meta_tags = ""
    page.status = get_statuses().default
    return page


def create_from_revision(revision) -> Page:
    """New, unsaved page carrying the content of a revision."""
    page = create()
    for field, value in snapshot_fields(revision.snapshot).items():
        setattr(page, field, value)
    return page


def lock(page: Page) -> Page:
    """
    Take a row-level lock on a persisted page for the current transaction.

    The locked row is re-read into the already loaded instance, so writes
    committed since the page was loaded are not lost from its history.
    """
    return (
        db.session.execute(
            select(Page)
            .where(Page.id == page.id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        .scalar_one()
    )
