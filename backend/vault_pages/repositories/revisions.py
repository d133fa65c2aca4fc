# vault_pages/repositories/revisions.py
from typing import List, Optional
from vault_pages.models.revision import Revision


def find_by_pk(revision_id) -> Optional[Revision]:
    if not revision_id:
        return None
    return Revision.query.filter_by(id=str(revision_id)).first()


def find_by_page(page) -> List[Revision]:
    """Revisions of a page, newest first."""
    return (
        Revision.query
        .filter_by(page_id=page.id)
        .order_by(Revision.version.desc())
        .all()
    )
