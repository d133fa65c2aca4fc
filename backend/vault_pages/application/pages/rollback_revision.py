# vault_pages/application/pages/rollback_revision.py
from flask import current_app
from vault_pages.models.page import Page
from vault_pages.models.revision import Revision
from vault_pages.domain.exceptions import RevisionMismatch
from vault_pages.domain.lifecycle.page import get_statuses
from vault_pages.repositories import pages
from vault_pages.utils.audit import log_action
from vault_pages.utils.transaction import transactional
from vault_pages.utils.versioning import snapshot_fields
from vault_pages.application.pages.save_page import save_with_revision


def rollback_revision(
    *,
    page: Page,
    revision: Revision,
    editor,
) -> Revision:
    """
    Restore a page's content from one of its revisions.

    Responsibilities:
    - Reject revisions that belong to another page
    - Record the pre-rollback content as a new revision, so the rollback
      itself can be rolled back
    - Leave the target revision untouched
    - Audit logging
    """
    if page.id is None or revision.page_id != page.id:
        raise RevisionMismatch(page.id, revision.id)

    statuses = get_statuses()

    with transactional():
        pages.lock(page)

        new_revision = save_with_revision(
            page,
            snapshot_fields(revision.snapshot),
            editor,
            statuses=statuses,
        )

        log_action(
            action="page.rollback",
            entity_type="page",
            entity_id=page.id,
            actor_id=editor.id,
            payload={
                "from_revision": revision.id,
                "from_version": revision.version,
                "to_version": new_revision.version,
            },
        )

    current_app.logger.info(
        "Page %s rolled back to revision %s by editor %s",
        page.id,
        revision.version,
        editor.id,
    )
    return new_revision
