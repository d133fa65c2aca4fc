from flask import current_app
from vault_pages.models.page import Page
from vault_pages.domain.lifecycle.page import get_statuses
from vault_pages.utils.audit import log_action
from vault_pages.utils.transaction import transactional


def change_page_status(
    *,
    page: Page,
    status,
    editor,
) -> Page:
    """
    Move a page to another status.

    Any recognised status may follow any other. Status is not part of the
    revisioned content, so no revision is written.
    """
    previous = page.status

    # Raises InvalidStatus before anything is touched
    page.set_status(status, get_statuses())

    with transactional():
        page.editor_id = editor.id

        log_action(
            action="page.status",
            entity_type="page",
            entity_id=page.id,
            actor_id=editor.id,
            payload={"from": previous, "to": status},
        )

    current_app.logger.info("Page %s status %s -> %s by editor %s", page.id, previous, status, editor.id)
    return page
