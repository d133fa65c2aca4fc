from flask import current_app
from vault_pages.models.page import Page
from vault_pages.utils.audit import log_action
from vault_pages.utils.transaction import transactional


def delete_page(
    *,
    page: Page,
    editor,
) -> None:
    """
    Soft-delete a page.

    Notes:
    - Revisions are kept; their live_page resolves to None afterwards
    - The slug becomes available to new pages
    """
    with transactional():
        page.soft_delete()
        page.editor_id = editor.id

        log_action(
            action="page.delete",
            entity_type="page",
            entity_id=page.id,
            actor_id=editor.id,
            payload={"slug": page.slug},
        )

    current_app.logger.info("Page %s deleted by editor %s", page.id, editor.id)
