# vault_pages/application/pages/save_page.py
from typing import Any, Mapping
from flask import current_app
from vault_pages.extensions import db
from vault_pages.models.page import EDITABLE_FIELDS, Page
from vault_pages.models.revision import Revision
from vault_pages.domain.exceptions import ValidationError
from vault_pages.domain.invariants.page import assert_page
from vault_pages.domain.lifecycle.page import assert_page_status, get_statuses
from vault_pages.repositories import pages
from vault_pages.utils.audit import log_action
from vault_pages.utils.transaction import transactional
from vault_pages.utils.versioning import snapshot_page, next_version


def set_fields_and_save(
    *,
    page: Page,
    fields: Mapping[str, Any],
    editor,
    statuses=None,
) -> Revision:
    """
    Apply editor changes to a page and record a revision.

    Revision policy:
    - persisted page: the revision keeps the content as it was BEFORE the update
    - new page: the revision keeps the content the page was created with

    Page and revision are written in one transaction; on any failure
    neither is stored.
    """
    statuses = statuses or get_statuses()
    assert_editable(fields, statuses)

    is_new = page.is_new

    with transactional():
        if not is_new:
            pages.lock(page)

        revision = save_with_revision(page, fields, editor, statuses=statuses)

        log_action(
            action="page.create" if is_new else "page.update",
            entity_type="page",
            entity_id=page.id,
            actor_id=editor.id,
            payload={
                "fields": sorted(fields),
                "revision": revision.version,
            },
        )

    current_app.logger.info(
        "Page %s %s by editor %s (revision %s)",
        page.id,
        "created" if is_new else "updated",
        editor.id,
        revision.version,
    )
    return revision


def assert_editable(fields: Mapping[str, Any], statuses) -> None:
    unknown = sorted(set(fields) - set(EDITABLE_FIELDS))
    if unknown:
        raise ValidationError({field: "Unknown page field." for field in unknown})

    if "status" in fields:
        assert_page_status(fields["status"], statuses)


def assert_slug_free(page: Page) -> None:
    """The slug must not be taken by another live page."""
    with db.session.no_autoflush:
        taken = pages.find_by_slug(page.slug, exclude=page)
    if taken is not None:
        raise ValidationError({"slug": "Slug already exists."})


def save_with_revision(page: Page, fields: Mapping[str, Any], editor, *, statuses) -> Revision:
    """
    Apply fields, persist the page and add its revision.

    Must run inside transactional(); the caller owns commit and rollback.
    """
    is_new = page.is_new
    before = snapshot_page(page)

    for field, value in fields.items():
        if field == "status":
            page.set_status(value, statuses)
        else:
            setattr(page, field, "" if value is None else value)

    page.editor_id = editor.id
    if is_new:
        page.created_by = editor.id

    assert_page(page, statuses)
    assert_slug_free(page)

    db.session.add(page)
    db.session.flush()  # ensures page.id is available

    revision = Revision()
    revision.page_id = page.id
    revision.version = next_version(page.id)
    revision.snapshot = snapshot_page(page) if is_new else before
    revision.created_by = editor.id

    db.session.add(revision)
    db.session.flush()

    return revision
