import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from vault_pages.application.pages import save_page
from vault_pages.application.pages.save_page import set_fields_and_save
from vault_pages.domain.exceptions import InvalidStatus, ValidationError
from vault_pages.models.audit_log import AuditLog
from vault_pages.models.page import Page
from vault_pages.models.revision import Revision
from vault_pages.repositories import pages, revisions
from tests.helpers import create_page, reload


def test_new_page_gets_initial_revision(admin):
    page = create_page(admin, title="Contacts", slug="contacts")

    assert page.id is not None
    assert page.status == "draft"
    assert page.editor_id == admin.id
    assert page.created_by == admin.id

    history = revisions.find_by_page(page)
    assert len(history) == 1
    assert history[0].version == 1
    assert history[0].snapshot["title"] == "Contacts"
    assert history[0].created_by == admin.id


def test_update_records_pre_update_snapshot(admin, editor, page):
    before = page.content()

    revision = set_fields_and_save(
        page=page,
        fields={"title": "About the team", "keywords": "team"},
        editor=editor,
    )

    page = reload(Page, page.id)
    assert page.title == "About the team"
    assert page.keywords == "team"
    assert page.editor_id == editor.id
    assert page.created_by == admin.id

    history = revisions.find_by_page(page)
    assert len(history) == 2
    assert history[0].id == revision.id
    assert revision.version == 2
    assert revision.snapshot == before
    assert revision.created_by == editor.id


def test_every_save_adds_exactly_one_revision(admin, page):
    for n in range(3):
        set_fields_and_save(page=page, fields={"source": f"<p>{n}</p>"}, editor=admin)

    assert Revision.query.filter_by(page_id=page.id).count() == 4
    assert [r.version for r in revisions.find_by_page(page)] == [4, 3, 2, 1]


def test_unknown_field_is_rejected_without_changes(admin, page):
    with pytest.raises(ValidationError) as exc:
        set_fields_and_save(page=page, fields={"title": "Changed", "layout": "wide"}, editor=admin)

    assert exc.value.errors == {"layout": "Unknown page field."}

    page = reload(Page, page.id)
    assert page.title == "About us"
    assert Revision.query.filter_by(page_id=page.id).count() == 1


def test_unknown_status_is_rejected_without_changes(admin, page):
    with pytest.raises(InvalidStatus):
        set_fields_and_save(page=page, fields={"title": "Changed", "status": "gone"}, editor=admin)

    page = reload(Page, page.id)
    assert page.title == "About us"
    assert page.status == "draft"
    assert Revision.query.filter_by(page_id=page.id).count() == 1


def test_failed_save_rolls_back_page_and_revision(admin, page):
    with pytest.raises(ValidationError) as exc:
        set_fields_and_save(page=page, fields={"title": "  ", "source": "lost"}, editor=admin)

    assert "title" in exc.value.errors

    page = reload(Page, page.id)
    assert page.title == "About us"
    assert page.source == "<p>Hello</p>"
    assert Revision.query.filter_by(page_id=page.id).count() == 1


def test_failed_revision_insert_rolls_back_page_update(admin, page, monkeypatch):
    # Version 1 is taken, so the revision insert fails after the page row was written
    monkeypatch.setattr(save_page, "next_version", lambda page_id: 1)

    with pytest.raises(IntegrityError):
        set_fields_and_save(page=page, fields={"title": "Changed", "source": "lost"}, editor=admin)

    page = reload(Page, page.id)
    assert page.title == "About us"
    assert page.source == "<p>Hello</p>"
    assert Revision.query.filter_by(page_id=page.id).count() == 1
    assert AuditLog.query.filter_by(entity_id=page.id, action="page.update").count() == 0


def test_duplicate_slug_is_rejected(admin, page):
    with pytest.raises(ValidationError) as exc:
        create_page(admin, title="Copy", slug="about-us")

    assert exc.value.errors == {"slug": "Slug already exists."}

    other = create_page(admin, title="Team", slug="team")
    with pytest.raises(ValidationError):
        set_fields_and_save(page=other, fields={"slug": "about-us"}, editor=admin)

    assert Page.query.filter_by(slug="about-us", deleted_at=None).count() == 1
    assert reload(Page, other.id).slug == "team"
    assert Revision.query.count() == 2


def test_page_keeps_own_slug_on_update(admin, page):
    set_fields_and_save(page=page, fields={"title": "About", "slug": "about-us"}, editor=admin)
    assert reload(Page, page.id).title == "About"


def test_update_snapshots_content_written_since_page_was_loaded(db, admin, page):
    assert page.title == "About us"
    db.session.execute(text("UPDATE pages SET title = :title WHERE id = :id"), {"title": "Concurrent", "id": page.id})

    revision = set_fields_and_save(page=page, fields={"source": "<p>Later</p>"}, editor=admin)

    assert revision.snapshot["title"] == "Concurrent"
    page = reload(Page, page.id)
    assert (page.title, page.source) == ("Concurrent", "<p>Later</p>")


    assert Revision.query.filter_by(page_id=page.id).count() == 1


def test_status_can_be_saved_with_content(admin, page):
    set_fields_and_save(page=page, fields={"status": "published"}, editor=admin)
    assert reload(Page, page.id).status == "published"


def test_saves_are_audited(admin, page):
    set_fields_and_save(page=page, fields={"title": "Audited"}, editor=admin)

    actions = sorted(log.action for log in AuditLog.query.filter_by(entity_id=page.id))
    assert actions == ["page.create", "page.update"]


def test_new_page_is_not_persisted_until_saved(app):
    page = pages.create()

    assert page.id is None
    assert page.is_new
    assert page.status == "draft"
    assert Page.query.count() == 0
