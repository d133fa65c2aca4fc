import pytest

from vault_pages.application.pages.change_status import change_page_status
from vault_pages.domain.exceptions import InvalidStatus
from vault_pages.domain.lifecycle.page import Statuses, assert_page_status, get_statuses
from vault_pages.models.page import Page
from tests.helpers import reload


def test_statuses_from_config(app):
    statuses = get_statuses()

    assert statuses.default == "draft"
    assert "published" in statuses
    assert "deleted" not in statuses
    assert None not in statuses
    assert statuses.label("archived") == "Archived"
    assert list(statuses) == ["draft", "published", "archived"]


def test_statuses_reject_bad_default():
    with pytest.raises(ValueError):
        Statuses({"draft": "Draft"}, default="live")

    with pytest.raises(ValueError):
        Statuses({})


def test_assert_page_status():
    statuses = Statuses({"draft": "Draft", "live": "Live"})
    assert_page_status("live", statuses)

    with pytest.raises(InvalidStatus):
        assert_page_status("gone", statuses)


def test_unknown_status_does_not_mutate_page(page):
    with pytest.raises(InvalidStatus):
        page.set_status("unknown")

    assert page.status == "draft"


@pytest.mark.parametrize("first, second", [("published", "draft"), ("archived", "published"), ("draft", "archived")])
def test_any_status_may_follow_any_other(admin, page, first, second):
    change_page_status(page=page, status=first, editor=admin)
    change_page_status(page=page, status=second, editor=admin)

    assert reload(Page, page.id).status == second


def test_change_status_rejects_unknown_status(admin, page):
    with pytest.raises(InvalidStatus):
        change_page_status(page=page, status="", editor=admin)

    assert reload(Page, page.id).status == "draft"
