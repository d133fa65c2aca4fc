import pytest

from vault_pages.utils.redirects import action_page_redirect, delete_page_redirect

EDIT_URI = "/vault/pages/edit/5"
LISTING = "/vault/pages"


@pytest.mark.parametrize("referer", [None, ""])
def test_action_redirect_without_referer_goes_to_listing(referer):
    assert action_page_redirect(referer, LISTING) == LISTING


def test_action_redirect_returns_referer_verbatim():
    referer = "http://example.com/vault/pages/edit/5/"
    assert action_page_redirect(referer, LISTING) == referer


@pytest.mark.parametrize("referer", [None, ""])
def test_delete_redirect_without_referer_goes_to_listing(referer):
    assert delete_page_redirect(EDIT_URI, referer, LISTING) == LISTING


def test_delete_redirect_ignores_trailing_slash_on_edit_page():
    assert delete_page_redirect(EDIT_URI, "/vault/pages/edit/5/", LISTING) == LISTING


def test_delete_redirect_returns_unrelated_referer():
    assert delete_page_redirect(EDIT_URI, "/vault/pages", LISTING) == "/vault/pages"
    assert delete_page_redirect(EDIT_URI, "/vault/pages?status=draft", LISTING) == "/vault/pages?status=draft"


def test_delete_redirect_matches_full_url_by_path():
    referer = "https://admin.example.com/vault/pages/edit/5/"
    assert delete_page_redirect(EDIT_URI, referer, LISTING) == LISTING


def test_delete_redirect_is_case_insensitive():
    assert delete_page_redirect(EDIT_URI, "/Vault/Pages/EDIT/5", LISTING) == LISTING


def test_delete_redirect_keeps_other_page_edit_url():
    referer = "/vault/pages/edit/50"
    assert delete_page_redirect(EDIT_URI, referer, LISTING) == referer


def test_delete_redirect_keeps_referer_without_parseable_path():
    referer = "http://[::1"
    assert delete_page_redirect(EDIT_URI, referer, LISTING) == referer
