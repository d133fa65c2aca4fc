from vault_pages.domain.exceptions import ValidationError
from vault_pages.domain.lifecycle.page import assert_page_status


def assert_page(page, statuses=None):
    errors = {}

    if not (page.title or "").strip():
        errors["title"] = "Title is required."

    if not (page.slug or "").strip():
        errors["slug"] = "Slug is required."

    if errors:
        raise ValidationError(errors)

    assert_page_status(page.status, statuses)
