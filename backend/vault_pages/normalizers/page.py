def _iso(value):
    return value.isoformat() if value else None


def normalize_page(page, statuses=None):
    return {
        "id": page.id,
        "title": page.title,
        "slug": page.slug,
        "source": page.source,
        "keywords": page.keywords,
        "description": page.description,
        "meta_tags": page.meta_tags,
        "status": page.status,
        "status_label": statuses.label(page.status) if statuses else page.status,
        "editor_id": page.editor_id,
        "created_by": page.created_by,
        "created_at": _iso(page.created_at),
        "updated_at": _iso(page.updated_at),
    }


def normalize_page_row(page, statuses=None):
    """Listing row: everything except the page body."""
    row = normalize_page(page, statuses)
    row.pop("source")
    row.pop("meta_tags")
    return row
