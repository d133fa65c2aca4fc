from vault_pages.models.page import CONTENT_FIELDS


def snapshot_page(page):
    return {field: getattr(page, field) for field in CONTENT_FIELDS}


def snapshot_fields(snapshot):
    """
    Content fields stored in a revision snapshot.

    Keys missing from older snapshots fall back to an empty value.
    """
    return {field: (snapshot or {}).get(field) or "" for field in CONTENT_FIELDS}


def next_version(page_id):
    from vault_pages.models.revision import Revision

    last = (
        Revision.query
        .filter_by(page_id=page_id)
        .order_by(Revision.version.desc())
        .first()
    )
    return (last.version + 1) if last else 1
