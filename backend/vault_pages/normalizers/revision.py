def normalize_revision(revision, include_snapshot=False):
    data = {
        "id": revision.id,
        "page_id": revision.page_id,
        "version": revision.version,
        "title": (revision.snapshot or {}).get("title"),
        "created_by": revision.created_by,
        "created_at": revision.created_at.isoformat() if revision.created_at else None,
    }

    if include_snapshot:
        data["snapshot"] = dict(revision.snapshot or {})
        data["page_exists"] = revision.live_page is not None

    return data
