# vault_pages/normalizers/listing.py
from typing import Any, Dict, Iterable, Mapping

from vault_pages.domain.lifecycle.page import Statuses
from vault_pages.repositories import pages
from .page import normalize_page_row
from .pagination import normalize_pagination
from .revision import normalize_revision


def pages_listing(args: Mapping[str, Any], statuses: Statuses, *, per_page: int, max_per_page: int) -> Dict[str, Any]:
    """
    Display-ready page listing.

    Query args:
    - status: only pages in this status (ignored when unknown)
    - sort / order: one of pages.SORTABLE_FIELDS, asc | desc
    - page / per_page: offset pagination, per_page capped at max_per_page
    """
    status = args.get("status")
    if status not in statuses:
        status = None

    sort = args.get("sort", "updated_at")
    if sort not in pages.SORTABLE_FIELDS:
        sort = "updated_at"
    order = "asc" if args.get("order") == "asc" else "desc"

    page_num = max(_int(args.get("page"), 1), 1)
    per_page = min(max(_int(args.get("per_page"), per_page), 1), max_per_page)

    pagination = pages.find(status=status, sort=sort, order=order).paginate(
        page=page_num,
        per_page=per_page,
        error_out=False,
    )

    listing = normalize_pagination(
        pagination.items,
        lambda p: normalize_page_row(p, statuses),
        page=page_num,
        per_page=per_page,
        total=pagination.total or 0,
    )
    listing["filters"] = {"status": status, "sort": sort, "order": order}
    return listing


def revisions_listing(revisions: Iterable[Any]):
    ordered = sorted(revisions, key=lambda r: r.version, reverse=True)
    return [normalize_revision(r) for r in ordered]


def _int(value, default):
    try:
        return int(value)
    except (TypeError, ValueError):
        return default
