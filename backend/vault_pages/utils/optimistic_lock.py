from flask import request, abort
from datetime import timezone
from dateutil.parser import parse, ParserError


def normalize_ts(ts):
    """
    Ensure datetime is timezone-aware.
    Defaults to UTC if naive.
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def enforce_optimistic_lock(page):
    """
    Rejects an update with 409 when the page changed after the editor loaded it.

    The editor sends the page's updated_at back as If-Unmodified-Since;
    requests without the header are not checked.
    """
    client_ts = request.headers.get("If-Unmodified-Since")
    if not client_ts or page.updated_at is None:
        return

    try:
        client_ts = normalize_ts(parse(client_ts))
    except (ParserError, OverflowError, ValueError):
        abort(400, description="Invalid If-Unmodified-Since header")

    # HTTP dates carry whole seconds only
    server_ts = normalize_ts(page.updated_at).replace(microsecond=0)

    if server_ts > client_ts:
        abort(
            409,
            description="The page was modified by someone else, reload it before saving."
        )
