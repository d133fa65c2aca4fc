# vault_pages/utils/redirects.py
from typing import Optional
from urllib.parse import urlsplit


def action_page_redirect(referer: Optional[str], fallback: str) -> str:
    """
    Where to send the editor after a status change.

    The page keeps its edit URL, so returning to the referer is always safe.
    """
    if not referer:
        # Came from nowhere
        return fallback

    return referer


def delete_page_redirect(edit_uri: str, referer: Optional[str], fallback: str) -> str:
    """
    Where to send the editor after a page was deleted.

    Returning to the deleted page's edit screen would 404, so a referer
    pointing at it (as a full URL or by path) is replaced by the fallback.
    """
    if not referer:
        # Came from nowhere
        return fallback

    trimmed = referer.rstrip("/")
    own = edit_uri.rstrip("/")

    if trimmed.lower() == own.lower():
        return fallback

    path = _referer_path(trimmed)
    if path and path.rstrip("/").lower() == own.lower():
        return fallback

    return referer


def _referer_path(referer: str) -> Optional[str]:
    try:
        return urlsplit(referer).path or None
    except ValueError:
        # Unparseable referer never matches the edit page
        return None
