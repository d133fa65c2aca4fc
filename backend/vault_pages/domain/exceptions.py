from typing import Dict, Optional


class PagesError(Exception):
    """Base class for errors raised by the pages domain."""


class ValidationError(PagesError):
    """A field update was rejected; nothing was written."""

    def __init__(self, errors: Dict[str, str], message: Optional[str] = None):
        self.errors = dict(errors)
        super().__init__(message or "; ".join(f"{k}: {v}" for k, v in self.errors.items()))


class InvalidStatus(PagesError):
    def __init__(self, status):
        self.status = status
        super().__init__(f"Unknown page status: {status!r}")


class RevisionMismatch(PagesError):
    def __init__(self, page_id, revision_id):
        self.page_id = page_id
        self.revision_id = revision_id
        super().__init__(f"Revision {revision_id} does not belong to page {page_id}")


class AuthorizationError(PagesError):
    def __init__(self, permission: str):
        self.permission = permission
        super().__init__(f"Access denied: {permission}")
