"""
Permission checks for the vault pages section.

Grants are configured per role in ``VAULT_PERMISSIONS``::

    {"editor": ["view", "add", "update", "delete:own"]}

A grant is a permission name, ``*`` for everything, or ``<permission>:own``
which only passes when the page in the permission context was created by
the acting editor.
"""
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Union

from flask import current_app

from vault_pages.domain.exceptions import AuthorizationError
from vault_pages.models.page import Page
from vault_pages.models.revision import Revision

GUARD_NAMESPACE = "vault.pages"

PERMISSIONS = frozenset({"view", "add", "update", "delete", "viewRevision", "applyRevision"})


@dataclass(frozen=True)
class PermissionContext:
    """Entity a permission is checked against: nothing, a page or a revision."""

    entity: Union[Page, Revision, None] = None

    @property
    def page(self) -> Optional[Page]:
        if isinstance(self.entity, Revision):
            return self.entity.live_page
        return self.entity


NO_CONTEXT = PermissionContext()


class Guard:
    def __init__(self, rules: Mapping[str, Iterable[str]], namespace: str = GUARD_NAMESPACE):
        self.namespace = namespace
        self._rules = {role: frozenset(grants) for role, grants in rules.items()}

        for role, grants in self._rules.items():
            for grant in grants:
                name = grant.split(":", 1)[0]
                if grant != "*" and name not in PERMISSIONS:
                    raise ValueError(f"Unknown permission {grant!r} for role {role!r}")

    def permission(self, action: str) -> str:
        return f"{self.namespace}.{action}"

    def is_allowed(self, editor, action: str, context: PermissionContext = NO_CONTEXT) -> bool:
        if action not in PERMISSIONS:
            raise ValueError(f"Unknown permission {action!r}")

        if editor is None or not editor.is_active:
            return False

        grants = self._rules.get(editor.role, frozenset())
        if "*" in grants or action in grants:
            return True

        if f"{action}:own" in grants:
            page = context.page
            return page is not None and page.created_by == editor.id

        return False

    def allows(self, editor, action: str, context: PermissionContext = NO_CONTEXT) -> None:
        if not self.is_allowed(editor, action, context):
            current_app.logger.warning(
                "Denied %s to editor %s on %r",
                self.permission(action),
                getattr(editor, "id", None),
                context.entity,
            )
            raise AuthorizationError(self.permission(action))


def get_guard() -> Guard:
    return current_app.extensions["vault.guard"]
