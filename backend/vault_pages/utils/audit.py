from typing import Optional
from vault_pages.extensions import db
from vault_pages.models.audit_log import AuditLog


def log_action(
    *,
    action: str,
    entity_type: str,
    entity_id: str,
    actor_id: Optional[str],
    payload: dict | None = None
):
    log = AuditLog()

    log.actor_id = actor_id
    log.action = action
    log.entity_type = entity_type
    log.entity_id = entity_id
    log.payload = payload or {}

    db.session.add(log)
    return log
