# vault_pages/utils/responses.py
from typing import Any, Dict, Optional, Union
from flask import jsonify, request


def is_async_request() -> bool:
    """
    True when the vault UI called the action in the background.

    Background calls get a structured action result, everything else a
    redirect or a rendered view.
    """
    if request.headers.get("X-Requested-With", "").lower() == "xmlhttprequest":
        return True

    best = request.accept_mimetypes.best_match(["application/json", "text/html"])
    return best == "application/json" and request.accept_mimetypes[best] > request.accept_mimetypes["text/html"]


def action_result(
    status: int,
    *,
    message: Optional[str] = None,
    errors: Optional[Dict[str, str]] = None,
    error: Optional[str] = None,
    action: Union[str, Dict[str, str], None] = None,
):
    """
    Build the {status, message|errors, action?} result understood by the vault UI.
    """
    body: Dict[str, Any] = {"status": status}

    if message is not None:
        body["message"] = message
    if errors is not None:
        body["errors"] = errors
    if error is not None:
        body["error"] = error
    if action is not None:
        body["action"] = action

    return jsonify(body), status


def redirect_action(uri: str) -> Dict[str, str]:
    return {"redirect": uri}


def render(view: str, **data):
    """
    Render a vault view.

    The vault front end owns the templates; views are delivered as their
    key plus the normalized data they display.
    """
    return jsonify({"view": view, **data})
