from functools import wraps
from flask import g, jsonify
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request
from vault_pages.extensions import db
from vault_pages.models.user import User


def editor_required(fn):
    """
    Resolve the editor behind the request's access token.

    The editor is made available through current_editor(); handlers pass it
    on explicitly to the guard and the page services.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        verify_jwt_in_request()

        editor = db.session.get(User, get_jwt_identity())
        if editor is None:
            return jsonify({"status": 401, "error": "Unknown editor"}), 401

        if not editor.is_active:
            return jsonify({"status": 403, "error": "Editor account disabled"}), 403

        g.current_editor = editor
        return fn(*args, **kwargs)
    return wrapper


def current_editor() -> User:
    return g.current_editor
