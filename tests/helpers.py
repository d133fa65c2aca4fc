from flask_jwt_extended import create_access_token

from vault_pages.application.pages.save_page import set_fields_and_save
from vault_pages.extensions import db
from vault_pages.models.user import User
from vault_pages.repositories import pages


def make_editor(role: str, email: str, *, active: bool = True) -> User:
    user = User()
    user.email = email
    user.role = role
    user.is_active = active
    user.set_password("secret-password")
    db.session.add(user)
    db.session.commit()
    return user


def auth_headers(user: User, *, xhr: bool = False, **extra) -> dict:
    headers = {"Authorization": f"Bearer {create_access_token(identity=user.id)}"}
    if xhr:
        headers["X-Requested-With"] = "XMLHttpRequest"
    headers.update(extra)
    return headers


def create_page(editor: User, **fields):
    data = {"title": "About us", "slug": "about-us", "source": "<p>Hello</p>"}
    data.update(fields)
    page = pages.create()
    set_fields_and_save(page=page, fields=data, editor=editor)
    return page


def reload(model, entity_id):
    db.session.expire_all()
    return db.session.get(model, entity_id)
