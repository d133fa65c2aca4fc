import pytest

from vault_pages import create_app
from vault_pages.extensions import db as _db
from tests.helpers import create_page, make_editor


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def db(app):
    return _db


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin(app):
    return make_editor("admin", "admin@example.com")


@pytest.fixture
def editor(app):
    return make_editor("editor", "editor@example.com")


@pytest.fixture
def author(app):
    return make_editor("author", "author@example.com")


@pytest.fixture
def viewer(app):
    return make_editor("viewer", "viewer@example.com")


@pytest.fixture
def page(admin):
    return create_page(admin)
