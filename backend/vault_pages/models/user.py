from werkzeug.security import generate_password_hash, check_password_hash
from vault_pages.extensions import db
from .base import BaseModel


class User(BaseModel):
    """Vault account; the editor identity stamped onto pages and revisions."""

    __tablename__ = "users"

    email = db.Column(db.String(120), unique=True, nullable=False)
    password_hash = db.Column(db.String(256), nullable=False)

    role = db.Column(db.String(50), nullable=False, default="viewer")
    is_active = db.Column(db.Boolean, default=True)

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)
