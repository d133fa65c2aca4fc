from sqlalchemy import inspect
from vault_pages.extensions import db
from vault_pages.domain.lifecycle.page import assert_page_status
from .base import BaseModel
from .soft_delete_mixin import SoftDeleteMixin

# Fields captured by revisions
CONTENT_FIELDS = ("title", "slug", "source", "keywords", "description", "meta_tags")

# Fields an editor may set through set_fields_and_save
EDITABLE_FIELDS = CONTENT_FIELDS + ("status",)


class Page(BaseModel, SoftDeleteMixin):
    __tablename__ = "pages"

    title = db.Column(db.String(200), nullable=False, default="")
    slug = db.Column(db.String(200), nullable=False, default="", index=True)
    source = db.Column(db.Text, nullable=False, default="")
    keywords = db.Column(db.String(255), nullable=False, default="")
    description = db.Column(db.String(500), nullable=False, default="")
    meta_tags = db.Column(db.Text, nullable=False, default="")
    status = db.Column(db.String(50), nullable=False, default="draft", index=True)

    editor_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=True, index=True)
    created_by = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=True, index=True)

    revisions = db.relationship(
        "Revision",
        back_populates="page",
        order_by="Revision.version",
    )

    def set_status(self, status, statuses=None):
        # Raises before assignment so an unknown status never mutates the page
        assert_page_status(status, statuses)
        self.status = status

    def content(self):
        return {field: getattr(self, field) for field in CONTENT_FIELDS}

    @property
    def is_new(self):
        return not inspect(self).has_identity

    def __repr__(self):
        return f"<Page {self.id} {self.slug!r}>"
