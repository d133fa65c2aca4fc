from sqlalchemy import event
from vault_pages.extensions import db
from .base import BaseModel


class Revision(BaseModel):
    __tablename__ = "page_revisions"

    page_id = db.Column(
        db.String(36),
        db.ForeignKey("pages.id", ondelete="SET NULL"),
        nullable=True,
    )

    version = db.Column(db.Integer, nullable=False)

    # Content fields of the page at the time the revision was taken
    snapshot = db.Column(db.JSON, nullable=False)

    created_by = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=True)

    page = db.relationship("Page", back_populates="revisions")

    __table_args__ = (
        db.UniqueConstraint("page_id", "version", name="uq_page_revision_version"),
        db.Index("idx_page_revision_page", "page_id"),
    )

    @property
    def live_page(self):
        """
        Owning page, or None when it no longer exists.
        """
        page = self.page
        if page is None or page.is_deleted:
            return None
        return page

    def __repr__(self):
        return f"<Revision {self.id} page={self.page_id} v{self.version}>"


@event.listens_for(Revision, "before_update")
def prevent_revision_mutation(mapper, connection, target):
    raise RuntimeError("Page revisions are immutable")
