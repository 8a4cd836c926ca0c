from storefront.extensions import db
from .base import BaseModel

class PageVersion(BaseModel):
    __tablename__ = "page_versions"

    page_id = db.Column(
        db.String(36),
        db.ForeignKey("pages.id"),
        nullable=False
    )

    version_number = db.Column(db.Integer, nullable=False)

    content = db.Column(db.JSON, nullable=False, default=list)

    meta_title = db.Column(db.String(200), nullable=True)
    description = db.Column(db.String(500), nullable=True)
    meta_image = db.Column(db.String(512), nullable=True)

    created_by = db.Column(db.String(36), nullable=True)

    page = db.relationship("Page", back_populates="versions")

    __table_args__ = (
        db.UniqueConstraint("page_id", "version_number", name="uq_page_version_number"),
        db.Index("idx_page_version_page", "page_id"),
    )
