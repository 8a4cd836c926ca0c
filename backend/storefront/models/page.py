from storefront.extensions import db
from .base import BaseModel

class Page(BaseModel):
    __tablename__ = 'pages'

    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, unique=True, index=True)
    status = db.Column(db.String(50), default='draft', index=True)

    # Ordered block list: [{"id", "type", "content"}, ...]
    content = db.Column(db.JSON, nullable=False, default=list)

    meta_title = db.Column(db.String(200), nullable=True)
    meta_description = db.Column(db.String(500), nullable=True)
    meta_image = db.Column(db.String(512), nullable=True)

    # At most one page should be home; not enforced here
    is_home = db.Column(db.Boolean, nullable=False, default=False)

    versions = db.relationship(
        "PageVersion",
        back_populates="page",
        order_by="PageVersion.version_number.desc()",
        lazy="dynamic",
    )
