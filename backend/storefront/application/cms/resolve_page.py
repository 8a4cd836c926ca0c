# storefront/application/cms/resolve_page.py
from typing import Any, Dict, List, Optional, TypedDict
from flask import current_app
from sqlalchemy.exc import IntegrityError
from storefront.extensions import db
from storefront.models.page import Page
from storefront.domain.exceptions import PageNotFound, TemplateNotAccessible
from storefront.utils.transaction import transactional
from storefront.utils.versioning import snapshot_blocks


class PageMeta(TypedDict):
    title: Optional[str]
    description: Optional[str]
    image: Optional[str]


class ResolvedPage(TypedDict):
    page_id: str
    slug: str
    title: str
    is_home: bool
    blocks: List[Dict[str, Any]]
    meta: PageMeta


class PageBlocks(TypedDict):
    page_id: Optional[str]
    blocks: List[Dict[str, Any]]
    meta: Optional[PageMeta]


def _meta(page: Page) -> PageMeta:
    return {
        "title": page.meta_title,
        "description": page.meta_description,
        "image": page.meta_image,
    }


def _resolved(page: Page) -> ResolvedPage:
    return {
        "page_id": page.id,
        "slug": page.slug,
        "title": page.title,
        "is_home": bool(page.is_home),
        # Absent content is a valid page with zero blocks
        "blocks": snapshot_blocks(page.content),
        "meta": _meta(page),
    }


def is_template_slug(slug: str) -> bool:
    return slug in current_app.config.get("RESERVED_TEMPLATE_SLUGS", ())


def get_page(page_id: str) -> Page:
    page = db.session.get(Page, page_id)
    if page is None:
        raise PageNotFound(page_id=page_id)
    return page


def resolve_page(slug: str) -> ResolvedPage:
    """
    Public lookup of a page by exact slug.

    Raises:
    - TemplateNotAccessible for reserved authoring-only slugs, whether
      or not a row exists
    - PageNotFound when no row matches
    Database errors propagate untouched.
    """
    if is_template_slug(slug):
        current_app.logger.info("Blocked public access to template page %s", slug)
        raise TemplateNotAccessible(slug)

    page = Page.query.filter_by(slug=slug).first()
    if page is None:
        raise PageNotFound(slug=slug)

    return _resolved(page)


def resolve_home_page() -> ResolvedPage:
    page = (
        Page.query
        .filter_by(is_home=True)
        .order_by(Page.updated_at.desc())
        .first()
    )
    if page is None:
        raise PageNotFound(slug="/")

    return _resolved(page)


def load_page_blocks(slug: str) -> PageBlocks:
    """
    Optional builder blocks for system pages (cart, checkout, ...).
    A page that was never created simply has no blocks.
    """
    page = Page.query.filter_by(slug=slug).first()

    if page is None:
        return {"page_id": None, "blocks": [], "meta": None}

    return {
        "page_id": page.id,
        "blocks": snapshot_blocks(page.content),
        "meta": _meta(page),
    }


def title_from_slug(slug: str) -> str:
    return " ".join(part[:1].upper() + part[1:] for part in slug.split("-"))


def ensure_page(slug: str) -> Page:
    """
    Admin "edit by slug": return the page, creating an empty draft
    on first edit of a slug that does not exist yet.
    """
    page = Page.query.filter_by(slug=slug).first()
    if page is not None:
        return page

    page = Page()
    page.slug = slug
    page.title = title_from_slug(slug)
    page.status = "draft"
    page.content = []

    try:
        with transactional():
            db.session.add(page)
    except IntegrityError:
        # Created concurrently by another editor
        existing = Page.query.filter_by(slug=slug).first()
        if existing is None:
            raise
        return existing

    current_app.logger.info("Created draft page %s for slug %s", page.id, slug)
    return page
