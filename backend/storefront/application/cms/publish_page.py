# storefront/application/cms/publish_page.py
from typing import Any, Dict, Optional, Sequence
from flask import current_app
from storefront.domain.exceptions import InvariantViolation
from storefront.domain.invariants.block import assert_block_list
from storefront.models.page import Page
from storefront.utils.transaction import transactional
from storefront.utils.versioning import snapshot_blocks
from .resolve_page import get_page


ALLOWED_META_FIELDS = {"meta_title", "meta_description", "meta_image"}


def publish_page_content(
    *,
    page_id: str,
    blocks: Sequence[Dict[str, Any]],
    meta: Optional[Dict[str, Any]] = None,
) -> Page:
    """
    Overwrite a page's live block list (and optionally its meta fields).

    Whole-snapshot write in a single transaction. Last write wins; no
    conflict detection between concurrent editors.
    """
    assert_block_list(blocks)

    page = get_page(page_id)

    unknown = set(meta or {}) - ALLOWED_META_FIELDS
    if unknown:
        raise InvariantViolation(f"Unsupported meta fields: {sorted(unknown)}")

    with transactional():
        page.content = snapshot_blocks(blocks)

        for field, value in (meta or {}).items():
            setattr(page, field, value)

    current_app.logger.info(
        "Published %d blocks to page %s", len(page.content), page.id
    )
    return page
