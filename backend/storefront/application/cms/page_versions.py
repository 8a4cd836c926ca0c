# storefront/application/cms/page_versions.py
from typing import Any, Dict, List, Optional, Sequence
from flask import current_app
from storefront.extensions import db
from storefront.models.page import Page
from storefront.models.page_version import PageVersion
from storefront.domain.exceptions import PageNotSelected, VersionNotFound
from storefront.domain.invariants.block import assert_block_list
from storefront.utils.transaction import transactional
from storefront.utils.versioning import next_version, snapshot_blocks
from .resolve_page import get_page


def list_versions(page_id: str, *, limit: Optional[int] = None) -> List[PageVersion]:
    """Newest first by version_number, capped at `limit` (older rows stay stored)."""
    if limit is None:
        limit = current_app.config.get("VERSION_LIST_LIMIT", 20)

    return (
        PageVersion.query
        .filter_by(page_id=page_id)
        .order_by(PageVersion.version_number.desc())
        .limit(limit)
        .all()
    )


class VersionStore:
    """
    Durable, numbered checkpoints of one page's content.

    `versions` is the caller's view of the most recent versions; every
    successful create/restore refreshes it. Failed operations roll back
    and leave both the database and `versions` as they were.
    """

    def __init__(self, page_id: Optional[str], *, limit: Optional[int] = None):
        self.page_id = page_id
        self.limit = limit
        self.versions: List[PageVersion] = []
        self.is_creating_version = False
        self.is_restoring_version = False

        if page_id:
            self.refresh()

    def refresh(self) -> List[PageVersion]:
        self.versions = list_versions(self.page_id, limit=self.limit) if self.page_id else []
        return self.versions

    def create_version(
        self,
        content: Sequence[Dict[str, Any]],
        *,
        meta_title: Optional[str] = None,
        description: Optional[str] = None,
        meta_image: Optional[str] = None,
        created_by: Optional[str] = None,
    ) -> PageVersion:
        if not self.page_id:
            raise PageNotSelected()

        self.is_creating_version = True
        try:
            assert_block_list(content)
            page = get_page(self.page_id)

            with transactional():
                version = PageVersion()
                version.page_id = page.id
                version.version_number = next_version(page.id)
                version.content = snapshot_blocks(content)
                version.meta_title = meta_title or None
                version.description = description or None
                version.meta_image = meta_image or None
                version.created_by = created_by

                db.session.add(version)
                db.session.flush()  # ensures version.id is available

            current_app.logger.info(
                "Saved version %d of page %s", version.version_number, page.id
            )
        except Exception:
            current_app.logger.warning("Failed to save version of page %s", self.page_id)
            raise
        finally:
            self.is_creating_version = False

        self.refresh()
        return version

    def restore_version(self, version_id: str) -> Page:
        """
        Overwrite the live page content and meta with a stored version.

        Only versions in the loaded list can be restored. No safety
        snapshot of the current live content is taken, and no new
        version is created.
        """
        if not self.page_id:
            raise PageNotSelected()

        version = next((v for v in self.versions if v.id == version_id), None)
        if version is None:
            raise VersionNotFound(version_id)

        self.is_restoring_version = True
        try:
            page = get_page(self.page_id)

            with transactional():
                page.content = snapshot_blocks(version.content)
                page.meta_title = version.meta_title
                page.meta_description = version.description
                page.meta_image = version.meta_image

            current_app.logger.info(
                "Restored page %s to version %d", page.id, version.version_number
            )
        except Exception:
            current_app.logger.warning(
                "Failed to restore page %s to version %s", self.page_id, version_id
            )
            raise
        finally:
            self.is_restoring_version = False

        self.refresh()
        return page
