# storefront/application/cms/editor_session.py
import uuid
from typing import Any, Dict, List, Optional, Sequence
from storefront.domain.block_templates import instantiate_template
from storefront.domain.history import BuilderHistory
from storefront.models.page import Page
from storefront.models.page_version import PageVersion
from .page_versions import VersionStore
from .publish_page import publish_page_content
from .resolve_page import get_page


def array_move(items: List[Any], old_index: int, new_index: int) -> List[Any]:
    moved = list(items)
    moved.insert(new_index, moved.pop(old_index))
    return moved


def _index_of(blocks: List[Dict[str, Any]], block_id: str) -> Optional[int]:
    for index, block in enumerate(blocks):
        if block.get("id") == block_id:
            return index
    return None


class EditorSession:
    """
    One page builder session.

    Owns its own BuilderHistory and VersionStore. Edits only touch the
    in-memory history; `save` and `save_version` are the explicit
    persistence steps.
    """

    def __init__(self, page_id: str, *, history: Optional[BuilderHistory] = None):
        self.page_id = page_id
        self.history = history or BuilderHistory()
        self.version_store = VersionStore(page_id)
        self.page: Optional[Page] = None

    # -------------------------------------------------
    # History passthrough
    # -------------------------------------------------
    @property
    def blocks(self) -> List[Dict[str, Any]]:
        return self.history.blocks

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    def undo(self) -> None:
        self.history.undo()

    def redo(self) -> None:
        self.history.redo()

    # -------------------------------------------------
    # Loading / persistence
    # -------------------------------------------------
    def load(self) -> List[Dict[str, Any]]:
        """Start from the live page content with a clean history."""
        self.page = get_page(self.page_id)
        content = list(self.page.content or [])

        self.history.reset_history(content)
        # Initial sync write is absorbed by the reset
        self.history.set_blocks(content)

        return self.blocks

    def save(self, meta: Optional[Dict[str, Any]] = None) -> Page:
        self.page = publish_page_content(page_id=self.page_id, blocks=self.blocks, meta=meta)
        return self.page

    def save_version(self, **meta: Any) -> PageVersion:
        return self.version_store.create_version(self.blocks, **meta)

    def restore_version(self, version_id: str) -> Page:
        # Live page changes; unsaved in-memory edits are kept
        self.page = self.version_store.restore_version(version_id)
        return self.page

    # -------------------------------------------------
    # Block edits
    # -------------------------------------------------
    def add_block(self, block_type: str, content: Optional[Dict[str, Any]] = None) -> str:
        block = {"id": str(uuid.uuid4()), "type": block_type, "content": dict(content or {})}
        self.history.set_blocks(lambda current: current + [block])
        return block["id"]

    def insert_blocks(self, blocks: Sequence[Dict[str, Any]], index: Optional[int] = None) -> None:
        def updater(current):
            at = len(current) if index is None else index
            return current[:at] + list(blocks) + current[at:]

        self.history.set_blocks(updater)

    def insert_template(self, template_id: str, index: Optional[int] = None) -> List[str]:
        blocks = instantiate_template(template_id)
        self.insert_blocks(blocks, index)
        return [block["id"] for block in blocks]

    # Unknown block ids leave the snapshot unchanged (no history entry)
    def move_block(self, block_id: str, new_index: int) -> None:
        def updater(current):
            index = _index_of(current, block_id)
            if index is None:
                return current
            return array_move(current, index, new_index)

        self.history.set_blocks(updater)

    def update_block(self, block_id: str, content: Dict[str, Any]) -> None:
        def updater(current):
            index = _index_of(current, block_id)
            if index is not None:
                current[index] = {**current[index], "content": dict(content)}
            return current

        self.history.set_blocks(updater)

    def remove_block(self, block_id: str) -> None:
        self.history.set_blocks(
            lambda current: [b for b in current if b.get("id") != block_id]
        )
