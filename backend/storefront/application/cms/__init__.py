from .editor_session import EditorSession
from .page_versions import VersionStore, list_versions
from .publish_page import publish_page_content
from .resolve_page import (
    ensure_page,
    get_page,
    load_page_blocks,
    resolve_home_page,
    resolve_page,
)

__all__ = [
    "EditorSession",
    "VersionStore",
    "ensure_page",
    "get_page",
    "list_versions",
    "load_page_blocks",
    "publish_page_content",
    "resolve_home_page",
    "resolve_page",
]
