from .page import Page
from .page_version import PageVersion

__all__ = ["Page", "PageVersion"]
