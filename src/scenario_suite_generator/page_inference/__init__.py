"""Page inference exports."""

from .page_catalog import PageCatalog, group_by_class, group_by_page, infer_pages

__all__ = [
    "PageCatalog",
    "group_by_class",
    "group_by_page",
    "infer_pages",
]
