"""Application pagination – page primitives."""
from recruit_export.application.pagination.page_request import PageRequest
from recruit_export.application.pagination.page import Page

__all__ = ["Page", "PageRequest"]
