"""
Texture module - Texture page checks for BMFont fonts.
"""

from .pages import PageIssue, read_page_size, verify_pages

__all__ = [
    "PageIssue",
    "read_page_size",
    "verify_pages",
]
