"""
Selector registry: immutable locator descriptors grouped per page/component.

Pass a modified copy (dataclasses.replace) into a Page Object to target a
different markup without touching the shared defaults.
"""

from .header_selectors import HEADER_SELECTORS, HeaderSelectors
from .home_page_selectors import HOME_PAGE_SELECTORS, HomePageSelectors

__all__ = [
    "HEADER_SELECTORS",
    "HOME_PAGE_SELECTORS",
    "HeaderSelectors",
    "HomePageSelectors",
]
