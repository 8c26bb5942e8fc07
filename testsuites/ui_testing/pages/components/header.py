"""
================================================================================
Header Component
================================================================================

Site navigation header shared by every page of the marketing site.

The same call works on desktop (inline navigation) and on mobile (collapsed
drawer behind a hamburger button): the toggle is probed on every call and
opened when visible, so callers never branch on device type.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from typing import Union

import allure
from loguru import logger
from playwright.async_api import Locator, Page

from testsuites.ui_testing.pages.selectors import HEADER_SELECTORS, HeaderSelectors


class Header:
    """
    Navigation header component.

    Usage:
        header = Header(page)
        await header.click_menu_item("Success stories")
        await header.click_menu_item(0)
    """

    def __init__(self, page: Page, selectors: HeaderSelectors = HEADER_SELECTORS):
        self.page = page
        self.selectors = selectors

    @property
    def menu_items(self) -> Locator:
        """All links of the header navigation."""
        return self.selectors.menu_items.resolve(self.page)

    @property
    def navigation(self) -> Locator:
        return self.selectors.navigation.resolve(self.page)

    @property
    def menu_toggle(self) -> Locator:
        return self.selectors.menu_toggle.resolve(self.page).first

    async def is_collapsed(self) -> bool:
        """True when the hamburger toggle is visible (mobile layout)."""
        return await self.menu_toggle.is_visible()

    async def open_menu_if_collapsed(self) -> bool:
        """
        Open the mobile drawer when the layout is collapsed.

        Returns:
            True if the toggle was clicked
        """
        toggle = self.menu_toggle
        if await toggle.is_visible():
            logger.debug("Hamburger menu visible, opening navigation drawer")
            await toggle.click()
            return True
        return False

    @allure.step("Click menu item: {identifier}")
    async def click_menu_item(self, identifier: Union[str, int]) -> None:
        """
        Click a header menu item by text or by zero-based index.

        Text lookups are scoped to the navigation region and pick the first
        link whose accessible name contains the text (case-sensitive). The
        link must become visible within the default timeout, otherwise
        Playwright's TimeoutError propagates.

        Args:
            identifier: Menu item text (e.g. 'Success stories') or index
        """
        if isinstance(identifier, bool) or not isinstance(identifier, (str, int)):
            raise TypeError(
                f"Menu item identifier must be str or int, got {type(identifier).__name__}"
            )

        await self.open_menu_if_collapsed()

        if isinstance(identifier, int):
            await self.menu_items.nth(identifier).click()
            return

        menu_item = self.navigation.get_by_role(
            "link", name=re.compile(re.escape(identifier))
        ).first
        await menu_item.wait_for(state="visible")
        await menu_item.click()
        logger.debug(f"Clicked menu item: {identifier}")


__all__ = [
    "Header",
]
