"""
================================================================================
Home Page Object (Async / Playwright)
================================================================================

Landing page of the marketing site (creai.mx).

Highlights:
  - Composes a NavigablePage (navigation + consent) and the Header component
  - Element locators are rebuilt from descriptors on every access
  - Boolean visibility probes: absent elements report False, driver errors raise

================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from playwright.async_api import Locator, Page

from testsuites.ui_testing.framework.locators import LocatorDescriptor
from testsuites.ui_testing.framework.page_base import ConsentOutcome, NavigablePage
from testsuites.ui_testing.pages.components.header import Header
from testsuites.ui_testing.pages.selectors import (
    HEADER_SELECTORS,
    HOME_PAGE_SELECTORS,
    HeaderSelectors,
    HomePageSelectors,
)


class HomePage:
    """Home page object (async)."""

    URL_PATH = "/"

    def __init__(
        self,
        page: Page,
        path: str = URL_PATH,
        base_url: Optional[str] = None,
        selectors: HomePageSelectors = HOME_PAGE_SELECTORS,
        header_selectors: HeaderSelectors = HEADER_SELECTORS,
        consent: Optional[LocatorDescriptor] = None,
    ):
        """
        Initialize the home page object.

        Args:
            page: Playwright Page object (shared with other page objects)
            path: Route of the page relative to the base origin
            base_url: Base origin override
            selectors: Element descriptors for this page
            header_selectors: Descriptors for the composed Header
            consent: Consent accept descriptor override
        """
        self.page = page
        self.selectors = selectors
        self.navigable = NavigablePage(page, path, base_url=base_url, consent=consent)
        self.header = Header(page, header_selectors)

    # =========================================================================
    # Navigation (delegated)
    # =========================================================================

    @property
    def url(self) -> str:
        return self.navigable.url

    @property
    def current_url(self) -> str:
        return self.navigable.current_url

    @allure.step("Open home page")
    async def goto(self) -> ConsentOutcome:
        """Navigate to the page and accept cookies when the banner shows up."""
        return await self.navigable.goto()

    async def get_title(self) -> str:
        return await self.navigable.get_title()

    async def wait_for_load_state(self, state: str = "load") -> None:
        await self.navigable.wait_for_load_state(state)

    async def wait_for_url(self, url_pattern: str, timeout: Optional[int] = None) -> None:
        await self.navigable.wait_for_url(url_pattern, timeout=timeout)

    # =========================================================================
    # Elements
    # =========================================================================

    @property
    def logo(self) -> Locator:
        return self.selectors.logo.resolve(self.page)

    @property
    def contact_button(self) -> Locator:
        return self.selectors.contact_button.resolve(self.page)

    @property
    def navigation_menu(self) -> Locator:
        return self.selectors.navigation_menu.resolve(self.page)

    @property
    def clients(self) -> Locator:
        return self.selectors.clients.resolve(self.page)

    @property
    def success_stories(self) -> Locator:
        return self.selectors.success_stories.resolve(self.page)

    @property
    def about_us(self) -> Locator:
        return self.selectors.about_us.resolve(self.page)

    @property
    def knowledge_hub(self) -> Locator:
        return self.selectors.knowledge_hub.resolve(self.page)

    @property
    def menu_button(self) -> Locator:
        return self.selectors.menu_button.resolve(self.page)

    # =========================================================================
    # Visibility probes
    # =========================================================================

    async def _is_first_visible(self, locator: Locator) -> bool:
        # is_visible() does not wait and reports False for missing elements
        return await locator.first.is_visible()

    async def is_logo_visible(self) -> bool:
        """Check if the logo is visible on the page."""
        return await self._is_first_visible(self.logo)

    async def is_contact_button_visible(self) -> bool:
        """Check if the contact button (CTA) is visible on the page."""
        return await self._is_first_visible(self.contact_button)

    async def is_navigation_menu_visible(self) -> bool:
        return await self._is_first_visible(self.navigation_menu)

    async def is_clients_visible(self) -> bool:
        return await self._is_first_visible(self.clients)

    async def is_success_stories_visible(self) -> bool:
        return await self._is_first_visible(self.success_stories)

    async def is_about_us_visible(self) -> bool:
        return await self._is_first_visible(self.about_us)

    async def is_knowledge_hub_visible(self) -> bool:
        return await self._is_first_visible(self.knowledge_hub)

    async def is_menu_button_visible(self) -> bool:
        """Check if the hamburger menu button is visible (mobile layouts)."""
        return await self._is_first_visible(self.menu_button)


__all__ = [
    "HomePage",
]
