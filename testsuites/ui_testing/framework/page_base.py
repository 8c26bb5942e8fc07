"""
================================================================================
Navigable Page
================================================================================

Navigation foundation shared by all Page Objects.

Provides:
    - Route resolution against a configurable base origin
    - Navigation with best-effort cookie consent dismissal
    - Load state / URL waits and title access
    - Console error capture and screenshots for debugging

Page Objects hold a NavigablePage instance rather than inheriting from it.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import List, Optional

import allure
from loguru import logger
from playwright.async_api import ConsoleMessage, Error as PlaywrightError, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .config_loader import ConfigLoader
from .locators import LocatorDescriptor


SCREENSHOT_DIR = Path(__file__).parent.parent / "screenshots"

DEFAULT_BASE_URL = "https://www.creai.mx"
DEFAULT_CONSENT_SELECTOR = "#CybotCookiebotDialogBodyLevelButtonLevelOptinAllowAll"
DEFAULT_CONSENT_TIMEOUT = 5000

LOAD_STATES = ("load", "domcontentloaded", "networkidle")


class ConsentOutcome(str, Enum):
    """Result of a best-effort consent dismissal."""

    DISMISSED = "dismissed"
    ABSENT = "absent"
    FAILED = "failed"


async def dismiss_consent(
    page: Page,
    consent: LocatorDescriptor,
    timeout: int = DEFAULT_CONSENT_TIMEOUT,
) -> ConsentOutcome:
    """
    Click the consent accept control if it shows up within timeout.

    Never raises: banner presence depends on the session (first visit vs.
    returning visitor), so every failure is logged and reported as an outcome.

    Args:
        page: Playwright Page object
        consent: Descriptor of the accept button
        timeout: How long to wait for the banner, in milliseconds

    Returns:
        ConsentOutcome describing what happened
    """
    button = consent.resolve(page).first
    try:
        await button.wait_for(state="visible", timeout=timeout)
        await button.click(timeout=timeout)
    except PlaywrightTimeoutError:
        logger.info("Cookie consent modal not found or already dismissed")
        return ConsentOutcome.ABSENT
    except PlaywrightError as e:
        logger.warning(f"Cookie consent dismissal failed: {e}")
        return ConsentOutcome.FAILED

    logger.debug(f"Cookie consent accepted via {consent}")
    return ConsentOutcome.DISMISSED


async def navigate_with_consent(
    page: Page,
    url: str,
    consent: LocatorDescriptor,
    consent_timeout: int = DEFAULT_CONSENT_TIMEOUT,
) -> ConsentOutcome:
    """
    Navigate to url, wait for DOMContentLoaded, then dismiss consent.

    Navigation errors (bad URL, network failure) propagate to the caller.
    """
    await page.goto(url)
    await page.wait_for_load_state("domcontentloaded")
    logger.debug(f"Navigated to: {url}")
    return await dismiss_consent(page, consent, timeout=consent_timeout)


class NavigablePage:
    """
    Binds a route to a shared Playwright page.

    Usage:
        base = NavigablePage(page, "/about-us")
        await base.goto()
        title = await base.get_title()
    """

    def __init__(
        self,
        page: Page,
        path: str = "/",
        base_url: Optional[str] = None,
        consent: Optional[LocatorDescriptor] = None,
        consent_timeout: Optional[int] = None,
    ):
        """
        Initialize navigable page.

        Args:
            page: Playwright Page object (shared, not owned)
            path: Route path relative to the base origin
            base_url: Base origin; defaults to ui.base_url config / BASE_URL env
            consent: Consent accept descriptor; defaults to configured selector
            consent_timeout: Consent wait budget in milliseconds
        """
        config = ConfigLoader()
        self.page = page
        self.path = path
        self.base_url = (base_url or config.get("ui.base_url", DEFAULT_BASE_URL)).rstrip("/")
        self.consent = consent or LocatorDescriptor.css(
            config.get("ui.consent_accept_selector", DEFAULT_CONSENT_SELECTOR)
        )
        if consent_timeout is None:
            consent_timeout = config.get("ui.timeouts.consent", DEFAULT_CONSENT_TIMEOUT)
        self.consent_timeout = consent_timeout

    @property
    def url(self) -> str:
        """Get full page URL."""
        if self.path.startswith(("http://", "https://")):
            return self.path
        path = self.path if self.path.startswith("/") else f"/{self.path}"
        return f"{self.base_url}{path}"

    @property
    def current_url(self) -> str:
        return self.page.url

    async def goto(self) -> ConsentOutcome:
        """Navigate to this page and handle the cookie consent modal."""
        with allure.step(f"Navigate to {self.path}"):
            outcome = await navigate_with_consent(
                self.page, self.url, self.consent, self.consent_timeout
            )
        return outcome

    async def get_title(self) -> str:
        return await self.page.title()

    async def wait_for_load_state(self, state: str = "load") -> None:
        """
        Wait for the page to reach a load state.

        Args:
            state: 'load', 'domcontentloaded' or 'networkidle'
        """
        if state not in LOAD_STATES:
            raise ValueError(f"Unknown load state {state!r}, expected one of {LOAD_STATES}")
        await self.page.wait_for_load_state(state)

    async def wait_for_url(self, url_pattern: str, timeout: Optional[int] = None) -> None:
        """
        Wait for URL to match pattern.

        Args:
            url_pattern: URL glob pattern (e.g. '**/about-us**')
            timeout: Timeout in milliseconds; context default if omitted
        """
        with allure.step(f"Wait for URL: {url_pattern}"):
            if timeout is None:
                await self.page.wait_for_url(url_pattern)
            else:
                await self.page.wait_for_url(url_pattern, timeout=timeout)

    async def screenshot(
        self,
        name: str,
        full_page: bool = False,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Returns:
            Path to saved screenshot
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = SCREENSHOT_DIR / f"{name}_{timestamp}.png"

        await self.page.screenshot(path=str(filepath), full_page=full_page)

        if attach_to_allure:
            allure.attach.file(
                str(filepath),
                name=name,
                attachment_type=allure.attachment_type.PNG,
            )

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath


class ConsoleErrorCollector:
    """
    Records browser console messages of type 'error'.

    Usage:
        collector = ConsoleErrorCollector(page).attach()
        await home_page.goto()
        assert collector.errors == []
    """

    def __init__(self, page: Page):
        self.page = page
        self.errors: List[str] = []
        self._attached = False

    def attach(self) -> "ConsoleErrorCollector":
        if not self._attached:
            self.page.on("console", self._on_console)
            self._attached = True
        return self

    def detach(self) -> None:
        if self._attached:
            self.page.remove_listener("console", self._on_console)
            self._attached = False

    def _on_console(self, message: ConsoleMessage) -> None:
        if message.type == "error":
            self.errors.append(message.text)
            logger.warning(f"Console error on {self.page.url}: {message.text}")


__all__ = [
    "ConsentOutcome",
    "ConsoleErrorCollector",
    "NavigablePage",
    "dismiss_consent",
    "navigate_with_consent",
]
