"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - Single browser instance per session (per xdist worker)
    - Isolated contexts per test, emulating a named device profile
    - Default wait budgets applied to every context

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)

from .config_loader import ConfigLoader


@dataclass(frozen=True)
class DeviceProfile:
    """
    Named browser context preset.

    Attributes:
        name: Profile name used on the command line (--ui-device)
        device: Playwright device descriptor to start from (optional)
        overrides: Context options applied on top of the descriptor
        is_mobile: Whether the profile renders the mobile layout
    """
    name: str
    device: Optional[str] = None
    overrides: Dict[str, Any] = field(default_factory=dict, hash=False)
    is_mobile: bool = False


DEVICE_PROFILES: Dict[str, DeviceProfile] = {
    "desktop": DeviceProfile(
        name="desktop",
        device="Desktop Chrome",
        overrides={"viewport": {"width": 1920, "height": 1080}},
    ),
    "mobile-chrome": DeviceProfile(
        name="mobile-chrome",
        device="Pixel 5",
        is_mobile=True,
    ),
    "iphone-14": DeviceProfile(
        name="iphone-14",
        device="iPhone 14 Pro Max",
        overrides={
            "viewport": {"width": 430, "height": 932},
            "device_scale_factor": 3,
            "is_mobile": True,
            "has_touch": True,
        },
        is_mobile=True,
    ),
}


def get_device_profile(name: str) -> DeviceProfile:
    """Look up a device profile by name."""
    try:
        return DEVICE_PROFILES[name]
    except KeyError:
        raise ValueError(
            f"Unknown device profile {name!r}. Known profiles: {', '.join(DEVICE_PROFILES)}"
        ) from None


class BrowserManager:
    """
    Manages browser instances and contexts for UI testing.

    Usage:
        async with BrowserManager() as manager:
            page = await manager.new_page("iphone-14")
            await page.goto("https://www.creai.mx")
    """

    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "headless": True,
        "args": [
            "--ignore-certificate-errors",
        ],
    }

    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        headless: Optional[bool] = None,
        browser_type: Optional[str] = None,
        default_timeout: Optional[int] = None,
        navigation_timeout: Optional[int] = None,
    ):
        """
        Initialize browser manager.

        Args:
            headless: Run browser in headless mode (config ui.headless)
            browser_type: 'chromium', 'firefox' or 'webkit' (config ui.browser)
            default_timeout: Default wait budget in ms (config ui.timeouts.default)
            navigation_timeout: Navigation budget in ms (config ui.timeouts.navigation)
        """
        config = ConfigLoader()
        self.headless = config.get("ui.headless", True) if headless is None else headless
        self.browser_type = browser_type or config.get("ui.browser", "chromium")
        self.default_timeout = default_timeout or config.get("ui.timeouts.default", 15000)
        self.navigation_timeout = navigation_timeout or config.get("ui.timeouts.navigation", 30000)

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    async def __aenter__(self) -> "BrowserManager":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def start(self) -> None:
        """Start Playwright and launch browser."""
        self._playwright = await async_playwright().start()

        if self.browser_type == "firefox":
            browser_launcher = self._playwright.firefox
        elif self.browser_type == "webkit":
            browser_launcher = self._playwright.webkit
        else:
            browser_launcher = self._playwright.chromium

        launch_options = {
            **self.DEFAULT_LAUNCH_OPTIONS,
            "headless": self.headless,
        }
        if self.browser_type != "chromium":
            launch_options.pop("args")

        self._browser = await browser_launcher.launch(**launch_options)
        logger.debug(
            f"Browser started: {self.browser_type} "
            f"(headless={self.headless})"
        )

    async def close(self) -> None:
        """Close all contexts and browser."""
        for context in self._contexts:
            try:
                await context.close()
            except Exception as e:
                logger.debug(f"Context already closed: {e}")
        self._contexts.clear()

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    def context_options(self, profile: DeviceProfile, **options: Any) -> Dict[str, Any]:
        """
        Build new_context() options for a device profile.

        Precedence (lowest to highest): manager defaults, Playwright device
        descriptor, profile overrides, explicit options.
        """
        context_options: Dict[str, Any] = dict(self.DEFAULT_CONTEXT_OPTIONS)

        if profile.device:
            if not self._playwright:
                raise RuntimeError("Browser not started. Call start() first.")
            descriptor = dict(self._playwright.devices[profile.device])
            # Descriptor hint only; not a new_context() option
            descriptor.pop("default_browser_type", None)
            if self.browser_type == "firefox":
                descriptor.pop("is_mobile", None)
            context_options.update(descriptor)

        context_options.update(profile.overrides)
        if self.browser_type == "firefox":
            context_options.pop("is_mobile", None)
        context_options.update(options)
        return context_options

    async def new_context(
        self,
        profile: str = "desktop",
        **options: Any,
    ) -> BrowserContext:
        """
        Create new browser context emulating a device profile.

        Each context is isolated - separate cookies, localStorage, etc.

        Args:
            profile: Device profile name (see DEVICE_PROFILES)
            **options: Additional context options

        Returns:
            New BrowserContext
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        device_profile = get_device_profile(profile)
        context = await self._browser.new_context(
            **self.context_options(device_profile, **options)
        )
        context.set_default_timeout(self.default_timeout)
        context.set_default_navigation_timeout(self.navigation_timeout)
        self._contexts.append(context)

        logger.debug(f"New context for device profile: {profile}")
        return context

    async def new_page(
        self,
        profile: str = "desktop",
        context: Optional[BrowserContext] = None,
        **context_options: Any,
    ) -> Page:
        """Create new page in a new (or the given) context."""
        if context is None:
            context = await self.new_context(profile, **context_options)

        return await context.new_page()

    def forget_context(self, context: BrowserContext) -> None:
        """Stop tracking a context the caller closed itself."""
        if context in self._contexts:
            self._contexts.remove(context)

    @property
    def browser(self) -> Optional[Browser]:
        return self._browser


__all__ = [
    "BrowserManager",
    "DEVICE_PROFILES",
    "DeviceProfile",
    "get_device_profile",
]
