"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for UI tests, providing fixtures for browser
management, device profiles, page objects, and test setup/teardown.

Key Features:
- One browser per session, one isolated context per test
- Device profile parametrization (desktop / mobile-chrome / iphone-14)
- Tests marked `desktop` or `mobile` only run on matching profiles
- Screenshot capture on failure, attached to Allure

================================================================================
"""

from __future__ import annotations

from typing import AsyncGenerator, List

import allure
import pytest
import pytest_asyncio
from loguru import logger
from playwright.async_api import BrowserContext, Page

from testsuites.ui_testing.framework.browser_manager import (
    BrowserManager,
    DeviceProfile,
    get_device_profile,
)
from testsuites.ui_testing.framework.config_loader import ConfigLoader
from testsuites.ui_testing.framework.page_base import ConsoleErrorCollector
from testsuites.ui_testing.pages.home_page import HomePage


# ================================================================================
# Device Profile Parametrization
# ================================================================================

def _selected_profiles(config) -> List[DeviceProfile]:
    names = config.getoption("ui_device") or ConfigLoader().get("ui.devices", ["desktop"])
    return [get_device_profile(name) for name in names]


def pytest_generate_tests(metafunc):
    """Run every UI test once per selected device profile."""
    if "device_profile" not in metafunc.fixturenames:
        return

    profiles = _selected_profiles(metafunc.config)
    if metafunc.definition.get_closest_marker("desktop"):
        profiles = [p for p in profiles if not p.is_mobile]
    elif metafunc.definition.get_closest_marker("mobile"):
        profiles = [p for p in profiles if p.is_mobile]

    metafunc.parametrize(
        "device_profile",
        profiles,
        ids=[p.name for p in profiles],
    )


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser_manager(pytestconfig) -> AsyncGenerator[BrowserManager, None]:
    """
    Session-scoped browser manager fixture.

    Provides a single launched browser for all tests in the session,
    reducing browser launch overhead.
    """
    manager = BrowserManager(
        headless=False if pytestconfig.getoption("ui_headed") else None,
        browser_type=pytestconfig.getoption("ui_browser"),
    )
    await manager.start()
    yield manager
    await manager.close()


@pytest_asyncio.fixture(loop_scope="session")
async def context(
    browser_manager: BrowserManager,
    device_profile: DeviceProfile,
) -> AsyncGenerator[BrowserContext, None]:
    """
    Function-scoped browser context fixture.

    Creates a new context emulating the device profile, providing isolation.
    """
    context = await browser_manager.new_context(device_profile.name)
    yield context
    browser_manager.forget_context(context)
    await context.close()


@pytest_asyncio.fixture(loop_scope="session")
async def page(request, context: BrowserContext) -> AsyncGenerator[Page, None]:
    """
    Function-scoped page fixture.

    Takes a full-page screenshot when the test body failed.
    """
    page = await context.new_page()
    yield page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        try:
            screenshot = await page.screenshot(full_page=True)
            allure.attach(
                screenshot,
                name="failure_screenshot",
                attachment_type=allure.attachment_type.PNG,
            )
        except Exception as e:
            logger.warning(f"Failed to capture screenshot on failure: {e}")

    await page.close()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def console_errors(page: Page) -> ConsoleErrorCollector:
    """Console error collector attached before any navigation."""
    return ConsoleErrorCollector(page).attach()


@pytest_asyncio.fixture(loop_scope="session")
async def home_page(page: Page, console_errors: ConsoleErrorCollector) -> HomePage:
    """
    Provides HomePage already navigated to '/'.

    Use this fixture for tests that start on the landing page.
    """
    home = HomePage(page)
    await home.goto()
    return home


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase report on the item (rep_setup / rep_call / rep_teardown)."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
