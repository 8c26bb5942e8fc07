"""
HomePage selectors.

Best practices:
    - Prefer role/name descriptors for user-facing controls
    - Use specific class names for layout sections
    - Keep selectors as simple as possible while remaining unique
"""

from __future__ import annotations

from dataclasses import dataclass

from testsuites.ui_testing.framework.locators import LocatorDescriptor


@dataclass(frozen=True)
class HomePageSelectors:
    """Locator descriptors for the landing page (creai.mx)."""

    # Navbar container holding the company logo
    logo: LocatorDescriptor = LocatorDescriptor.css(".navbar11_container")

    contact_button: LocatorDescriptor = LocatorDescriptor.by_role("link", name="Contact", exact=True)

    navigation_menu: LocatorDescriptor = LocatorDescriptor.css(".navbar11_menu-elements")

    # Client logos strip
    clients: LocatorDescriptor = LocatorDescriptor.css(".logo3_component")

    # Swiper carousel of success stories
    success_stories: LocatorDescriptor = LocatorDescriptor.css(
        'div[role="list"].swiper-wrapper.w-dyn-items'
    )

    about_us: LocatorDescriptor = LocatorDescriptor.css('a[href="/about-us"]')

    knowledge_hub: LocatorDescriptor = LocatorDescriptor.css('a[href="/knowledge-hub"]')

    menu_button: LocatorDescriptor = LocatorDescriptor.by_role("button", name="menu", exact=True)


HOME_PAGE_SELECTORS = HomePageSelectors()
