"""
Header component selectors.

Centralizing selectors here keeps the Header component free of raw strings
and makes markup changes a one-line fix.
"""

from __future__ import annotations

from dataclasses import dataclass

from testsuites.ui_testing.framework.locators import LocatorDescriptor


@dataclass(frozen=True)
class HeaderSelectors:
    """Locator descriptors used by the Header component."""

    # Every link of the header navigation; filtered by index
    menu_items: LocatorDescriptor = LocatorDescriptor.css("header nav a, .navbar11_menu a")

    # Region searched for text lookups, keeps footer/body links out
    navigation: LocatorDescriptor = LocatorDescriptor.by_role("navigation")

    # Hamburger toggle shown on narrow viewports
    menu_toggle: LocatorDescriptor = LocatorDescriptor.by_role("button", name="menu", exact=False)


HEADER_SELECTORS = HeaderSelectors()
