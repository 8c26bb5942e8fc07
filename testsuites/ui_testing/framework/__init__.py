"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based building blocks for the marketing site Page Objects.

Components:
    - locators: Declarative locator descriptors (selector or role/name/exact)
    - page_base: Navigation with best-effort cookie consent, console capture
    - browser_manager: Browser lifecycle and device profiles
    - config_loader: YAML configuration with environment overrides
    - log_config: Loguru setup

Author: Automation Team
License: MIT
================================================================================
"""

from .config_loader import ConfigLoader, ConfigurationError
from .locators import LocatorDescriptor
from .page_base import (
    ConsentOutcome,
    ConsoleErrorCollector,
    NavigablePage,
    dismiss_consent,
    navigate_with_consent,
)
from .browser_manager import BrowserManager, DeviceProfile, DEVICE_PROFILES, get_device_profile
from .log_config import init_logger

__all__ = [
    "BrowserManager",
    "ConfigLoader",
    "ConfigurationError",
    "ConsentOutcome",
    "ConsoleErrorCollector",
    "DEVICE_PROFILES",
    "DeviceProfile",
    "LocatorDescriptor",
    "NavigablePage",
    "dismiss_consent",
    "get_device_profile",
    "init_logger",
    "navigate_with_consent",
]
