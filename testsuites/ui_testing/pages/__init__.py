"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the marketing site.

Each page class encapsulates:
    - Element locator descriptors (see pages/selectors)
    - Navigation through a composed NavigablePage
    - Visibility probes and components (Header)

Author: Automation Team
License: MIT
================================================================================
"""

from .home_page import HomePage
from .components import Header

__all__ = [
    "HomePage",
    "Header",
]
