"""
================================================================================
Locator Descriptors
================================================================================

Declarative, immutable descriptions of how to find an element.

A descriptor uses exactly one addressing scheme:
    - a raw selector string (CSS / Playwright selector engine), or
    - an ARIA role with an optional accessible name and exact-match flag.

Descriptors are resolved against a scope (a Page or a Locator) on every
query, so they never hold on to element handles.

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from playwright.async_api import Locator, Page


Scope = Union[Page, Locator]


@dataclass(frozen=True)
class LocatorDescriptor:
    """
    How to find zero or more elements.

    Attributes:
        selector: Raw selector string (mutually exclusive with role)
        role: ARIA role for get_by_role lookups
        name: Accessible name for role lookups
        exact: Whole-string, case-sensitive name match for role lookups
    """

    selector: Optional[str] = None
    role: Optional[str] = None
    name: Optional[str] = None
    exact: bool = False

    def __post_init__(self) -> None:
        if (self.selector is None) == (self.role is None):
            raise ValueError(
                "LocatorDescriptor needs exactly one of 'selector' or 'role'"
            )
        if self.selector is not None and self.name is not None:
            raise ValueError("'name' only applies to role descriptors")

    @classmethod
    def css(cls, selector: str) -> "LocatorDescriptor":
        return cls(selector=selector)

    @classmethod
    def by_role(
        cls,
        role: str,
        name: Optional[str] = None,
        exact: bool = False,
    ) -> "LocatorDescriptor":
        return cls(role=role, name=name, exact=exact)

    @property
    def is_role(self) -> bool:
        return self.role is not None

    def resolve(self, scope: Scope) -> Locator:
        """Build a fresh Locator for this descriptor within scope."""
        if self.selector is not None:
            return scope.locator(self.selector)
        if self.name is None:
            return scope.get_by_role(self.role)
        return scope.get_by_role(self.role, name=self.name, exact=self.exact)

    def __str__(self) -> str:
        if self.selector is not None:
            return self.selector
        if self.name is None:
            return f"role={self.role}"
        return f"role={self.role}[name={self.name!r}, exact={self.exact}]"


__all__ = [
    "LocatorDescriptor",
    "Scope",
]
