"""
================================================================================
Unit Test Configuration
================================================================================

In-memory stand-ins for Playwright's Page / Locator so the Page Objects can be
exercised without a browser or network.

The fakes mirror the async API surface the framework touches: locator(),
get_by_role(), .first, nth(), is_visible(), wait_for(), click(), goto(),
wait_for_load_state(), wait_for_url(), title(), on()/remove_listener().
Every awaited call is appended to a shared log so tests can assert ordering.

================================================================================
"""

from __future__ import annotations

import re
from collections import defaultdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import pytest

from testsuites.ui_testing.framework.config_loader import ConfigLoader


def _name_key(name: Any) -> Any:
    if isinstance(name, re.Pattern):
        return ("re", name.pattern, name.flags)
    return name


class _FakeScope:
    """Shared child lookup for FakePage and FakeLocator."""

    description = "page"

    def __init__(self, log: List[Tuple[str, str]]):
        self.log = log
        self.children: Dict[tuple, "FakeLocator"] = {}

    def _child(self, key: tuple, description: str) -> "FakeLocator":
        if key not in self.children:
            self.children[key] = FakeLocator(description, self.log)
        return self.children[key]

    def locator(self, selector: str) -> "FakeLocator":
        return self._child(("css", selector), f"{self.description} >> {selector}")

    def get_by_role(self, role: str, name: Any = None, exact: Optional[bool] = None) -> "FakeLocator":
        return self._child(
            ("role", role, _name_key(name), exact),
            f"{self.description} >> role={role}[{name!r}]",
        )

    def role_children(self, role: str) -> List[Tuple[Any, "FakeLocator"]]:
        """(name, locator) pairs of children looked up by role."""
        return [
            (key[2], child)
            for key, child in self.children.items()
            if key[0] == "role" and key[1] == role
        ]


class FakeLocator(_FakeScope):
    def __init__(self, description: str, log: List[Tuple[str, str]]):
        super().__init__(log)
        self.description = description
        self.visible = False
        self.attributes: Dict[str, str] = {}
        self.visible_error: Optional[Exception] = None
        self.wait_error: Optional[Exception] = None
        self.click_error: Optional[Exception] = None
        self.clicks: List[Dict[str, Any]] = []
        self.waits: List[Tuple[str, Optional[int]]] = []
        self.first_taken = 0
        self.nth_items: Dict[int, FakeLocator] = {}

    @property
    def first(self) -> "FakeLocator":
        self.first_taken += 1
        return self

    def nth(self, index: int) -> "FakeLocator":
        if index not in self.nth_items:
            self.nth_items[index] = FakeLocator(f"{self.description} >> nth={index}", self.log)
        return self.nth_items[index]

    async def is_visible(self) -> bool:
        self.log.append(("is_visible", self.description))
        if self.visible_error:
            raise self.visible_error
        return self.visible

    async def wait_for(self, state: str = "visible", timeout: Optional[int] = None) -> None:
        self.log.append(("wait_for", self.description))
        self.waits.append((state, timeout))
        if self.wait_error:
            raise self.wait_error

    async def click(self, **kwargs: Any) -> None:
        self.log.append(("click", self.description))
        if self.click_error:
            raise self.click_error
        self.clicks.append(kwargs)

    async def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)


class FakePage(_FakeScope):
    def __init__(self, url: str = "about:blank", title: str = "Creai | AI for business"):
        super().__init__([])
        self.url = url
        self._title = title
        self.goto_error: Optional[Exception] = None
        self.load_states: List[str] = []
        self.url_waits: List[Tuple[Any, Dict[str, Any]]] = []
        self.listeners: Dict[str, List[Any]] = defaultdict(list)

    async def goto(self, url: str, **kwargs: Any) -> None:
        self.log.append(("goto", url))
        if self.goto_error:
            raise self.goto_error
        self.url = url

    async def wait_for_load_state(self, state: str = "load", **kwargs: Any) -> None:
        self.log.append(("wait_for_load_state", state))
        self.load_states.append(state)

    async def wait_for_url(self, url: Any, **kwargs: Any) -> None:
        self.url_waits.append((url, kwargs))

    async def title(self) -> str:
        return self._title

    async def screenshot(self, path: Optional[str] = None, full_page: bool = False) -> bytes:
        data = b"\x89PNG\r\n\x1a\n"
        if path:
            Path(path).write_bytes(data)
        return data

    def on(self, event: str, handler: Any) -> None:
        self.listeners[event].append(handler)

    def remove_listener(self, event: str, handler: Any) -> None:
        self.listeners[event].remove(handler)

    def emit(self, event: str, payload: Any) -> None:
        for handler in list(self.listeners[event]):
            handler(payload)


class FakeConsoleMessage:
    def __init__(self, type: str, text: str):
        self.type = type
        self.text = text


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    """Fresh ConfigLoader per test, unaffected by the caller's environment."""
    for name in ("BASE_URL", "UI_BASE_URL", "UI_TIMEOUTS_CONSENT", "UI_CONSENT_ACCEPT_SELECTOR"):
        monkeypatch.delenv(name, raising=False)
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()


@pytest.fixture
def console_message():
    return FakeConsoleMessage
