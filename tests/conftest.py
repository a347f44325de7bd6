"""Shared fixtures for learnbook tests.

``fake_playwright`` swaps ``learnbook.exporter.async_playwright`` for an
in-memory stand-in so exporter and pipeline tests never launch Chromium. The
returned state dict records the HTML passed to ``set_content``, the keyword
arguments passed to ``pdf``, and whether the browser was closed. Set
``state["fail_pdf"]`` to make ``pdf`` raise.
"""

from __future__ import annotations

import typing as typ

import pytest


class _FakePage:
    def __init__(self, state: dict[str, typ.Any]) -> None:
        self.state = state

    async def set_content(self, html: str) -> None:
        self.state["content"] = html

    async def pdf(self, **kwargs: typ.Any) -> None:
        self.state["pdf"] = kwargs
        if self.state["fail_pdf"]:
            msg = "printer on fire"
            raise RuntimeError(msg)


class _FakeBrowser:
    def __init__(self, state: dict[str, typ.Any]) -> None:
        self.state = state

    async def new_page(self) -> _FakePage:
        return _FakePage(self.state)

    async def close(self) -> None:
        self.state["closed"] = True


class _FakeChromium:
    def __init__(self, state: dict[str, typ.Any]) -> None:
        self.state = state

    async def launch(self) -> _FakeBrowser:
        self.state["launched"] += 1
        return _FakeBrowser(self.state)


class _FakePlaywrightManager:
    def __init__(self, state: dict[str, typ.Any]) -> None:
        self.chromium = _FakeChromium(state)

    async def __aenter__(self) -> _FakePlaywrightManager:
        return self

    async def __aexit__(self, *_exc_info: object) -> bool:
        return False


@pytest.fixture
def fake_playwright(monkeypatch: pytest.MonkeyPatch) -> dict[str, typ.Any]:
    """Replace Playwright with an in-memory fake and return its call state."""
    state: dict[str, typ.Any] = {
        "launched": 0,
        "closed": False,
        "fail_pdf": False,
        "content": None,
        "pdf": None,
    }
    monkeypatch.setattr(
        "learnbook.exporter.async_playwright", lambda: _FakePlaywrightManager(state)
    )
    return state
