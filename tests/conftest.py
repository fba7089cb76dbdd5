"""
Shared pytest fixtures.

Qt runs on the offscreen platform so the suite needs no display.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any, Callable

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeSignal:
    """Stands in for a Qt signal instance."""

    def __init__(self) -> None:
        self.handlers: list[Callable[..., Any]] = []

    def connect(self, handler: Callable[..., Any]) -> str:
        self.handlers.append(handler)
        return f"connection-{len(self.handlers)}"

    def emit(self, *args: Any) -> None:
        for handler in self.handlers:
            handler(*args)


class FakeLayout:
    def __init__(self) -> None:
        self.widgets: list[Any] = []

    def addWidget(self, widget: Any) -> None:
        self.widgets.append(widget)

    def removeWidget(self, widget: Any) -> None:
        self.widgets.remove(widget)


class FakeNative:
    """Records the calls a wrapper forwards to its native handle."""

    def __init__(self, with_layout: bool = True) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self.clicked = FakeSignal()
        self._layout = FakeLayout() if with_layout else None

    def resize(self, width: int, height: int) -> None:
        self.calls.append(("resize", width, height))

    def show(self) -> None:
        self.calls.append(("show",))

    def hide(self) -> None:
        self.calls.append(("hide",))

    def close(self) -> None:
        self.calls.append(("close",))

    def deleteLater(self) -> None:
        self.calls.append(("deleteLater",))

    def setParent(self, parent: Any) -> None:
        self.calls.append(("setParent", parent))

    def layout(self) -> FakeLayout | None:
        return self._layout


@pytest.fixture
def fake_native() -> Callable[..., FakeNative]:
    return FakeNative


@pytest.fixture(scope="session")
def qapp() -> Iterator[Any]:
    from interphase.application import ensure_application
    from interphase.settings import InterphaseSettings

    yield ensure_application(InterphaseSettings.defaults())
