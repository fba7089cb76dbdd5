"""
Demo widget trees used by the `interphase demo` command.

Each builder returns a fully declared, not yet shown, `Window`.
"""

from __future__ import annotations

import string
from collections.abc import Callable

from interphase.widgets import Button, HBox, Label, ScrollingTransformer, SimpleListView, Window


def build_scrolling_demo() -> Window:
    """A small window scrolling through the letters a to z."""
    with Window("Scrolling") as window:
        window.size(200, 200)
        window.add(ScrollingTransformer(SimpleListView(string.ascii_lowercase, name="letters")))
    return window


def build_buttons_demo() -> Window:
    """A counter driven by two buttons, looked up by name."""
    with Window("Buttons") as window:
        window.size(240, 100)
        window.add(Label("0", name="count"))

        with HBox(name="controls") as controls:
            controls.add(Button("-", name="decrement"))
            controls.add(Button("+", name="increment"))
        window.add(controls)

    def _step(delta: int) -> Callable[..., None]:
        def _handler(*_args: object) -> None:
            window.count.text = str(int(window.count.text) + delta)

        return _handler

    window.decrement.on("clicked", _step(-1))
    window.increment.on("clicked", _step(1))
    return window


DEMOS: dict[str, Callable[[], Window]] = {
    "scrolling": build_scrolling_demo,
    "buttons": build_buttons_demo,
}
