from __future__ import annotations

from typing import Any, Callable

import pytest

from interphase.errors import InterphaseError, UnknownSignalError
from interphase.widgets.widget import Widget


def test_size_requests_native_resize(fake_native: Callable[..., Any]) -> None:
    native = fake_native()
    widget = Widget(native)

    widget.size(200, 100)

    assert native.calls == [("resize", 200, 100)]


def test_size_rejects_negative_dimensions(fake_native: Callable[..., Any]) -> None:
    native = fake_native()
    widget = Widget(native)

    with pytest.raises(ValueError):
        widget.size(-1, 10)
    assert native.calls == []


def test_show_and_hide_forward(fake_native: Callable[..., Any]) -> None:
    native = fake_native()
    widget = Widget(native)

    widget.show()
    widget.hide()

    assert native.calls == [("show",), ("hide",)]


def test_on_connects_handler_to_native_signal(fake_native: Callable[..., Any]) -> None:
    native = fake_native()
    widget = Widget(native)
    received: list[str] = []

    connection = widget.on("clicked", received.append)
    native.clicked.emit("pressed")

    assert connection == "connection-1"
    assert received == ["pressed"]


def test_on_unknown_signal_raises(fake_native: Callable[..., Any]) -> None:
    widget = Widget(fake_native())

    with pytest.raises(UnknownSignalError) as excinfo:
        widget.on("no_such_signal", lambda: None)

    assert isinstance(excinfo.value, InterphaseError)
    assert isinstance(excinfo.value, AttributeError)


def test_on_rejects_plain_methods(fake_native: Callable[..., Any]) -> None:
    widget = Widget(fake_native())

    with pytest.raises(UnknownSignalError):
        widget.on("show", lambda: None)


def test_destroy_releases_native_once(fake_native: Callable[..., Any]) -> None:
    native = fake_native()
    widget = Widget(native)

    widget.destroy()
    widget.destroy()

    assert widget.is_destroyed
    assert native.calls == [("close",), ("deleteLater",)]


def test_widget_answers_to_its_own_name(fake_native: Callable[..., Any]) -> None:
    widget = Widget(fake_native(), name="ok_button")

    assert widget.ok_button is widget


def test_unresolved_name_raises_attribute_error(fake_native: Callable[..., Any]) -> None:
    widget = Widget(fake_native(), name="ok_button")

    with pytest.raises(AttributeError):
        widget.cancel_button

    assert not hasattr(Widget(fake_native()), "anything")


def test_private_names_never_resolve(fake_native: Callable[..., Any]) -> None:
    widget = Widget(fake_native(), name="_hidden")

    with pytest.raises(AttributeError):
        widget._hidden


def test_setup_runs_against_new_widget(fake_native: Callable[..., Any]) -> None:
    native = fake_native()
    seen: list[Widget] = []

    def _setup(w: Widget) -> None:
        seen.append(w)
        w.size(10, 20)

    widget = Widget(native, setup=_setup)

    assert seen == [widget]
    assert native.calls == [("resize", 10, 20)]


def test_context_manager_yields_widget(fake_native: Callable[..., Any]) -> None:
    with Widget(fake_native(), name="w") as widget:
        widget.show()

    assert widget.name == "w"
    assert widget.native.calls == [("show",)]
