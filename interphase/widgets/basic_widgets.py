"""Leaf widgets and layout boxes."""

from __future__ import annotations

from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from interphase import application
from interphase.widgets.container import Container
from interphase.widgets.widget import Setup, Widget

ORIENTATIONS = ("vertical", "horizontal")


class Label(Widget):
    """A read-only line of text."""

    def __init__(self, text: str = "", *, name: str | None = None, setup: Setup | None = None) -> None:
        application.ensure_application()
        super().__init__(QLabel(text), name=name, setup=setup)

    @property
    def text(self) -> str:
        return self.native.text()

    @text.setter
    def text(self, value: str) -> None:
        self.native.setText(value)


class Button(Widget):
    """A push button. Connect to it with `on("clicked", handler)`."""

    def __init__(self, label: str = "", *, name: str | None = None, setup: Setup | None = None) -> None:
        application.ensure_application()
        super().__init__(QPushButton(label), name=name, setup=setup)

    @property
    def label(self) -> str:
        return self.native.text()

    @label.setter
    def label(self, value: str) -> None:
        self.native.setText(value)


class Box(Container):
    """
    A container laying its children out in a single row or column.

    Parameters
    ----------
    orientation:
        "vertical" (default) or "horizontal".
    spacing:
        Pixels between children. None keeps the style's default.
    """

    def __init__(
        self,
        orientation: str = "vertical",
        spacing: int | None = None,
        *,
        name: str | None = None,
        setup: Setup | None = None,
    ) -> None:
        if orientation not in ORIENTATIONS:
            raise ValueError(f"orientation must be one of {ORIENTATIONS}, got {orientation!r}")

        application.ensure_application()
        native = QWidget()
        layout = QVBoxLayout(native) if orientation == "vertical" else QHBoxLayout(native)
        if spacing is not None:
            layout.setSpacing(spacing)

        self.orientation = orientation
        super().__init__(native, name=name, setup=setup)


class VBox(Box):
    def __init__(self, spacing: int | None = None, *, name: str | None = None, setup: Setup | None = None) -> None:
        super().__init__("vertical", spacing, name=name, setup=setup)


class HBox(Box):
    def __init__(self, spacing: int | None = None, *, name: str | None = None, setup: Setup | None = None) -> None:
        super().__init__("horizontal", spacing, name=name, setup=setup)
