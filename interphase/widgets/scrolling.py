from __future__ import annotations

from PySide6.QtWidgets import QScrollArea

from interphase import application
from interphase.errors import InterphaseError
from interphase.widgets.container import Container
from interphase.widgets.widget import Setup, Widget


class ScrollingTransformer(Container):
    """
    Wraps a single widget in a scrollable viewport.

    Notes
    -----
    The scroll area holds its widget directly instead of through a layout,
    so it accepts exactly one child.
    """

    def __init__(self, widget: Widget, *, name: str | None = None, setup: Setup | None = None) -> None:
        application.ensure_application()
        native = QScrollArea()
        native.setWidgetResizable(True)

        super().__init__(native, name=name)
        self.add(widget)
        self.configure(setup)

    @property
    def widget(self) -> Widget | None:
        return self.children[0] if self.children else None

    def add(self, child: Widget, attach: bool = True, setup: Setup | None = None) -> Widget:
        if self.children:
            raise InterphaseError(f"{self!r} already wraps {self.children[0]!r}")
        return super().add(child, attach, setup)

    def attach_native(self, child: Widget) -> None:
        self.native.setWidget(child.native)

    def detach_native(self, child: Widget) -> None:
        self.native.takeWidget()
        child.native.setParent(None)
