from __future__ import annotations

from PySide6.QtWidgets import QVBoxLayout, QWidget

from interphase import application
from interphase.widgets.container import Container
from interphase.widgets.widget import Setup


class Window(Container):
    """
    A top-level window.

    Children are stacked vertically in the order they are added.
    """

    def __init__(self, title: str = "", *, name: str | None = None, setup: Setup | None = None) -> None:
        application.ensure_application()

        native = QWidget()
        QVBoxLayout(native)
        native.setWindowTitle(title)

        super().__init__(native, name=name, setup=setup)

    @property
    def title(self) -> str:
        return self.native.windowTitle()

    @title.setter
    def title(self, value: str) -> None:
        self.native.setWindowTitle(value)

    def run(self) -> int:
        """Run the event loop until the application quits; return its exit code."""
        return application.run()

    def quit(self) -> None:
        application.quit_application()
