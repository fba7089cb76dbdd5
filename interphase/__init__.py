"""
Interphase: declarative widget trees over Qt.

Notes
-----
Build a tree by constructing wrappers and adding them to containers, either
with `setup` callables or with nested `with` blocks::

    with Window("Scrolling") as window:
        window.size(200, 200)
        window.add(ScrollingTransformer(SimpleListView("abc")))

    window.show_all()
    window.run()
"""

from interphase.errors import InterphaseError, UnknownSignalError, WidgetAlreadyParentedError
from interphase.helpers.observable import ObservableList
from interphase.widgets import (
    Box,
    Button,
    Container,
    HBox,
    Label,
    ListView,
    ScrollingTransformer,
    SimpleListView,
    VBox,
    Widget,
    Window,
)

__version__ = "0.1.0"

__all__ = [
    "Box",
    "Button",
    "Container",
    "HBox",
    "InterphaseError",
    "Label",
    "ListView",
    "ObservableList",
    "ScrollingTransformer",
    "SimpleListView",
    "UnknownSignalError",
    "VBox",
    "Widget",
    "WidgetAlreadyParentedError",
    "Window",
]
