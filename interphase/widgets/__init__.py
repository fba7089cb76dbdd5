"""Widget wrappers.

Importing from this package requires PySide6; the abstract `Widget` and
`Container` classes accept any native handle and are also usable on their own.
"""

from interphase.widgets.basic_widgets import Box, Button, HBox, Label, VBox
from interphase.widgets.container import Container
from interphase.widgets.list_view import ListView, SimpleListView
from interphase.widgets.scrolling import ScrollingTransformer
from interphase.widgets.widget import Widget
from interphase.widgets.window import Window

__all__ = [
    "Box",
    "Button",
    "Container",
    "HBox",
    "Label",
    "ListView",
    "ScrollingTransformer",
    "SimpleListView",
    "VBox",
    "Widget",
    "Window",
]
