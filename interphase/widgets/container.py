"""
Container widget wrapper.

A `Container` owns an ordered list of child widgets. Children are attached to
the container's native handle when they are added, and can be looked up by
name anywhere below the container.
"""

from __future__ import annotations

import logging
from typing import Any

from interphase.errors import InterphaseError, WidgetAlreadyParentedError
from interphase.widgets.widget import Setup, Widget

logger = logging.getLogger(__name__)


class Container(Widget):
    """
    A widget which may contain other widgets.

    Notes
    -----
    The default native attachment adds the child's handle to the layout of
    this container's handle. Containers whose native widget is not
    layout-driven override `attach_native` and `detach_native`.
    """

    def __init__(self, native: Any, *, name: str | None = None, setup: Setup | None = None) -> None:
        self._children: list[Widget] = []
        self._attached: set[int] = set()
        super().__init__(native, name=name, setup=setup)

    @property
    def children(self) -> tuple[Widget, ...]:
        """Children in the order they were added."""
        return tuple(self._children)

    def add(self, child: Widget, attach: bool = True, setup: Setup | None = None) -> Widget:
        """
        Add a widget as a child of this one.

        Parameters
        ----------
        child:
            The new child widget.
        attach:
            Whether to attach the child's native handle to this container's
            handle, or only register it in `children`. Containers that place
            the handle themselves pass False.
        setup:
            Optional callable run against the child before it is added.

        Returns
        -------
        Widget
            The child, so declarations can keep a reference inline.

        Raises
        ------
        WidgetAlreadyParentedError
            If the child already has a parent.
        InterphaseError
            If adding the child would make a container its own descendant.
        """
        child.configure(setup)

        if child.parent is not None:
            raise WidgetAlreadyParentedError(f"{child!r} already has a parent ({child.parent!r})")

        ancestor: Widget | None = self
        while ancestor is not None:
            if ancestor is child:
                raise InterphaseError(f"Cannot add {child!r} inside itself")
            ancestor = ancestor.parent

        if attach:
            self.attach_native(child)
            self._attached.add(id(child))

        child._set_parent(self)
        self._children.append(child)
        logger.debug("Added %r to %r", child, self)
        return child

    def remove(self, child: Widget) -> None:
        """
        Detach a child from this container without destroying it.

        Raises
        ------
        InterphaseError
            If `child` is not a child of this container.
        """
        if not any(existing is child for existing in self._children):
            raise InterphaseError(f"{child!r} is not a child of {self!r}")

        if id(child) in self._attached:
            self.detach_native(child)
        self._forget(child)
        child._set_parent(None)
        logger.debug("Removed %r from %r", child, self)

    def _forget(self, child: Widget) -> None:
        self._children = [existing for existing in self._children if existing is not child]
        self._attached.discard(id(child))

    def attach_native(self, child: Widget) -> None:
        layout = self.native.layout()
        if layout is None:
            raise InterphaseError(f"{self!r} has no native layout to attach {child!r} to")
        layout.addWidget(child.native)

    def detach_native(self, child: Widget) -> None:
        layout = self.native.layout()
        if layout is not None:
            layout.removeWidget(child.native)
        child.native.setParent(None)

    def show_all(self) -> None:
        """Show this widget and all of its descendants."""
        self.show()
        for child in self._children:
            if isinstance(child, Container):
                child.show_all()
            else:
                child.show()

    def find(self, name: str) -> Widget | None:
        """
        Look up a descendant by name.

        The search is depth-first in add order; the first match wins.

        Returns
        -------
        Widget | None
            The matching widget, or None.
        """
        for child in self._children:
            if child.name == name:
                return child
            if isinstance(child, Container):
                found = child.find(name)
                if found is not None:
                    return found
        return None

    def destroy(self) -> None:
        """Destroy all children, then this container."""
        if self.is_destroyed:
            return
        for child in list(self._children):
            child.destroy()
        super().destroy()

    def __getattr__(self, requested: str) -> Any:
        # Only reached when normal lookup fails
        if requested.startswith("_"):
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {requested!r}"
            )
        if requested == self.__dict__.get("name"):
            return self

        found = self.find(requested) if "_children" in self.__dict__ else None
        if found is None:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute or child named {requested!r}"
            )
        return found
