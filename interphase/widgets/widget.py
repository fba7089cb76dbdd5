"""
Base widget wrapper.

A `Widget` owns exactly one native Qt handle and forwards sizing, visibility,
signal and teardown calls to it. The wrapper adds the two things Qt does not
have: a declarative `setup` hook and a name that the widget answers to as an
attribute.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Self

from interphase.errors import UnknownSignalError

if TYPE_CHECKING:
    from interphase.widgets.container import Container

logger = logging.getLogger(__name__)

Setup = Callable[[Any], None]


class Widget:
    """
    Wrapper around a single native widget handle.

    Parameters
    ----------
    native:
        The Qt widget this wrapper owns.
    name:
        Optional name. A widget answers to its own name as an attribute, and
        containers use the name to look descendants up.
    setup:
        Optional callable run with the new widget once construction is done.

    Notes
    -----
    Real attributes always win over names: a child named "show" cannot be
    reached as `container.show`, use `container.find("show")` instead.
    """

    def __init__(self, native: Any, *, name: str | None = None, setup: Setup | None = None) -> None:
        self.native = native
        self.name = name
        self._parent: Container | None = None
        self._destroyed = False

        self.configure(setup)

    @property
    def parent(self) -> Container | None:
        """The container this widget was added to, if any. The container owns the child, not the reverse."""
        return self._parent

    def _set_parent(self, parent: Container | None) -> None:
        self._parent = parent

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    def configure(self, setup: Setup | None) -> Self:
        """Run a declarative `setup` callable against this widget and return it."""
        if setup is not None:
            setup(self)
        return self

    def size(self, width: int, height: int) -> None:
        """
        Request that this widget is resized.

        Notes
        -----
        This is a method rather than a setter because the request is not
        guaranteed: a widget inside a layout is sized by the layout policy.
        """
        if width < 0 or height < 0:
            raise ValueError(f"Widget size must be non-negative, got {width}x{height}")
        self.native.resize(width, height)

    def show(self) -> None:
        self.native.show()

    def hide(self) -> None:
        self.native.hide()

    def on(self, signal_name: str, handler: Callable[..., Any]) -> Any:
        """
        Connect `handler` to the native signal called `signal_name`.

        Parameters
        ----------
        signal_name:
            Qt signal name, e.g. "clicked" or "textChanged".
        handler:
            Callable invoked by Qt whenever the signal is emitted.

        Returns
        -------
        Any
            The connection object returned by Qt.

        Raises
        ------
        UnknownSignalError
            If the native widget has no signal with that name.
        """
        signal = getattr(self.native, signal_name, None)
        connect = getattr(signal, "connect", None)
        if connect is None:
            raise UnknownSignalError(
                f"{type(self.native).__name__} has no signal named {signal_name!r}"
            )
        return connect(handler)

    def destroy(self) -> None:
        """Release the native handle and detach this widget from its parent."""
        if self._destroyed:
            return

        parent = self.parent
        if parent is not None:
            parent._forget(self)
        self._set_parent(None)

        self.native.close()
        self.native.deleteLater()
        self._destroyed = True
        logger.debug("Destroyed %r", self)

    def __getattr__(self, requested: str) -> Any:
        # Only reached when normal lookup fails
        if not requested.startswith("_") and requested == self.__dict__.get("name"):
            return self
        raise AttributeError(
            f"{type(self).__name__!r} object has no attribute or child named {requested!r}"
        )

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None

    def __repr__(self) -> str:
        name = self.__dict__.get("name")
        suffix = f" name={name!r}" if name is not None else ""
        return f"<{type(self).__name__}{suffix}>"
