"""Small helpers shared by the widget wrappers."""

from interphase.helpers.observable import ObservableList

__all__ = ["ObservableList"]
