"""
Domain exceptions for Interphase.

Notes
-----
Structural misuse of a widget tree maps to a domain exception with a clear
meaning. Failed name lookups are not domain errors: they surface as the
plain `AttributeError` Python raises for any unresolved attribute.
"""

from __future__ import annotations


class InterphaseError(RuntimeError):
    """Base exception for all Interphase failures."""


class WidgetAlreadyParentedError(InterphaseError):
    """Raised when a widget that already has a parent is added to a container."""


class UnknownSignalError(InterphaseError, AttributeError):
    """Raised when a handler is connected to a signal the native widget does not have."""
