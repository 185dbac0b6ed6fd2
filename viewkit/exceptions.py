"""Exceptions raised by viewkit."""

from typing import Optional


class ViewkitError(Exception):
    """Base class for all viewkit errors."""


class FrozenViewError(ViewkitError):
    """Raised when a finalized view's configuration is written or finalized again."""

    def __init__(self, view: type, attribute: Optional[str] = None):
        self.view = view
        self.attribute = attribute
        if attribute:
            message = (
                f"Cannot set '{attribute}' on {view.__qualname__}: "
                "view configuration is frozen after load"
            )
        else:
            message = f"{view.__qualname__} has already been finalized"
        super().__init__(message)


class AlreadyLoadedError(ViewkitError):
    """Raised when a view registry is loaded twice or changed after load."""


class InvalidViewConfigurationError(ViewkitError, TypeError):
    """Raised when a view is configured with a value of the wrong type."""

    def __init__(self, view: type, attribute: str, value, expected: str):
        self.view = view
        self.attribute = attribute
        self.value = value
        super().__init__(
            f"Invalid {attribute} for {view.__qualname__}: "
            f"expected {expected}, got {value!r}"
        )
