"""Declarative, class level configuration for views."""

from viewkit.configuration import ViewConfiguration
from viewkit.exceptions import AlreadyLoadedError, FrozenViewError, ViewkitError
from viewkit.layout_finder import LayoutFinder
from viewkit.registry import ViewRegistry, get_registry
from viewkit.view import View, finalize_views

__all__ = [
    "View",
    "ViewConfiguration",
    "ViewRegistry",
    "LayoutFinder",
    "ViewkitError",
    "FrozenViewError",
    "AlreadyLoadedError",
    "finalize_views",
    "get_registry",
    "load",
]


def load():
    """Resolve and freeze the configuration of every registered view."""
    get_registry().load()
