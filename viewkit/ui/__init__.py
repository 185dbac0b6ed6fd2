"""Console reports for inspecting view configuration."""

from __future__ import annotations

from typing import Optional

from rich.console import Console

from viewkit.registry import ViewRegistry, get_registry
from viewkit.ui.reports.configuration import ViewConfigurationReport

__all__ = ["describe_views"]


def describe_views(
    console: Optional[Console] = None, registry: Optional[ViewRegistry] = None
):
    """Print every registered view with its root, template, format and layout."""
    registry = registry or get_registry()
    ViewConfigurationReport(console or Console()).render_registry(registry)
