"""Table report of the resolved configuration of registered views."""

from __future__ import annotations
from typing import Any

from rich.console import Console

from viewkit.registry import ViewRegistry
from viewkit.ui.styles import layout_style, state_style


class ViewConfigurationReport:
    columns = ["name", "root", "template", "format", "layout", "state"]
    headers = ["View", "Root", "Template", "Format", "Layout", "State"]
    title = "Registered Views"

    def __init__(self, console: Console):
        self.console = console

    def render(self, data: dict[str, Any]):
        """
        Render view configuration rows to console.

        Args:
            data: A dictionary with a "views" list of configuration rows
                  (see `rows_for`) and an optional "loaded" flag
        """
        from viewkit.ui.table_formatter import display_table

        views = data.get("views", [])

        if not views:
            self.console.print("[yellow]No views registered.[/yellow]")
            return

        display_table(
            console=self.console,
            data=views,
            columns=self.columns,
            headers=self.headers,
            title=self.title,
            style_map={"state": state_style, "layout": layout_style},
        )

        if data.get("loaded"):
            self.console.print("\nConfiguration is [bold green]frozen[/bold green].")

    def render_registry(self, registry: ViewRegistry):
        self.render({"views": rows_for(registry.views()), "loaded": registry.loaded})


def rows_for(view_classes) -> list[dict[str, Any]]:
    """Build report rows from view classes without freezing anything."""
    rows = []
    for view_cls in view_classes:
        configuration = view_cls.configuration()
        row = configuration.model_dump()
        row["root"] = str(configuration.root)
        row["state"] = "frozen" if view_cls.loaded() else "draft"
        rows.append(row)
    return rows
