"""Common Rich style helper functions reused by console reports."""

from __future__ import annotations

__all__ = [
    "state_style",
    "layout_style",
]


def state_style(state: str | None):
    if not state:
        return "dim"
    state = state.lower()
    if state == "frozen":
        return "green"
    if state == "draft":
        return "yellow"
    return "dim"


def layout_style(layout):
    if layout is None or layout is False:
        return "dim"
    return "cyan"
