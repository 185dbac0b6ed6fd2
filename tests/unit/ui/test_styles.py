"""Unit tests for common style helper functions in viewkit.ui.styles."""

from viewkit.ui import styles


def test_state_style():
    assert styles.state_style("frozen") == "green"
    assert styles.state_style("FROZEN") == "green"
    assert styles.state_style("draft") == "yellow"
    assert styles.state_style("unknown") == "dim"
    assert styles.state_style(None) == "dim"


def test_layout_style():
    assert styles.layout_style("application") == "cyan"
    assert styles.layout_style(None) == "dim"
    assert styles.layout_style(False) == "dim"
