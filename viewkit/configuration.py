"""Resolved configuration snapshot for a view class."""

from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field


class ViewConfiguration(BaseModel):
    """Immutable view configuration.

    Load produces one of these per registered view. Before load, a view's
    ``configuration()`` builds a fresh one from its current values, so it
    can still contain an undecided ``layout`` (``None`` or ``False``).
    """

    name: str = Field(description="Namespaced view class name")
    root: Path = Field(description="Templates root path")
    template: str = Field(description="Template path relative to root")
    format: Optional[str] = Field(default=None, description="Handled format")
    layout: Optional[Union[bool, str]] = Field(
        default=None, description="Layout name, None for no layout"
    )

    model_config = {"frozen": True}

    @property
    def template_path(self) -> Path:
        return self.root / self.template
