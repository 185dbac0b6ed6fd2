"""Resolve the layout a view renders within."""

from typing import Optional


class LayoutFinder:
    """Find the effective layout name for a view class.

    An explicit layout declared on the view always wins. ``False`` disables
    the layout altogether. Otherwise the registry's default layout is used.
    """

    def __init__(self, view_cls: type):
        self.view = view_cls

    def find(self) -> Optional[str]:
        declared = self.view.layout()
        if declared is False:
            return None
        if declared is not None:
            return declared
        return self.view.registry().layout
