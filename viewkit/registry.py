"""Global registry of view classes and their load-time defaults."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Union

from viewkit.config import ViewkitConfig, get_config_manager
from viewkit.exceptions import AlreadyLoadedError
from viewkit.naming import view_name

LoadHook = Callable[["ViewRegistry", Sequence[type]], None]

_REGISTRY: Optional["ViewRegistry"] = None


class ViewRegistry:
    """Registered view classes plus the defaults they fall back to.

    Views are kept in definition order. ``load()`` runs the load hooks, in
    the order they were added, over every registered view exactly once.
    """

    def __init__(
        self,
        config: Optional[ViewkitConfig] = None,
        load_hooks: Optional[Sequence[LoadHook]] = None,
    ):
        self._views: List[type] = []
        self._load_hooks: List[LoadHook] = list(load_hooks or [])
        self._loaded = False
        self._apply_config(config)

    def _apply_config(self, config: Optional[ViewkitConfig]):
        if config is None:
            config = get_config_manager().get_config()
        self._root = Path(config.root)
        self._layout = config.layout
        self._namespace = config.namespace

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def root(self) -> Path:
        return self._root

    @root.setter
    def root(self, value: Union[str, Path]):
        self._ensure_not_loaded("root")
        self._root = Path(value)

    @property
    def layout(self) -> Optional[str]:
        return self._layout

    @layout.setter
    def layout(self, value: Optional[str]):
        self._ensure_not_loaded("layout")
        self._layout = value

    @property
    def namespace(self) -> Optional[str]:
        """Module prefix dropped from view names and default templates."""
        return self._namespace

    @namespace.setter
    def namespace(self, value: Optional[str]):
        self._ensure_not_loaded("namespace")
        self._namespace = value

    def name_of(self, view_cls: type) -> str:
        return view_name(view_cls, self._namespace)

    def _ensure_not_loaded(self, attribute: str):
        if self._loaded:
            raise AlreadyLoadedError(
                f"Cannot change default {attribute}: view registry is already loaded"
            )

    def register(self, view_cls: type):
        """Register a view class. Views defined after load are loaded immediately."""
        if view_cls in self._views:
            return

        self._views.append(view_cls)
        logging.debug(f"Registered view {self.name_of(view_cls)}")

        if self._loaded:
            logging.warning(
                f"View {self.name_of(view_cls)} was defined after load; loading it now"
            )
            self._run_hooks([view_cls])

    def views(self) -> List[type]:
        return list(self._views)

    def get(self, name: str) -> Optional[type]:
        for view_cls in self._views:
            if self.name_of(view_cls) == name:
                return view_cls
        return None

    def add_load_hook(self, hook: LoadHook):
        """Append a hook; it runs after every hook added before it."""
        self._load_hooks.append(hook)

    def load(self):
        """Run every load hook over the registered views, once."""
        if self._loaded:
            raise AlreadyLoadedError("View registry has already been loaded")

        views = self.views()
        logging.debug(f"Loading {len(views)} views")
        self._run_hooks(views)
        self._loaded = True

    def _run_hooks(self, views: Sequence[type]):
        for hook in self._load_hooks:
            hook(self, views)

    def reset(self, config: Optional[ViewkitConfig] = None):
        """Forget registered views and reload the defaults from configuration."""
        self._views.clear()
        self._loaded = False
        self._apply_config(config)


def get_registry() -> ViewRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _REGISTRY
    if _REGISTRY is None:
        from viewkit.view import finalize_views

        _REGISTRY = ViewRegistry(load_hooks=[finalize_views])
    return _REGISTRY
