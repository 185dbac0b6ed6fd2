"""Class level configuration DSL for views.

Every subclass of :class:`View` is registered with the view registry when
it is defined. Four values describe where and how a view renders:

* ``root``     - templates root path, shared down the class hierarchy
* ``template`` - template path relative to ``root``, shared down the hierarchy
* ``format``   - handled format, per class
* ``layout``   - layout name, per class, defaulted at load time

Values can be declared as class keyword arguments::

    class Articles:
        class Show(View):
            pass

        class JsonShow(Show, format="json"):
            pass

    Articles.Show.template()      # => "articles/show"
    Articles.JsonShow.template()  # => "articles/show"
    Articles.JsonShow.format()    # => "json"

or set afterwards by calling the accessor with a value. Loading the
registry freezes every value; writes after that raise ``FrozenViewError``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Sequence, Union

from viewkit.configuration import ViewConfiguration
from viewkit.exceptions import FrozenViewError, InvalidViewConfigurationError
from viewkit.layout_finder import LayoutFinder
from viewkit.naming import underscore
from viewkit.registry import ViewRegistry, get_registry

__all__ = ["View", "finalize_views"]


class _Missing:
    def __repr__(self):
        return "<missing>"


_MISSING: Any = _Missing()

_ATTRIBUTES = ("root", "format", "template", "layout")


class View:
    """Base class for views."""

    _viewkit_settings: Dict[str, Any] = {}

    def __init_subclass__(cls, **kwargs):
        declared = {key: kwargs.pop(key) for key in _ATTRIBUTES if key in kwargs}
        super().__init_subclass__(**kwargs)

        cls._viewkit_settings = {}
        for key, value in declared.items():
            getattr(cls, key)(value)

        cls.registry().register(cls)

    # --- accessors -------------------------------------------------------

    @classmethod
    def root(cls, value: Union[str, Path, None] = _MISSING) -> Path:
        """When a value is given, set the templates root for this view and
        its subclasses. Otherwise return it, defaulting to the registry root.

        The default is stored on the top-most view class of the hierarchy,
        so every class below it observes the same path.
        """
        if value is _MISSING or value is None:
            return cls._read_shared("root", lambda top: top.registry().root)
        if not isinstance(value, (str, os.PathLike)):
            raise InvalidViewConfigurationError(cls, "root", value, "a path")
        path = Path(value)
        cls._write("root", path)
        return path

    @classmethod
    def format(cls, value: Optional[str] = _MISSING) -> Optional[str]:
        """When a value is given, set the handled format. Otherwise return
        the previously set format, if any."""
        if value is _MISSING or value is None:
            return cls._read("format")
        if not isinstance(value, str):
            raise InvalidViewConfigurationError(cls, "format", value, "a string")
        cls._write("format", value)
        return value

    @classmethod
    def template(cls, value: Optional[str] = _MISSING) -> str:
        """When a value is given, set the template path for this view and
        its subclasses. Otherwise return it, defaulting to the underscored
        name of the top-most view class (``Articles.Show`` -> ``articles/show``).
        """
        if value is _MISSING or value is None:
            return cls._read_shared(
                "template", lambda top: underscore(top.registry().name_of(top))
            )
        if not isinstance(value, str):
            raise InvalidViewConfigurationError(cls, "template", value, "a string")
        cls._write("template", value)
        return value

    @classmethod
    def layout(cls, value: Union[str, bool, None] = _MISSING) -> Union[str, bool, None]:
        """When a value is given, set the layout; ``False`` means no layout.
        Otherwise return the layout: the declared one before load, the
        resolved one after load."""
        if value is _MISSING:
            return cls._read("layout")
        if not (value is None or value is False or isinstance(value, str)):
            raise InvalidViewConfigurationError(
                cls, "layout", value, "a string, None or False"
            )
        cls._write("layout", value)
        return value

    @classmethod
    def registry(cls) -> ViewRegistry:
        return get_registry()

    @classmethod
    def loaded(cls) -> bool:
        return "_viewkit_configuration" in cls.__dict__

    @classmethod
    def configuration(cls) -> ViewConfiguration:
        if cls.loaded():
            return cls.__dict__["_viewkit_configuration"]
        return cls._snapshot(cls.layout())

    # --- storage ---------------------------------------------------------

    @classmethod
    def _lookup(cls, key: str) -> Any:
        for klass in cls.__mro__:
            settings = klass.__dict__.get("_viewkit_settings")
            if settings and key in settings:
                return settings[key]
        return _MISSING

    @classmethod
    def _read(cls, key: str) -> Any:
        if cls.loaded():
            return getattr(cls.__dict__["_viewkit_configuration"], key)
        value = cls._lookup(key)
        return None if value is _MISSING else value

    @classmethod
    def _read_shared(cls, key: str, default: Callable[[type], Any]) -> Any:
        if cls.loaded():
            return getattr(cls.__dict__["_viewkit_configuration"], key)
        value = cls._lookup(key)
        if value is not _MISSING:
            return value

        top = cls._hierarchy_root()
        value = default(top)
        if top is not View:
            top._viewkit_settings[key] = value
        return value

    @classmethod
    def _write(cls, key: str, value: Any):
        if cls is View:
            raise TypeError("Configure a View subclass, not View itself")
        if cls.loaded():
            raise FrozenViewError(cls, key)
        cls._viewkit_settings[key] = value

    @classmethod
    def _hierarchy_root(cls) -> type:
        # Follow the first View base at each level; other View bases are mixins
        top = cls
        while True:
            parent = next(
                (base for base in top.__bases__ if issubclass(base, View)), View
            )
            if parent is View:
                return top
            top = parent

    @classmethod
    def _snapshot(cls, layout: Union[str, bool, None]) -> ViewConfiguration:
        return ViewConfiguration(
            name=cls.registry().name_of(cls),
            root=cls.root(),
            template=cls.template(),
            format=cls.format(),
            layout=layout,
        )

    @classmethod
    def _resolve(cls) -> ViewConfiguration:
        if cls.loaded():
            raise FrozenViewError(cls)
        return cls._snapshot(LayoutFinder(cls).find())


def finalize_views(registry: ViewRegistry, views: Sequence[type]):
    """Load hook: resolve and freeze the configuration of each view.

    Every view is resolved before any is frozen.
    """
    resolved = [(view_cls, view_cls._resolve()) for view_cls in views]

    for view_cls, configuration in resolved:
        view_cls._viewkit_configuration = configuration
        logging.debug(f"Loaded view {configuration.name}: {configuration.model_dump()}")
