"""Naming conventions that map view classes to template paths."""
from __future__ import annotations

import re
from typing import Optional

__all__ = ["underscore", "view_name"]

_NAMESPACE_SEPARATORS = ("::", ".")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z\d]+)([A-Z][a-z])")
_CAMEL_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")
_WORD_SEPARATORS = re.compile(r"[\s\-]")
_LOCALS_MARKER = "<locals>."
_SCRIPT_MODULE = "__main__"


def underscore(name: str) -> str:
    """Return the underscored path form of a (possibly namespaced) class name.

    Examples:
    • "Articles.Show"       -> "articles/show"
    • "Articles::JsonShow"  -> "articles/json_show"
    • "HTTPStatus"          -> "http_status"
    """
    result = name
    for separator in _NAMESPACE_SEPARATORS:
        result = result.replace(separator, "/")

    result = _ACRONYM_BOUNDARY.sub(r"\1_\2", result)
    result = _CAMEL_BOUNDARY.sub(r"\1_\2", result)
    result = _WORD_SEPARATORS.sub("_", result)
    return result.lower()


def _module_path(module: str, namespace: Optional[str]) -> str:
    if module == _SCRIPT_MODULE:
        return ""
    if namespace:
        if module == namespace:
            return ""
        if module.startswith(namespace + "."):
            return module[len(namespace) + 1 :]
    return module


def view_name(view_cls: type, namespace: Optional[str] = None) -> str:
    """Return the fully qualified name of a view class.

    The name is the module path plus the class's qualified name. A module
    prefix equal to `namespace` is dropped, as are function scopes:
    `app.views.articles.Show` with namespace "app.views" is "articles.Show".
    """
    qualname = view_cls.__qualname__.rsplit(_LOCALS_MARKER, 1)[-1]
    module = _module_path(view_cls.__module__, namespace)
    return f"{module}.{qualname}" if module else qualname
