"""Schema import resolution — resolves ``"module:attribute"`` strings to rule schemas."""

import importlib
from collections.abc import Mapping

from doz.outcome import Rule


def resolve_schema(import_string: str) -> Mapping[str, Rule]:
    """Resolve an import string to a mapping of field names to rules.

    Accepts ``"module:attribute"`` format. When the attribute portion
    is omitted, defaults to ``"schema"`` (e.g. ``"myapp"`` resolves to
    ``myapp.schema``).

    Supports factory functions: if the resolved object is callable and
    not a mapping, it will be called (assuming it builds the schema).

    Args:
        import_string: Dotted module path with optional ``:attribute``
            suffix (e.g. ``"myapp:USER"``, ``"myapp.schemas:build_user"``).

    Returns:
        The resolved schema.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a mapping of callables.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "schema"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, Mapping):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, Mapping):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a schema mapping"
        raise TypeError(msg)

    not_callable = sorted(str(field) for field, rule in obj.items() if not callable(rule))
    if not_callable:
        msg = f"{import_string!r} has non-callable rules for: {', '.join(not_callable)}"
        raise TypeError(msg)

    return obj
