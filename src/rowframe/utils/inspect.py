"""Provide insights about Python objects."""

import inspect
from typing import Any


def get_qualname(obj: Any) -> str:
    """Get the qualified name of the given object.

    Will return the name of the object and the
    name of the module and class it belongs to.

    For functions or methods, this will return
    something like `module.class.method` or
    `module.function`. For other callable objects,
    like reducer instances, the name of their class.

    >>> class Reducer:
    ...   def __call__(self, values):
    ...     pass
    >>> get_qualname(Reducer())
    'rowframe.utils.inspect.Reducer'
    >>> get_qualname(max)
    'builtins.max'
    """
    module = getattr(inspect.getmodule(obj), "__name__", None) or "<unknown>"
    if inspect.ismethod(obj) or inspect.isfunction(obj) or inspect.isbuiltin(obj):
        owner = getattr(obj, "__self__", None)
        if owner is not None and not inspect.ismodule(owner):
            class_name = owner.__class__.__name__
            return f"{module}.{class_name}.{obj.__name__}"
        return f"{module}.{obj.__qualname__}"
    elif inspect.isclass(obj):
        return f"{module}.{obj.__name__}"
    elif inspect.ismodule(obj):
        return obj.__name__
    return f"{module}.{obj.__class__.__name__}"
