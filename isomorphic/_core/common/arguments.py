from collections.abc import Callable
from typing import Any

from isomorphic.exceptions import ArgumentError


def require_callable[F: Callable[..., Any]](function: F | None, name: str, /) -> F:
    if function is None:
        raise ArgumentError(f"`{name}` is required.")

    if not callable(function):
        raise ArgumentError(f"`{name}` should be callable, got `{function!r}`.")

    return function


def require_instance[T](obj: T | None, cls: type[T], name: str, /) -> T:
    if obj is None:
        raise ArgumentError(f"`{name}` is required.")

    if not isinstance(obj, cls):
        raise ArgumentError(
            f"`{name}` should be an instance of `{cls.__name__}`, got `{obj!r}`."
        )

    return obj
