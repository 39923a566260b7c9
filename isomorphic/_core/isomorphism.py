from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, override, runtime_checkable

from isomorphic._core.common.arguments import require_callable, require_instance
from isomorphic._core.common.invertible import Invertible
from isomorphic._core.common.log import debug

__all__ = ("Isomorphism", "SimpleIsomorphism")


@runtime_checkable
class Isomorphism[A, B](Invertible["Isomorphism[B, A]"], Protocol):
    """
    A function paired with its inverse.

    ```
    f: Isomorphism[int, str] = ...
    g: Isomorphism[str, int] = f.inverse()
    g(f(x)) == x == f(g(x))
    ```

    The pair is a caller contract: nothing checks that the inverse really
    undoes the function.
    """

    __slots__ = ()

    def __call__(self, value: A, /) -> B:
        return self.apply(value)

    @abstractmethod
    def apply(self, value: A, /) -> B:
        raise NotImplementedError

    @abstractmethod
    @override
    def inverse(self) -> Isomorphism[B, A]:
        raise NotImplementedError

    def compose[A0](self, before: Isomorphism[A0, A], /) -> Isomorphism[A0, B]:
        """
        Returns an isomorphism that first applies `before` to its input, and then
        applies this one to the result.
        """

        before = require_instance(before, Isomorphism, "before")
        inverse = self.inverse()
        before_inverse = before.inverse()
        debug("Compose `%r` with `%r`.", self, before)
        return SimpleIsomorphism(
            lambda value: self.apply(before.apply(value)),
            lambda value: before_inverse.apply(inverse.apply(value)),
        )

    def and_then[C](self, after: Isomorphism[B, C], /) -> Isomorphism[A, C]:
        """
        Returns an isomorphism that first applies this one to its input, and then
        applies `after` to the result.
        """

        after = require_instance(after, Isomorphism, "after")
        inverse = self.inverse()
        after_inverse = after.inverse()
        debug("Chain `%r` and then `%r`.", self, after)
        return SimpleIsomorphism(
            lambda value: after.apply(self.apply(value)),
            lambda value: inverse.apply(after_inverse.apply(value)),
        )

    @staticmethod
    def of[X, Y](
        function: Callable[[X], Y],
        inverse: Callable[[Y], X],
        /,
    ) -> Isomorphism[X, Y]:
        """
        Creates an isomorphism from a pair of functions, where `function` is the
        `apply` function and `inverse` is the `inverse` function.
        """

        return SimpleIsomorphism(
            require_callable(function, "function"),
            require_callable(inverse, "inverse"),
        )

    @staticmethod
    def identity[T]() -> Isomorphism[T, T]:
        return SimpleIsomorphism(_identity, _identity)


@dataclass(eq=False, frozen=True, slots=True)
class SimpleIsomorphism[A, B](Isomorphism[A, B]):
    function: Callable[[A], B]
    inverse_function: Callable[[B], A]

    @override
    def apply(self, value: A, /) -> B:
        return self.function(value)

    @override
    def inverse(self) -> Isomorphism[B, A]:
        return SimpleIsomorphism(self.inverse_function, self.function)


def _identity[T](value: T, /) -> T:
    return value
