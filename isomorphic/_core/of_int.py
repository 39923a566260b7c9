from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, override, runtime_checkable

from isomorphic._core.common.arguments import require_callable
from isomorphic._core.common.log import debug
from isomorphic._core.isomorphism import Isomorphism

__all__ = ("IntIsomorphism", "SimpleIntIsomorphism")

type IntUnaryOperator = Callable[[int], int]


@runtime_checkable
class IntIsomorphism(Isomorphism[int, int], Protocol):
    """
    An isomorphism specialised for 32-bit `int` values.
    """

    __slots__ = ()

    @override
    def apply(self, value: int, /) -> int:
        return self.apply_as_int(value)

    @abstractmethod
    def apply_as_int(self, value: int, /) -> int:
        raise NotImplementedError

    @abstractmethod
    @override
    def inverse(self) -> IntIsomorphism:
        raise NotImplementedError

    @override
    def compose[A0](  # type: ignore[override]
        self,
        before: Isomorphism[A0, int],
        /,
    ) -> Isomorphism[A0, int]:
        if not isinstance(before, IntIsomorphism):
            return Isomorphism.compose(self, before)

        inverse = self.inverse()
        before_inverse = before.inverse()
        debug("Compose `%r` with `%r`.", self, before)
        return SimpleIntIsomorphism(
            lambda value: self.apply_as_int(before.apply_as_int(value)),
            lambda value: before_inverse.apply_as_int(inverse.apply_as_int(value)),
        )

    @override
    def and_then[C](  # type: ignore[override]
        self,
        after: Isomorphism[int, C],
        /,
    ) -> Isomorphism[int, C]:
        if not isinstance(after, IntIsomorphism):
            return Isomorphism.and_then(self, after)

        inverse = self.inverse()
        after_inverse = after.inverse()
        debug("Chain `%r` and then `%r`.", self, after)
        return SimpleIntIsomorphism(
            lambda value: after.apply_as_int(self.apply_as_int(value)),
            lambda value: inverse.apply_as_int(after_inverse.apply_as_int(value)),
        )

    @staticmethod
    def of(  # type: ignore[override]
        function: IntUnaryOperator,
        inverse: IntUnaryOperator,
        /,
    ) -> IntIsomorphism:
        """
        Creates an isomorphism from a pair of `int` operations, where `function` is
        the `apply_as_int` function and `inverse` is the `inverse` function.
        """

        return SimpleIntIsomorphism(
            require_callable(function, "function"),
            require_callable(inverse, "inverse"),
        )

    @staticmethod
    def identity() -> IntIsomorphism:  # type: ignore[override]
        return SimpleIntIsomorphism(_identity, _identity)


@dataclass(eq=False, frozen=True, slots=True)
class SimpleIntIsomorphism(IntIsomorphism):
    function: IntUnaryOperator
    inverse_function: IntUnaryOperator

    @override
    def apply_as_int(self, value: int, /) -> int:
        return self.function(value)

    @override
    def inverse(self) -> IntIsomorphism:
        return SimpleIntIsomorphism(self.inverse_function, self.function)


def _identity(value: int, /) -> int:
    return value
