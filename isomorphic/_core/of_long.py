from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, override, runtime_checkable

from isomorphic._core.common.arguments import require_callable
from isomorphic._core.common.log import debug
from isomorphic._core.isomorphism import Isomorphism

__all__ = ("LongIsomorphism", "SimpleLongIsomorphism")

type LongUnaryOperator = Callable[[int], int]


@runtime_checkable
class LongIsomorphism(Isomorphism[int, int], Protocol):
    """
    An isomorphism specialised for 64-bit `long` values.
    """

    __slots__ = ()

    @override
    def apply(self, value: int, /) -> int:
        return self.apply_as_long(value)

    @abstractmethod
    def apply_as_long(self, value: int, /) -> int:
        raise NotImplementedError

    @abstractmethod
    @override
    def inverse(self) -> LongIsomorphism:
        raise NotImplementedError

    @override
    def compose[A0](  # type: ignore[override]
        self,
        before: Isomorphism[A0, int],
        /,
    ) -> Isomorphism[A0, int]:
        if not isinstance(before, LongIsomorphism):
            return Isomorphism.compose(self, before)

        inverse = self.inverse()
        before_inverse = before.inverse()
        debug("Compose `%r` with `%r`.", self, before)
        return SimpleLongIsomorphism(
            lambda value: self.apply_as_long(before.apply_as_long(value)),
            lambda value: before_inverse.apply_as_long(inverse.apply_as_long(value)),
        )

    @override
    def and_then[C](  # type: ignore[override]
        self,
        after: Isomorphism[int, C],
        /,
    ) -> Isomorphism[int, C]:
        if not isinstance(after, LongIsomorphism):
            return Isomorphism.and_then(self, after)

        inverse = self.inverse()
        after_inverse = after.inverse()
        debug("Chain `%r` and then `%r`.", self, after)
        return SimpleLongIsomorphism(
            lambda value: after.apply_as_long(self.apply_as_long(value)),
            lambda value: inverse.apply_as_long(after_inverse.apply_as_long(value)),
        )

    @staticmethod
    def of(  # type: ignore[override]
        function: LongUnaryOperator,
        inverse: LongUnaryOperator,
        /,
    ) -> LongIsomorphism:
        """
        Creates an isomorphism from a pair of `long` operations, where `function` is
        the `apply_as_long` function and `inverse` is the `inverse` function.
        """

        return SimpleLongIsomorphism(
            require_callable(function, "function"),
            require_callable(inverse, "inverse"),
        )

    @staticmethod
    def identity() -> LongIsomorphism:  # type: ignore[override]
        return SimpleLongIsomorphism(_identity, _identity)


@dataclass(eq=False, frozen=True, slots=True)
class SimpleLongIsomorphism(LongIsomorphism):
    function: LongUnaryOperator
    inverse_function: LongUnaryOperator

    @override
    def apply_as_long(self, value: int, /) -> int:
        return self.function(value)

    @override
    def inverse(self) -> LongIsomorphism:
        return SimpleLongIsomorphism(self.inverse_function, self.function)


def _identity(value: int, /) -> int:
    return value
