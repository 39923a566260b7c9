from abc import abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class Invertible[T](Protocol):
    __slots__ = ()

    @abstractmethod
    def inverse(self) -> T:
        raise NotImplementedError

    def __invert__(self) -> T:
        return self.inverse()
