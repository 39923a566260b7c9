import itertools
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from decimal import Decimal
from functools import reduce
from statistics import mean
from timeit import timeit
from typing import Annotated, Any, ClassVar, Self

from tabulate import tabulate
from typer import Option, Typer

from isomorphic import IntIsomorphism, Isomorphism, LongIsomorphism
from isomorphic.exact import Width, decrement_exact, increment_exact


@dataclass(frozen=True, slots=True)
class Benchmark:
    x: Decimal
    y: Decimal

    @property
    def difference_rate(self) -> Decimal:
        return ((self.y - self.x) / self.x) * 100

    @classmethod
    def compare(
        cls,
        x: Callable[..., Any],
        y: Callable[..., Any],
        number: int = 1,
    ) -> Self:
        x = mean(cls._time_in_ns(x, number))
        y = mean(cls._time_in_ns(y, number))
        return cls(x, y)

    @staticmethod
    def _time_in_ns(callable_: Callable[..., Any], number: int) -> Iterator[Decimal]:
        for _ in range(number):
            delta = timeit(callable_, number=1)
            yield Decimal(delta) * (10**6)


@dataclass(frozen=True, slots=True)
class BenchmarkResult:
    title: str
    benchmark: Benchmark

    @property
    def row(self) -> tuple[str, str, str, str]:
        rate = self.benchmark.difference_rate
        return (
            self.title,
            f"{self.benchmark.x:.2f}μs",
            f"{self.benchmark.y:.2f}μs",
            f"{rate:.2f}% slower" if rate >= 0 else f"{abs(rate):.2f}% faster",
        )


@dataclass(frozen=True, slots=True)
class CompositionBenchmark:
    depth: int

    factories: ClassVar[dict[str, Callable[[], Isomorphism[int, int]]]] = {}

    def start(self, number: int = 1) -> Iterator[BenchmarkResult]:
        generic = self.__chain(
            Isomorphism.of(
                lambda value: increment_exact(value, width=Width.LONG),
                lambda value: decrement_exact(value, width=Width.LONG),
            )
        )

        for title, factory in self.factories.items():
            specialised = self.__chain(factory())

            forward = Benchmark.compare(
                lambda: generic.apply(7),
                lambda: specialised.apply(7),
                number,
            )
            yield BenchmarkResult(f"{title} (apply)", forward)

            generic_inverse = generic.inverse()
            specialised_inverse = specialised.inverse()
            backward = Benchmark.compare(
                lambda: generic_inverse.apply(7),
                lambda: specialised_inverse.apply(7),
                number,
            )
            yield BenchmarkResult(f"{title} (inverse)", backward)

    def __chain(self, isomorphism: Isomorphism[int, int]) -> Isomorphism[int, int]:
        return reduce(
            lambda chained, _: chained.and_then(isomorphism),
            range(self.depth - 1),
            isomorphism,
        )

    @classmethod
    def register(cls, wrapped: Callable[[], Any] = None, /, *, title: str):
        def decorator(wp):
            cls.factories[title] = wp
            return wp

        return decorator(wrapped) if wrapped else decorator


@CompositionBenchmark.register(title="IntIsomorphism")
def int_increment() -> IntIsomorphism:
    return IntIsomorphism.of(increment_exact, decrement_exact)


@CompositionBenchmark.register(title="LongIsomorphism")
def long_increment() -> LongIsomorphism:
    return LongIsomorphism.of(
        lambda value: increment_exact(value, width=Width.LONG),
        lambda value: decrement_exact(value, width=Width.LONG),
    )


cli = Typer()


@cli.command()
def main(
    number: Annotated[int, Option("--number", "-n", min=0)] = 1000,
    depth: Annotated[int, Option("--depth", "-d", min=1)] = 10,
):
    results = CompositionBenchmark(depth).start(number)
    headers = ("", "Generic Time (μs)", "Specialised Time (μs)", "Difference Rate (%)")
    data = (result.row for result in itertools.chain(results))
    table = tabulate(data, headers=headers)
    print(table)


if __name__ == "__main__":
    cli()
