import logging
from functools import partial

import pytest

from isomorphic import IntIsomorphism, Isomorphism, LongIsomorphism
from isomorphic.exact import Width, decrement_exact, increment_exact, negate_exact

logging.basicConfig(level=logging.DEBUG)


@pytest.fixture(scope="session")
def serialize() -> Isomorphism[int, str]:
    return Isomorphism.of(str, int)


@pytest.fixture(scope="session")
def increment() -> IntIsomorphism:
    return IntIsomorphism.of(increment_exact, decrement_exact)


@pytest.fixture(scope="session")
def negate() -> IntIsomorphism:
    return IntIsomorphism.of(negate_exact, negate_exact)


@pytest.fixture(scope="session")
def long_increment() -> LongIsomorphism:
    return LongIsomorphism.of(
        partial(increment_exact, width=Width.LONG),
        partial(decrement_exact, width=Width.LONG),
    )


@pytest.fixture(scope="session")
def long_negate() -> LongIsomorphism:
    negate = partial(negate_exact, width=Width.LONG)
    return LongIsomorphism.of(negate, negate)
