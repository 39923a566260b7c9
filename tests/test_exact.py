import pytest

from isomorphic.exact import (
    Width,
    add_exact,
    decrement_exact,
    increment_exact,
    negate_exact,
    subtract_exact,
    to_int_exact,
)
from isomorphic.exceptions import IntegerOverflowError, IsomorphismError


class TestWidth:
    def test_bounds_with_int_return_32_bit_range(self):
        assert Width.INT.min_value == -(2**31)
        assert Width.INT.max_value == 2**31 - 1

    def test_bounds_with_long_return_64_bit_range(self):
        assert Width.LONG.min_value == -(2**63)
        assert Width.LONG.max_value == 2**63 - 1

    def test_contains_with_edges_return_bool(self):
        assert Width.INT.contains(Width.INT.max_value)
        assert not Width.INT.contains(Width.INT.max_value + 1)
        assert Width.LONG.contains(Width.INT.max_value + 1)


class TestExact:
    @pytest.mark.parametrize("width", tuple(Width))
    def test_increment_exact_with_max_value_raise_overflow_error(self, width):
        with pytest.raises(OverflowError):
            increment_exact(width.max_value, width=width)

    @pytest.mark.parametrize("width", tuple(Width))
    def test_decrement_exact_with_min_value_raise_overflow_error(self, width):
        with pytest.raises(OverflowError):
            decrement_exact(width.min_value, width=width)

    @pytest.mark.parametrize("width", tuple(Width))
    def test_negate_exact_with_min_value_raise_overflow_error(self, width):
        with pytest.raises(IntegerOverflowError):
            negate_exact(width.min_value, width=width)

    def test_negate_exact_with_max_value_return_negated(self):
        assert negate_exact(Width.INT.max_value) == Width.INT.min_value + 1

    def test_add_exact_with_success_return_sum(self):
        assert add_exact(2, 3) == 5
        assert subtract_exact(2, 3) == -1

    def test_add_exact_with_overflow_raise_isomorphism_error(self):
        with pytest.raises(IsomorphismError, match="integer overflow"):
            add_exact(Width.INT.max_value, 1)

        with pytest.raises(IsomorphismError, match="long overflow"):
            subtract_exact(Width.LONG.min_value, 1, width=Width.LONG)

    def test_to_int_exact_with_long_value_raise_overflow_error(self):
        assert to_int_exact(-7) == -7

        with pytest.raises(IntegerOverflowError):
            to_int_exact(Width.INT.max_value + 1)
