from fractions import Fraction

from isomorphic import Isomorphism

__all__ = ("celsius_to_fahrenheit", "celsius_to_kelvin", "kelvin_to_fahrenheit")

_ABSOLUTE_ZERO = Fraction("273.15")

celsius_to_kelvin: Isomorphism[Fraction, Fraction] = Isomorphism.of(
    lambda celsius: celsius + _ABSOLUTE_ZERO,
    lambda kelvin: kelvin - _ABSOLUTE_ZERO,
)

celsius_to_fahrenheit: Isomorphism[Fraction, Fraction] = Isomorphism.of(
    lambda celsius: celsius * Fraction(9, 5) + 32,
    lambda fahrenheit: (fahrenheit - 32) * Fraction(5, 9),
)

kelvin_to_fahrenheit = celsius_to_kelvin.inverse().and_then(celsius_to_fahrenheit)
