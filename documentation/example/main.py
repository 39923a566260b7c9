from fractions import Fraction

from sources.tokens import text_to_token
from sources.temperature import kelvin_to_fahrenheit


def main():
    fahrenheit = kelvin_to_fahrenheit(Fraction(300))
    print("300 K:", f"{float(fahrenheit):.2f} °F", sep=" ")

    token = text_to_token("root")
    print("Token:", token, "->", (~text_to_token)(token), sep=" ")


if __name__ == "__main__":
    main()
