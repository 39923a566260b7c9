__all__ = (
    "ArgumentError",
    "IntegerOverflowError",
    "IsomorphismError",
)


class IsomorphismError(Exception): ...


class ArgumentError(TypeError, IsomorphismError): ...


class IntegerOverflowError(OverflowError, IsomorphismError): ...
