from ._core.isomorphism import Isomorphism
from ._core.of_int import IntIsomorphism
from ._core.of_long import LongIsomorphism

__all__ = (
    "IntIsomorphism",
    "Isomorphism",
    "LongIsomorphism",
    "identity",
    "isomorphism",
)

identity = Isomorphism.identity
isomorphism = Isomorphism.of
