import logging
from dataclasses import dataclass

from isomorphic import Isomorphism
from isomorphic._core.common.invertible import Invertible


@dataclass(frozen=True)
class Flag(Invertible["Flag"]):
    value: bool

    def inverse(self) -> "Flag":
        return Flag(not self.value)


class TestInvertible:
    def test_invert_with_success_return_inverse(self):
        assert ~Flag(True) == Flag(False)

    def test_isinstance_with_isomorphism_return_true(self, serialize):
        assert isinstance(serialize, Invertible)
        assert isinstance(~serialize, Isomorphism)


class TestLogging:
    def test_compose_with_debug_level_log_message(self, caplog, serialize):
        with caplog.at_level(logging.DEBUG, logger="isomorphic"):
            serialize.compose(Isomorphism.identity())

        assert [record.levelno for record in caplog.records] == [logging.DEBUG]
        assert caplog.records[0].name == "isomorphic"

    def test_apply_with_debug_level_log_nothing(self, caplog, serialize):
        composed = serialize.and_then(~serialize)
        caplog.clear()

        with caplog.at_level(logging.DEBUG, logger="isomorphic"):
            composed.apply(7)

        assert caplog.records == []
