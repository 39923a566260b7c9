from logging import Logger, getLogger
from typing import Final

logger: Final[Logger] = getLogger("isomorphic")


def debug(message: str, /, *args: object) -> None:
    logger.debug(message, *args)
