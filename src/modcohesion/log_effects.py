"""
Logging effect ADTs and their interpreter.

The rule engine never logs. The analyzer describes what should be logged as
immutable :class:`LogMessage` values, and :class:`LoggingInterpreter` emits
them through the standard logging module at the host boundary.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, assert_never

from modcohesion.result import Failure, Result, Success


@dataclass(frozen=True)
class LogMessage:
    """Request to emit a log message.

    Attributes:
        kind: Discriminator for pattern matching. Always "LogMessage".
        level: Log level to emit.
        message: Log message payload.
        logger_name: Logger name to use; the interpreter default when empty.
    """

    kind: Literal["LogMessage"] = "LogMessage"
    level: Literal["debug", "info", "warning", "error"] = "info"
    message: str = ""
    logger_name: str = ""


@dataclass(frozen=True)
class LoggingError:
    """Emitting a log record failed (e.g. a handler raised)."""

    message: str
    logger_name: str
    kind: Literal["LoggingError"] = "LoggingError"


class LoggingInterpreter:
    """Emits :class:`LogMessage` effects via the standard logging module."""

    def __init__(self, default_logger_name: str = "modcohesion") -> None:
        self._default_logger_name = default_logger_name

    def interpret(self, effect: LogMessage) -> Result[None, LoggingError]:
        logger_name = effect.logger_name or self._default_logger_name
        logger = logging.getLogger(logger_name)

        try:
            match effect.level:
                case "debug":
                    logger.debug(effect.message)
                case "info":
                    logger.info(effect.message)
                case "warning":
                    logger.warning(effect.message)
                case "error":
                    logger.error(effect.message)
                case _ as unreachable:
                    assert_never(unreachable)
            return Success(None)
        except Exception as exc:
            return Failure(LoggingError(message=str(exc), logger_name=logger_name))


__all__ = ["LogMessage", "LoggingError", "LoggingInterpreter"]
