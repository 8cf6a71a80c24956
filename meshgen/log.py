"""
Логирование meshgen поверх logger'а "meshgen".

    from meshgen import log

    log.debug("[primitives] built")
    log.error(exc, "[MeshSettings] Failed to load settings")  # with traceback
"""

import logging
import traceback

_logger = logging.getLogger("meshgen")


def debug(msg: str):
    _logger.debug(msg)


def info(msg: str):
    _logger.info(msg)


def warn(msg: str):
    _logger.warning(msg)


def error(msg_or_exc, context: str = ""):
    """Log error message, or exception with context and traceback."""
    if not isinstance(msg_or_exc, BaseException):
        _logger.error(str(msg_or_exc))
        return

    exc = msg_or_exc
    tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    prefix = f"{context}: " if context else ""
    _logger.error(f"{prefix}{type(exc).__name__}: {exc}\n{tb}")


def set_level(level):
    """Set level by name ("DEBUG", "warning", ...) or numeric value."""
    if isinstance(level, str):
        numeric = logging.getLevelName(level.upper())
        if not isinstance(numeric, int):
            raise ValueError(f"Unknown log level: {level}")
        level = numeric
    _logger.setLevel(level)


def get_level() -> int:
    return _logger.getEffectiveLevel()
