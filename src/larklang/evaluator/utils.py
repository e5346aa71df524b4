# src/larklang/evaluator/utils.py
import logging

from ..config import config
from ..object import Error, NULL, TRUE, FALSE, native_bool_to_boolean

logger = logging.getLogger("larklang.evaluator")

__all__ = [
    "NULL", "TRUE", "FALSE", "native_bool_to_boolean",
    "is_error", "new_error", "is_truthy", "debug_log",
]


def is_error(obj):
    return isinstance(obj, Error)


def new_error(message, *args):
    return Error(message % args if args else message)


def is_truthy(obj):
    """Branch truthiness: only null and false are falsy (0 is truthy)."""
    if obj is NULL or obj is FALSE:
        return False
    return True


def debug_log(message, data=None, level="debug"):
    """Conditional debug logging that respects the runtime config."""
    if not config.should_log(level):
        return

    log_level = logging.getLevelName(level.upper())
    if data is not None:
        logger.log(log_level, "%s: %s", message, data)
    else:
        logger.log(log_level, "%s", message)
