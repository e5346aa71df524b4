# src/larklang/parser/tracing.py
"""Indented BEGIN/END tracing of parse functions. Diagnostic only."""

import functools
import logging

from ..config import config

logger = logging.getLogger("larklang.parser.trace")

_INDENT = "\t"
_trace_level = 0


def _indent():
    return _INDENT * max(_trace_level - 1, 0)


def trace(msg):
    global _trace_level
    _trace_level += 1
    if config.trace_parser:
        logger.debug("%sBEGIN %s", _indent(), msg)
    return msg


def untrace(msg):
    global _trace_level
    if config.trace_parser:
        logger.debug("%sEND %s", _indent(), msg)
    _trace_level -= 1


def traced(name):
    """Decorator wrapping a parse method in trace/untrace."""
    def decorator(fn):
        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            untrace_msg = trace(name)
            try:
                return fn(*args, **kwargs)
            finally:
                untrace(untrace_msg)
        return wrapper
    return decorator
