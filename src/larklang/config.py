# src/larklang/config.py
"""
Runtime configuration for the Lark interpreter.

A single module-level ``config`` object is shared by the evaluator, the
parser tracer and the CLI. Values come from the environment at import time
and may be overridden afterwards (the CLI does this for ``--debug`` and
``--trace``).

Environment variables:

- ``LARK_DEBUG``: enable evaluator debug logging (``1``/``true``/``yes``)
- ``LARK_TRACE``: enable parser tracing
- ``LARK_LOG_LEVEL``: ``debug``, ``info``, ``warning`` or ``error``
"""

import logging
import os

_TRUTHY = {"1", "true", "yes", "on"}

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class Config:
    def __init__(self):
        self.enable_debug_logs = False
        self.trace_parser = False
        self.log_level = "warning"

    def load_from_env(self, environ=None):
        environ = os.environ if environ is None else environ
        self.enable_debug_logs = environ.get("LARK_DEBUG", "").strip().lower() in _TRUTHY
        self.trace_parser = environ.get("LARK_TRACE", "").strip().lower() in _TRUTHY

        level = environ.get("LARK_LOG_LEVEL", "").strip().lower()
        if level in _LEVELS:
            self.log_level = level
        elif self.enable_debug_logs:
            self.log_level = "debug"
        return self

    def should_log(self, level="debug"):
        """True when a message at ``level`` passes the configured threshold."""
        if level == "debug" and not self.enable_debug_logs:
            return False
        return _LEVELS.get(level, logging.DEBUG) >= _LEVELS.get(self.log_level, logging.WARNING)

    @property
    def logging_level(self):
        return _LEVELS.get(self.log_level, logging.WARNING)


config = Config().load_from_env()
