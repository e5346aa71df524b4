# src/larklang/errors.py
"""
Host-level exceptions.

Language errors (type mismatch, unknown identifier, ...) are never raised;
they travel through the evaluator as ``object.Error`` values. The exceptions
here cover failures around the interpreter: reading scripts and rejecting
programs that did not parse.
"""


class LarkError(Exception):
    """Base class for interpreter host errors."""


class SourceReadError(LarkError):
    """Raised when a script file cannot be read."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read '{path}': {reason}")


class ParseFailure(LarkError):
    """Raised when a program has parser errors and cannot be evaluated."""

    def __init__(self, errors):
        self.errors = list(errors)
        count = len(self.errors)
        super().__init__(f"{count} parser error{'s' if count != 1 else ''}")
