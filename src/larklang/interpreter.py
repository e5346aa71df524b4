# src/larklang/interpreter.py
"""
Glue between source text and the evaluator.

``parse_source`` turns text into a ``Program`` (raising ``ParseFailure`` when
the parser reports errors); ``run_source`` parses and evaluates in a given
environment. The CLI and REPL are both built on these two helpers.
"""

import logging
from pathlib import Path

from .environment import Environment
from .errors import ParseFailure, SourceReadError
from .evaluator import Evaluator
from .lexer import Lexer
from .parser import Parser

logger = logging.getLogger("larklang.interpreter")


def parse_source(source_code, filename="<stdin>"):
    parser = Parser(Lexer(source_code, filename=filename))
    program = parser.parse_program()
    if parser.errors:
        logger.debug("%s: %d parser error(s)", filename, len(parser.errors))
        raise ParseFailure(parser.errors)
    return program


def run_source(source_code, env=None, evaluator=None, filename="<stdin>"):
    """Parse and evaluate; returns the result Object, an Error, or None."""
    program = parse_source(source_code, filename=filename)
    env = env if env is not None else Environment()
    evaluator = evaluator or Evaluator()
    return evaluator.eval_node(program, env)


def read_source(path):
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(path, e) from e
