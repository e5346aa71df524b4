# src/larklang/parser/__init__.py
"""
Parser module for the Lark language.
"""

from .parser import Parser, precedences

__all__ = ["Parser", "precedences"]
