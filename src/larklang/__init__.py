# src/larklang/__init__.py
"""Lark: a small dynamically-typed scripting language with a tree-walking evaluator."""

__version__ = "0.1.0"
