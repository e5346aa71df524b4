"""
Pytest configuration for Lark tests.
"""
import sys
import os

import pytest

# Make `import larklang` work from a source checkout (src/ on sys.path)
_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
_SRC_DIR = os.path.join(_ROOT, 'src')

if _SRC_DIR not in sys.path:
	sys.path.insert(0, _SRC_DIR)

from larklang.config import config


@pytest.fixture(autouse=True)
def _reset_config():
	"""CLI flags mutate the shared config; restore it after every test."""
	saved = dict(vars(config))
	yield
	vars(config).clear()
	vars(config).update(saved)
