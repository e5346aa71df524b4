#!/usr/bin/env python3
"""
Runner for a source checkout - forwards to the CLI
"""

import sys
import os

# Add the src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from larklang.cli.main import cli

if __name__ == "__main__":
    # If no arguments, start the REPL
    if len(sys.argv) == 1:
        sys.argv.append('repl')

    # Support: main.py script.lk -> lk run script.lk
    if len(sys.argv) == 2 and sys.argv[1].endswith('.lk'):
        sys.argv.insert(1, 'run')

    cli()
