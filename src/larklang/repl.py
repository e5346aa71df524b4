# src/larklang/repl.py
import logging

from rich.console import Console
from rich.text import Text

from .environment import Environment
from .errors import ParseFailure
from .evaluator import Evaluator, is_error
from .interpreter import run_source

logger = logging.getLogger("larklang.repl")

PROMPT = ">> "
EXIT_COMMANDS = ("exit", "quit")


class Repl:
    """Read-eval-print loop sharing one environment across inputs."""

    def __init__(self, console=None, prompt=PROMPT):
        self.console = console or Console()
        self.prompt = prompt
        self.env = Environment()
        self.evaluator = Evaluator()

    def eval_line(self, line):
        """Evaluate one input and print its outcome. Returns the result Object or None."""
        try:
            result = run_source(line, env=self.env, evaluator=self.evaluator)
        except ParseFailure as e:
            for msg in e.errors:
                self.console.print(Text("\t" + msg, style="red"))
            return None
        except RecursionError:
            logger.debug("recursion limit hit while evaluating %r", line)
            self.console.print(Text("ERROR: maximum recursion depth exceeded", style="bold red"))
            return None

        if result is None:
            return None

        if is_error(result):
            self.console.print(Text(result.inspect(), style="bold red"))
        else:
            self.console.print(Text(result.inspect(), style="green"))
        return result

    def run(self):
        self.console.print("[bold green]Lark REPL[/bold green]")
        self.console.print("Type 'exit' to quit\n")

        while True:
            try:
                line = self.console.input(Text(self.prompt, style="bold blue"))
            except (EOFError, KeyboardInterrupt):
                self.console.print("\nGoodbye!")
                break

            if line.strip() in EXIT_COMMANDS:
                break
            if not line.strip():
                continue

            self.eval_line(line)


def start(console=None):
    Repl(console=console).run()
