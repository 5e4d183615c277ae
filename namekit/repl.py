#!/usr/bin/env python3
"""
Interactive Session
===================
Rich-based terminal loop around the name generator.

Each round prints one freshly generated name and waits for a line of
input. An empty line (just ENTER) generates another name; any other text,
or end of input, ends the session.

Usage:
    from namekit.repl import NameREPL

    exit_code = NameREPL().run()
"""

from functools import partial
from typing import Callable, List, Optional, TextIO

from rich.console import Console
from rich.markup import escape

from namekit.generators import NameRandom, generate_name
from namekit.settings import require_setting


class NameREPL:
    """
    Generate-and-ask loop.

    Parameters
    ----------
    console : Console, optional
        Where output goes. Defaults to a fresh rich Console on stdout.
    generate : callable, optional
        Zero-argument callable returning a name. Defaults to generate_name
        bound to rng.
    rng : NameRandom, optional
        Random source for the default generator.
    stream : file-like, optional
        Read input lines from here instead of stdin.
    """

    def __init__(self,
                 console: Console = None,
                 generate: Callable[[], str] = None,
                 rng: NameRandom = None,
                 stream: Optional[TextIO] = None):
        self.console = console or Console()
        self._generate = generate or partial(generate_name, rng)
        self._stream = stream

        self._result_label = require_setting('repl.result_label')
        self._separator = require_setting('repl.separator')
        self._instructions: List[str] = list(require_setting('repl.instructions'))
        self._prompt = require_setting('repl.prompt')
        self._farewell = require_setting('repl.farewell')

        self.rounds = 0

    def run(self) -> int:
        """Run the session until the user leaves. Returns the exit code."""
        while True:
            self.show_name(self._generate())
            self.rounds += 1
            if not self.ask_again():
                break
        self.console.print(f"\n{escape(self._farewell)}")
        return 0

    def show_name(self, name: str) -> None:
        self.console.print(
            f"\n\t{escape(self._result_label)}: [bold cyan]{escape(name.capitalize())}[/bold cyan]"
        )
        self.console.print(f"\n\n{escape(self._separator)}")

    def ask_again(self) -> bool:
        """Print the instructions and read a line. True means go again."""
        self.console.print()
        for line in self._instructions:
            self.console.print(escape(line))
        line = self._read_line()
        return line is not None and line == ""

    def _read_line(self) -> Optional[str]:
        try:
            line = self.console.input(escape(self._prompt), stream=self._stream)
        except EOFError:
            return None
        if self._stream is not None and not line:
            # readline() returns '' only at end of input
            return None
        return line.rstrip("\r\n")


def run_repl(rng: NameRandom = None, console: Console = None) -> int:
    """Start an interactive session on the terminal."""
    return NameREPL(console=console, rng=rng).run()


__all__ = [
    'NameREPL',
    'run_repl',
]
