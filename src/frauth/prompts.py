"""
Console interaction used by the init wizard. Tests swap in a scripted Prompter.
"""
from typing import Optional, Protocol

from rich.console import Console
from rich.prompt import Confirm
from rich.text import Text

from frauth.errors import InteractionError


class Prompter(Protocol):
    def confirm(self, prompt: str, default: bool = True) -> bool: ...

    def read_line(self, prompt: str) -> str: ...

    def say(self, message: str = '') -> None: ...

    def warn(self, message: str) -> None: ...


class ConsolePrompter:
    """Prompter backed by rich on the terminal.

    Prompts are plain Text, never markup: they can contain what the user typed.
    """
    def __init__(self, console: Optional[Console] = None, err_console: Optional[Console] = None):
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def confirm(self, prompt: str, default: bool = True) -> bool:
        try:
            return Confirm.ask(Text(prompt), default=default, console=self.console)
        except (EOFError, KeyboardInterrupt) as e:
            raise InteractionError(f"No answer to {prompt!r}") from e

    def read_line(self, prompt: str) -> str:
        """Raw line, untrimmed."""
        try:
            return self.console.input(Text(prompt) + ': ')
        except (EOFError, KeyboardInterrupt) as e:
            raise InteractionError(f"No answer to {prompt!r}") from e

    def say(self, message: str = '') -> None:
        self.console.print(message, markup=False, highlight=False)

    def warn(self, message: str) -> None:
        self.err_console.print(f"Warning! {message}", style='bold yellow', markup=False, highlight=False)
