"""Prompt surfaces: where consent prompts are rendered and answered."""

import sys
from typing import Protocol
from typing import TextIO
from typing import runtime_checkable

from rich.console import Console
from rich.console import RenderableType


@runtime_checkable
class PromptSurface(Protocol):
    """Interface for rendering a request and reading the operator's answer.

    The terminal implementation is ``ConsolePromptSurface``; tests provide
    scripted surfaces.
    """

    def show(self, renderable: RenderableType) -> None:
        """Print a line of text or a Rich renderable, followed by a newline."""
        ...

    def write(self, text: str) -> None:
        """Write ``text`` verbatim with no trailing newline and flush."""
        ...

    def read_line(self) -> str:
        """Block until one line is available and return it.

        Returns:
            The line including its line terminator, or "" at end of input.
        """
        ...


class ConsolePromptSurface:
    """Terminal prompt surface backed by a Rich console and stdin."""

    def __init__(self, console: Console, stdin: TextIO | None = None):
        self.console = console
        self._stdin = stdin

    def show(self, renderable: RenderableType) -> None:
        self.console.print(renderable)

    def write(self, text: str) -> None:
        # Prompt text contains "[y/N]", which must not be read as markup
        self.console.print(text, end="", markup=False, highlight=False)
        self.console.file.flush()

    def read_line(self) -> str:
        stdin = self._stdin if self._stdin is not None else sys.stdin
        return stdin.readline()


__all__ = ["ConsolePromptSurface", "PromptSurface"]
