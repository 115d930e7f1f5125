"""Interactive prompts for composing commit messages."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from rich.console import Console
from rich.prompt import Prompt

from gover.core.compose import DEFAULT_WRAP_WIDTH, wrap_text


class Selectable(Protocol):
    """An item offered in a selection prompt."""

    @property
    def field(self) -> str: ...

    @property
    def doc(self) -> str: ...


def select(name: str, options: Sequence[Selectable], console: Console) -> str:
    """Ask the user to pick one of ``options``.

    Args:
        name: Label shown before the choices
        options: Items to choose from
        console: Console to prompt on

    Returns:
        The ``field`` of the selected option
    """
    console.print(f"[bold]{name}[/]")
    for option in options:
        help_text = f" [dim]({option.doc})[/]" if option.doc else ""
        console.print(f"  [cyan]{option.field}[/]{help_text}")

    choices = [option.field for option in options]
    return Prompt.ask(name, choices=choices, show_choices=False, console=console)


def text_input(
    name: str,
    required: bool,
    console: Console,
    width: int = DEFAULT_WRAP_WIDTH,
) -> str:
    """Ask the user for free text.

    Required inputs are asked again until a non-empty answer is given. The
    answer is wrapped at ``width`` columns.
    """
    while True:
        answer = Prompt.ask(name, default="", show_default=False, console=console)
        if answer or not required:
            return wrap_text(answer, width)
        console.print("[red]required[/]")
