"""Helpers shared by CLI commands."""

from typing import List

import click
from rich.console import Console
from rich.text import Text

from ... import Promptimize
from ...core.types import DiffToken

console = Console()


def get_core(ctx: click.Context) -> Promptimize:
    """The Promptimize instance created by the root command group."""
    return ctx.find_root().obj["core"]


def read_prompt(prompt, input_file) -> str:
    """Resolve a prompt from the argument, a file, or stdin."""
    if input_file:
        with open(input_file, encoding="utf-8") as f:
            return f.read()
    if not prompt:
        return click.get_text_stream("stdin").read()
    return prompt


def diff_text(tokens: List[DiffToken]) -> Text:
    """Render diff tokens with added words highlighted."""
    text = Text()
    for token in tokens:
        text.append(token.text, style="bold green" if token.added else None)
    return text
