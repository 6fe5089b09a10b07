"""Improvement and analysis CLI commands."""

import asyncio
import click
from rich.panel import Panel
from rich.table import Table

from ...core.exceptions import ClipboardError, EmptyInputError
from .common import console, get_core, read_prompt, diff_text


@click.command()
@click.argument("prompt", required=False)
@click.option("-f", "--file", "input_file", type=click.Path(exists=True), help="Read prompt from file")
@click.option("-c", "--copy", "copy_result", is_flag=True, help="Copy the improved prompt to the clipboard")
@click.option("--no-delay", is_flag=True, help="Skip the simulated latency")
@click.option("-v", "--verbose", is_flag=True, help="Show analysis and applied rules")
@click.pass_context
def improve(ctx, prompt, input_file, copy_result, no_delay, verbose):
    """Improve a prompt and record it in history.

    Improving the same prompt twice in a row adds a new version to the
    latest chat instead of creating another one.

    Examples:

        promptimize improve "Write a poem about autumn"

        promptimize improve -f prompt.txt --copy -v
    """
    core = get_core(ctx)
    prompt = read_prompt(prompt, input_file)
    if no_delay:
        core.enhancer.config.delay = 0.0

    try:
        with console.status("[bold green]Improving..."):
            result = asyncio.run(core.improve(prompt))
    except EmptyInputError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise click.Abort()

    if verbose:
        console.print(Panel(result.improved_prompt, title="Improved Prompt"))
    else:
        click.echo(result.improved_prompt)

    if copy_result:
        try:
            core.copy(result.improved_prompt)
            console.print("[green]Copied to clipboard![/green]")
        except ClipboardError as e:
            console.print(f"[yellow]Failed to copy:[/yellow] {e.message}")

    if verbose:
        table = Table(title="Improvement Results")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("Chat", result.chat.id)
        table.add_row("Version", str(len(result.chat.versions)))
        table.add_row("Rules Applied", ", ".join(result.applied_rules) or "None")
        table.add_row("Input Score", f"{result.analysis.score}/10")

        console.print(table)


@click.command()
@click.argument("prompt", required=False)
@click.option("-f", "--file", "input_file", type=click.Path(exists=True), help="Read prompt from file")
@click.pass_context
def analyze(ctx, prompt, input_file):
    """Score a prompt without modifying it.

    Example:

        promptimize analyze "Write a poem"
    """
    core = get_core(ctx)
    result = core.analyze(read_prompt(prompt, input_file) or "")

    console.print(f"\n[bold]Score:[/bold] {result.score}/10 ({result.percent}%)")

    if result.suggestions:
        console.print("\n[bold]Suggestions:[/bold]")
        for suggestion in result.suggestions:
            console.print(f"  - {suggestion}")


@click.command()
@click.argument("original")
@click.argument("improved")
@click.pass_context
def diff(ctx, original, improved):
    """Highlight the words IMPROVED adds to ORIGINAL.

    Example:

        promptimize diff "hello world" "hello there world"
    """
    core = get_core(ctx)
    console.print(diff_text(core.diff(original, improved)))
