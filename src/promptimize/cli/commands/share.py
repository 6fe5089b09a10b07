"""Share link CLI commands."""

import click

from ...core.exceptions import ClipboardError
from .common import console, get_core


@click.command()
@click.argument("chat_id")
@click.option("-c", "--copy", "copy_link", is_flag=True, help="Copy the link to the clipboard")
@click.pass_context
def share(ctx, chat_id, copy_link):
    """Print a share link for a chat.

    Example:

        promptimize share 3f2c... --copy
    """
    core = get_core(ctx)
    url = core.share_url(chat_id)
    if url is None:
        console.print(f"[red]Error:[/red] Chat '{chat_id}' not found")
        raise click.Abort()

    click.echo(url)

    if copy_link:
        try:
            core.copy(url)
            console.print("[green]Share link copied![/green]")
        except ClipboardError as e:
            console.print(f"[yellow]Failed to copy:[/yellow] {e.message}")


@click.command("open")
@click.argument("link")
@click.pass_context
def open_link(ctx, link):
    """Load a share link or token into history.

    Example:

        promptimize open "http://localhost:8000/?share=eyJ..."
    """
    chat = get_core(ctx).open_shared(link)
    if chat is None:
        console.print("[yellow]Nothing to load from that link.[/yellow]")
        return

    console.print(f"[bold]Prompt:[/bold] {chat.prompt}")
    click.echo(chat.improved)
