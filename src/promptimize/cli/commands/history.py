"""History CLI commands."""

from datetime import datetime

import click
from rich.panel import Panel
from rich.table import Table

from .common import console, get_core, diff_text


def _timestamp(ms: int) -> str:
    return datetime.fromtimestamp(ms / 1000).strftime("%Y-%m-%d %H:%M")


@click.group()
def history():
    """Browse and edit the chat history."""
    pass


@history.command("list")
@click.option("--favorites", is_flag=True, help="Only show favorited chats")
@click.pass_context
def list_chats(ctx, favorites):
    """List chats, most recent first."""
    core = get_core(ctx)
    chats = core.favorites() if favorites else core.history

    if not chats:
        if favorites:
            console.print("[dim]No favourites yet. Use 'history favorite ID' to save one.[/dim]")
        else:
            console.print("[dim]No recent chats yet.[/dim]")
        return

    table = Table(title="Favourites" if favorites else "Recent Chats")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Prompt", overflow="ellipsis", max_width=40)
    table.add_column("Improved", overflow="ellipsis", max_width=40)
    table.add_column("Versions", justify="right")
    table.add_column("Fav", justify="center")
    table.add_column("Updated", style="dim")

    for chat in chats:
        table.add_row(
            chat.id,
            chat.prompt,
            chat.improved,
            str(len(chat.versions)),
            "[red]♥[/red]" if chat.favorited else "",
            _timestamp(chat.created_at),
        )

    console.print(table)


@history.command()
@click.argument("chat_id")
@click.pass_context
def favorite(ctx, chat_id):
    """Favourite or unfavourite a chat."""
    chat = get_core(ctx).toggle_favorite(chat_id)
    if chat is None:
        console.print(f"[red]Error:[/red] Chat '{chat_id}' not found")
        raise click.Abort()
    state = "Favourited" if chat.favorited else "Unfavourited"
    console.print(f"[green]{state}:[/green] {chat.prompt}")


@history.command()
@click.argument("chat_id")
@click.pass_context
def delete(ctx, chat_id):
    """Delete a chat."""
    if get_core(ctx).delete_chat(chat_id):
        console.print("[green]Chat deleted[/green]")
    else:
        console.print(f"[yellow]No chat with id '{chat_id}'[/yellow]")


@history.command()
@click.argument("chat_id")
@click.pass_context
def versions(ctx, chat_id):
    """Show every improvement of a chat, diffed against its prompt."""
    core = get_core(ctx)
    chat = core.get_chat(chat_id)
    if chat is None:
        console.print(f"[red]Error:[/red] Chat '{chat_id}' not found")
        raise click.Abort()

    console.print(Panel(chat.prompt, title="Original"))
    for version in core.versions(chat_id):
        console.print(Panel(diff_text(version.tokens), title=f"Version {version.index}"))
