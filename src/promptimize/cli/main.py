"""Main CLI entry point."""

import click
from rich.console import Console

from .. import Promptimize, FileHistoryBackend, __version__
from ..core.config import get_settings
from ..core.logging import configure_logging
from .commands import (
    improve,
    analyze,
    diff,
    history,
    share,
    open_link,
)

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="promptimize")
@click.option(
    "--storage-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory holding the history file (default: from settings)"
)
@click.pass_context
def cli(ctx, storage_dir):
    """Promptimize - improve prompts and keep their history.

    \b
    Examples:
        promptimize improve "Write a poem about autumn"
        promptimize analyze "Write a poem"
        promptimize history list
        promptimize share <chat-id> --copy

    Use --help on any command for more details.
    """
    settings = get_settings()
    configure_logging(settings.logging)

    if ctx.obj is None:
        ctx.obj = {}
    if "core" not in ctx.obj:
        core = Promptimize.from_settings(settings)
        if storage_dir:
            core.backend = FileHistoryBackend(storage_dir, key=settings.history.storage_key)
        ctx.obj["core"] = core


# Improvement commands
cli.add_command(improve)
cli.add_command(analyze)
cli.add_command(diff)

# History commands
cli.add_command(history)

# Sharing commands
cli.add_command(share)
cli.add_command(open_link)


@cli.command()
@click.option("-h", "--host", default=None, help="Host to bind to")
@click.option("-p", "--port", default=None, type=int, help="Port to listen on")
@click.option("--reload", is_flag=True, help="Enable auto-reload")
def serve(host, port, reload):
    """Start the REST API server.

    Example:

        promptimize serve --port 8080 --reload
    """
    settings = get_settings()
    host = host or settings.api.host
    port = port or settings.api.port

    console.print("[bold]Starting Promptimize API server...[/bold]")
    console.print(f"  Host: {host}")
    console.print(f"  Port: {port}")
    console.print(f"  Reload: {'Yes' if reload else 'No'}")
    console.print(f"\n[dim]API docs available at http://{host}:{port}/docs[/dim]\n")

    from ..api import run_server
    run_server(host=host, port=port, reload=reload)


@cli.command()
def info():
    """Show information about Promptimize."""
    from rich.panel import Panel

    info_text = """[bold]Promptimize[/bold] - Heuristic prompt improvement

[bold]Features:[/bold]
  • [cyan]Improve[/cyan]: Rewrite a prompt with a fixed rule pipeline
  • [cyan]Analyze[/cyan]: Score a prompt from 1 to 10 with suggestions
  • [cyan]History[/cyan]: Last 5 chats with versions and favourites
  • [cyan]Share[/cyan]: Links that carry a prompt and its improvement

[bold]Deployment:[/bold]
  • Python SDK: import promptimize
  • REST API: promptimize serve
  • CLI: promptimize <command>"""

    console.print(Panel(info_text, title=f"Promptimize v{__version__}", border_style="green"))


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
