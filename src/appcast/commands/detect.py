"""Detect command implementation."""

import click
from rich.console import Console

from appcast.core.appcast import Appcast
from appcast.core.errors import AppcastError
from appcast.core.provider import Provider

console = Console()


@click.command()
@click.argument("source")
def detect(source: str):
    """Detect which provider generated an appcast.

    SOURCE is an appcast URL or a local file path.
    """
    try:
        appcast = Appcast.from_location(source)
    except (AppcastError, OSError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    if appcast.provider is Provider.UNKNOWN:
        console.print("[yellow]Unknown provider[/yellow]")
        raise SystemExit(1)

    console.print(f"[green]{appcast.provider}[/green]")
