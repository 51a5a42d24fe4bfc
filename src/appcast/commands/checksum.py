"""Checksum command implementation."""

import click
from rich.console import Console

from appcast.core.appcast import Appcast
from appcast.core.checksum import ChecksumAlgorithm
from appcast.core.errors import AppcastError

console = Console()

ALGORITHMS = {
    "sha256": ChecksumAlgorithm.SHA256,
    "md5": ChecksumAlgorithm.MD5,
    "sha256-homebrew-cask": ChecksumAlgorithm.SHA256_HOMEBREW_CASK,
}


@click.command()
@click.argument("source")
@click.option(
    "--algorithm",
    "-a",
    type=click.Choice(list(ALGORITHMS)),
    default="sha256",
    help="Checksum algorithm",
)
@click.option("--expected", help="Fail unless the checksum equals this hex digest")
def checksum(source: str, algorithm: str, expected: str | None):
    """Print the checksum of an appcast.

    SOURCE is an appcast URL or a local file path.
    """
    try:
        appcast = Appcast.from_location(source)
    except (AppcastError, OSError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    result = appcast.generate_source_checksum(ALGORITHMS[algorithm])

    if expected and not result.matches(expected):
        console.print(
            f"[red]Checksum mismatch[/red] ({result.algorithm}):\n"
            f"  Expected: {expected}\n"
            f"  Got:      {result}"
        )
        raise SystemExit(1)

    click.echo(str(result))
