"""Releases command implementation."""

import json

import click
import yaml
from rich.console import Console
from rich.table import Table

from appcast.core.appcast import Appcast
from appcast.core.errors import AppcastError, UnmarshalError
from appcast.models.releases import Sort

console = Console()


def print_table(appcast: Appcast) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Version")
    table.add_column("Build")
    table.add_column("Title")
    table.add_column("Published")
    table.add_column("Download")

    for release in appcast.releases:
        version = release.version_string
        if release.is_prerelease:
            version = f"[yellow]{version}[/yellow]"
        download = release.downloads[0].url if release.downloads else ""
        table.add_row(
            version,
            release.build,
            release.title,
            str(release.published_datetime),
            download,
        )

    console.print(table)
    console.print(
        f"\n{appcast.releases.len()} of {len(appcast.releases.original)} release(s) "
        f"[dim]({appcast.provider})[/dim]"
    )


def to_document(appcast: Appcast) -> dict:
    """Build the YAML/JSON document for an unmarshalled appcast."""
    data = {"provider": str(appcast.provider)}
    if appcast.source.checksum is not None:
        data["checksum"] = {
            "algorithm": str(appcast.source.checksum.algorithm),
            "value": str(appcast.source.checksum),
        }
    if appcast.channel is not None:
        data["channel"] = appcast.channel.to_dict()
    data["releases"] = [release.to_dict() for release in appcast.releases]
    return data


@click.command()
@click.argument("source")
@click.option(
    "--sort",
    "sort",
    type=click.Choice(["asc", "desc"]),
    default=None,
    help="Sort releases by version",
)
@click.option("--title", help="Only releases whose title matches this regex")
@click.option("--media-type", help="Only releases with a download of this media type (regex)")
@click.option("--url", help="Only releases with a download URL matching this regex")
@click.option(
    "--prereleases/--stable",
    "prereleases",
    default=None,
    help="Only prereleases or only stable releases",
)
@click.option("--invert", is_flag=True, help="Invert the --title, --media-type and --url filters")
@click.option("--uncomment", is_flag=True, help="Uncomment commented out items (Sparkle)")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "yaml", "json"]),
    default="table",
    help="Output format",
)
def releases(
    source: str,
    sort: str | None,
    title: str | None,
    media_type: str | None,
    url: str | None,
    prereleases: bool | None,
    invert: bool,
    uncomment: bool,
    output_format: str,
):
    """List releases from an appcast.

    SOURCE is an appcast URL or a local file path.
    """
    try:
        appcast = Appcast.from_location(source)
        if uncomment:
            appcast.uncomment()
        appcast.unmarshal()
    except UnmarshalError as e:
        console.print(f"[red]Error:[/red] {len(e.errors)} release(s) could not be read")
        for error in e.errors:
            console.print(f"  • {error}")
        raise SystemExit(1)
    except (AppcastError, OSError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    if title:
        appcast.releases.filter_by_title(title, invert)
    if media_type:
        appcast.releases.filter_by_media_type(media_type, invert)
    if url:
        appcast.releases.filter_by_url(url, invert)
    if prereleases is not None:
        appcast.releases.filter_by_prerelease(inverse=not prereleases)
    if sort:
        appcast.releases.sort_by_versions(Sort(sort))

    if output_format == "yaml":
        click.echo(yaml.dump(to_document(appcast), default_flow_style=False, sort_keys=False))
    elif output_format == "json":
        click.echo(json.dumps(to_document(appcast), indent=2))
    else:
        print_table(appcast)
