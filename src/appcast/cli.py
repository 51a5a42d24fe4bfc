"""CLI entry point for appcast."""

import click

from appcast import __version__
from appcast.commands import checksum, detect, releases
from appcast.core.logconfig import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="appcast")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool):
    """Appcast - inspect software update feeds.

    Reads Sparkle RSS, SourceForge RSS and GitHub Atom feeds and lists the
    releases they describe.

    Examples:

        appcast releases https://github.com/atom/atom/releases.atom --sort desc

        appcast releases appcast.xml --stable --format yaml

        appcast detect https://sourceforge.net/projects/filezilla/rss

        appcast checksum appcast.xml --algorithm md5
    """
    configure_logging(verbose)


# Register commands
main.add_command(releases.releases)
main.add_command(detect.detect)
main.add_command(checksum.checksum)


if __name__ == "__main__":
    main()
