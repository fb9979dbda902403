#!/usr/bin/env python3
"""ambit CLI - Main entry point"""

import rich_click as click

from ambit import __version__
from ambit.commands import auth, doctor

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.MAX_WIDTH = 100
click.rich_click.STYLE_COMMAND = "bold cyan"
click.rich_click.STYLE_OPTION = "bold magenta"
click.rich_click.STYLE_SWITCH = "bold green"
click.rich_click.STYLE_HEADER_TEXT = "bold cyan"
click.rich_click.STYLE_USAGE = "bold yellow"
click.rich_click.STYLE_USAGE_COMMAND = "bold cyan"


@click.group()
@click.version_option(version=__version__, prog_name="ambit")
def cli():
    """
    Tailscale subnet routers on Fly.io private networks
    """
    pass


cli.add_command(doctor)
cli.add_command(auth)


def main():
    cli()


if __name__ == "__main__":
    main()
