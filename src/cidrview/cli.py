"""
cidrview command line interface.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import json

import click
from rich.console import Console
from rich.markup import escape

from cidrview import __version__
from cidrview.config import OUTPUT_FORMATS, check_log_level, check_output_format, get_config
from cidrview.core import ParseError, calc
from cidrview.logging_config import configure_logging, get_logger
from cidrview.report import build_table, render_report

logger = get_logger(__name__)

USAGE_HINT = "specify a CIDR e.g. 10.20.30.40/22"


@click.command()
@click.argument("cidr")
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    help="Output format (default: text, or $CIDRVIEW_FORMAT)",
)
@click.option("--json-output", "json_out", is_flag=True, help="Output as JSON (same as --format json)")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also write logs to this file")
@click.version_option(__version__, prog_name="cidrview")
def cidrview(cidr: str, output_format: str | None, json_out: bool, debug: bool, log_file: str | None):
    """Show the network, masks and address range of a CIDR, bit by bit.

    \b
    Examples:
        cidrview 10.20.30.40/22
        cidrview 2001:db8::/32
        cidrview 192.168.1.0/24 --format table
        cidrview 127.0.0.1/8 --json-output
    """
    config = get_config()
    if json_out:
        output_format = "json"

    # flags win; only check config values they leave in place
    try:
        output_format = check_output_format(output_format or config.output_format)
        level = "DEBUG" if debug else check_log_level(config.log_level)
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    configure_logging(level=level, log_file=log_file or config.log_file)

    try:
        result = calc(cidr)
    except ParseError as e:
        logger.debug("Rejected %r: %s", cidr, e)
        err_console = Console(stderr=True)
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        err_console.print(f"[dim]{USAGE_HINT}[/dim]")
        raise SystemExit(1)

    if output_format == "json":
        output = {"cidr": cidr, **result.to_dict()}
        click.echo(json.dumps(output, indent=2))
    elif output_format == "table":
        Console().print(build_table(cidr, result))
    else:
        click.echo(render_report(cidr, result), nl=False)


def main():
    cidrview()


if __name__ == "__main__":
    main()
