import logging
import os

import click
from dotenv import find_dotenv, load_dotenv

from timeparse.constants import ENV_INPUT_TZ, ENV_OUTPUT_TZ, ENV_TS_UNIT
from timeparse.errors import TimeparseError
from timeparse.formatter import build_report, format_instant, render_report
from timeparse.logging import setup_logging
from timeparse.models import TimestampUnit, TimezoneChoice
from timeparse.resolver import resolve

logger = logging.getLogger(__name__)

TZ_CHOICES = [choice.value for choice in TimezoneChoice]
UNIT_CHOICES = [unit.value for unit in TimestampUnit]


def get_version() -> str:
    """Get version info."""
    from timeparse import __version__

    return __version__


def get_copyright() -> str:
    """Get copyright info."""
    from timeparse import __copyright__

    return __copyright__


@click.command(
    help="Parse a unix timestamp or a formatted datetime (YYYY/MM/DD HH:MM:SS).",
    # Let negative timestamps such as -1500 through as INPUT.
    context_settings={"ignore_unknown_options": True},
)
@click.version_option(
    version=get_version(),
    prog_name="timeparse",
    message="%(prog)s %(version)s\n"
    + get_copyright()
    + "\n"
    + "This is free software; see the source for copying conditions.  There is NO\n"
    + "warranty; not even for MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.",
)
@click.argument("text", metavar="INPUT")
@click.option(
    "--unix",
    "unix_only",
    is_flag=True,
    help="Output unix seconds only (single line).",
)
@click.option(
    "--json",
    "json_only",
    is_flag=True,
    help="Output JSON only.",
)
@click.option(
    "--format",
    "custom_format",
    default=None,
    help="Custom strftime output format, e.g. '%Y/%m/%d %H:%M:%S'. "
    "Only applies to string output (default RFC 3339).",
)
@click.option(
    "--input-tz",
    default=lambda: os.getenv(ENV_INPUT_TZ, TimezoneChoice.LOCAL.value),
    type=click.Choice(TZ_CHOICES, case_sensitive=False),
    show_default=f"env: {ENV_INPUT_TZ} or local",
    help="Timezone used to interpret formatted input.",
)
@click.option(
    "--output-tz",
    default=lambda: os.getenv(ENV_OUTPUT_TZ, TimezoneChoice.UTC.value),
    type=click.Choice(TZ_CHOICES, case_sensitive=False),
    show_default=f"env: {ENV_OUTPUT_TZ} or utc",
    help="Timezone used for formatted output.",
)
@click.option(
    "--ts",
    "ts_unit",
    default=lambda: os.getenv(ENV_TS_UNIT),
    type=click.Choice(UNIT_CHOICES, case_sensitive=False),
    show_default=f"env: {ENV_TS_UNIT} or autodetect",
    help="Force interpretation of numeric INPUT as seconds or millis.",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging of how the input is interpreted.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    text: str,
    unix_only: bool,
    json_only: bool,
    custom_format: str | None,
    input_tz: str,
    output_tz: str,
    ts_unit: str | None,
    debug: bool,
) -> None:
    """Entrypoint for timeparse CLI."""
    if unix_only and json_only:
        raise click.UsageError("--unix and --json are mutually exclusive.", ctx=ctx)

    setup_logging(debug)

    in_tz = TimezoneChoice(input_tz.lower())
    out_tz = TimezoneChoice(output_tz.lower())
    forced_unit = TimestampUnit(ts_unit.lower()) if ts_unit else None

    try:
        instant, outcome = resolve(text, in_tz, forced_unit)
        if unix_only:
            output = str(instant.unix_seconds)
        elif json_only:
            output = render_report(
                build_report(text, instant, outcome, in_tz, out_tz)
            )
        else:
            output = format_instant(instant, out_tz, custom_format)
    except TimeparseError as e:
        logger.debug("Failed to convert %r: %s", text, e)
        click.echo(f"Error: {e}", err=True)
        ctx.exit(e.exit_code)

    click.echo(output)


def main(args: list[str] | None = None) -> int:
    load_dotenv(find_dotenv(usecwd=True))
    try:
        rv = cli.main(args=args, prog_name="timeparse", standalone_mode=False)
        return rv if isinstance(rv, int) else 0
    except click.exceptions.ClickException as e:
        e.show()
        return e.exit_code
    except click.exceptions.Abort:
        # Handle keyboard interrupts gracefully
        click.echo("Operation aborted by user")
        return 130  # Standard exit code for SIGINT
    except click.exceptions.Exit as e:
        return e.exit_code
    except Exception as exc:  # pylint: disable=broad-exception-caught
        # Handle unexpected errors
        logger.error(exc, exc_info=True)
        return 1
