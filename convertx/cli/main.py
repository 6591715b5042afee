"""Main CLI interface"""

import click

from .. import __version__
from ..config.cli_config import CLIConfiguration
from ..core.data_structures import ConversionRequest
from ..core.exceptions import ConfigurationError, InvalidUnitError
from ..core.formatting import format_result
from ..core.humanize import U64_MAX, bytes_to_human_readable, bytes_to_mb, seconds_to_human_readable
from ..core.units import CATEGORY_DESCRIPTIONS, Category, UnitDefinition, default_converter, list_variants, parse_unit
from ..infrastructure.logging.cli_logger import get_logger, setup_logging

logger = get_logger(__name__)

# Negative values must reach the VALUE argument instead of being read as options
VALUE_COMMAND_SETTINGS = {'ignore_unknown_options': True}

# Categories whose units fall back to defaults when --from/--to are omitted
DEFAULT_UNITS = {
    Category.LENGTH: ('meters', 'feet'),
}


class UnitChoice(click.Choice):
    """Case-insensitive unit selector that yields a UnitDefinition"""

    name = 'unit'

    def __init__(self, category: Category):
        self.category = category
        super().__init__(list_variants(category), case_sensitive=False)

    def convert(self, value, param, ctx):
        if isinstance(value, UnitDefinition):
            return value

        try:
            return parse_unit(self.category, value)
        except InvalidUnitError as e:
            self.fail(e.message, param, ctx)


@click.group()
@click.version_option(version=__version__, prog_name='convertx')
@click.option('--verbose', '-v', is_flag=True, help='Verbose logging on stderr')
@click.pass_context
def cli(ctx, verbose):
    """Multi-purpose unit converter CLI"""

    config = CLIConfiguration.from_environment()
    if verbose:
        config.verbose = True

    try:
        config.validate()
    except ConfigurationError as e:
        raise click.UsageError(e.message)

    setup_logging(config.effective_log_level)
    logger.debug("Configuration: %s", config.to_dict())
    ctx.obj = config


@cli.command(name="bytes")
@click.argument('num', type=click.IntRange(min=0, max=U64_MAX))
@click.option('--megabytes', '-m', is_flag=True, help='Convert bytes to megabytes')
@click.option('--human-readable', '-r', 'human_readable', is_flag=True,
              help='Convert bytes to a human-readable string (e.g., "1.00 MB")')
def bytes_command(num, megabytes, human_readable):
    """Convert byte values (e.g., bytes to MB or human readable)."""

    if megabytes:
        click.echo(f"{num} bytes = {bytes_to_mb(num):.2f} MB")
    elif human_readable:
        click.echo(f"{num} bytes = {bytes_to_human_readable(num)}")
    else:
        click.echo("Please specify --megabytes or --human-readable. See --help.")


@cli.command(name="time")
@click.argument('seconds', type=click.IntRange(min=0, max=U64_MAX))
@click.option('--human-readable', '-r', 'human_readable', is_flag=True,
              help='Convert to human-readable format (e.g., "1h 13m 5s")')
def time_command(seconds, human_readable):
    """Convert time (seconds) to a human-readable format."""

    if human_readable:
        click.echo(f"{seconds} seconds = {seconds_to_human_readable(seconds)}")
    else:
        click.echo("Please specify --human-readable. See --help.")


def _run_conversion(category: Category, value: float, from_unit: UnitDefinition, to_unit: UnitDefinition):
    request = ConversionRequest(category, value, from_unit, to_unit)
    logger.debug("Request: %s", request.to_dict())

    result = default_converter.convert(request)
    click.echo(format_result(result))

    logger.debug("Converter statistics: %s", default_converter.get_statistics())


def _make_unit_command(category: Category) -> click.Command:
    """Build the subcommand for one category"""

    from_default, to_default = DEFAULT_UNITS.get(category, (None, None))
    unit_type = UnitChoice(category)

    def _unit_option(flag: str, short: str, dest: str, default, help_text: str):
        if default is None:
            return click.option(flag, short, dest, type=unit_type, required=True, help=help_text)
        return click.option(flag, short, dest, type=unit_type, default=default,
                            show_default=True, help=help_text)

    @click.argument('value', type=float)
    @_unit_option('--from', '-f', 'from_unit', from_default, 'Unit to convert from.')
    @_unit_option('--to', '-t', 'to_unit', to_default, 'Unit to convert to.')
    def command(value, from_unit, to_unit):
        _run_conversion(category, value, from_unit, to_unit)

    return click.command(
        name=category.value,
        help=CATEGORY_DESCRIPTIONS[category],
        context_settings=VALUE_COMMAND_SETTINGS
    )(command)


for _category in Category:
    cli.add_command(_make_unit_command(_category))


def main():
    cli()


if __name__ == "__main__":
    main()
