"""Main application class for PyCpar"""

import csv
import sys

from pycpar.colors import Color
from pycpar.errors import ColorParseError
from pycpar.logger import log
from pycpar.names import color_names, lookup_color_value

from .utils import check_and_write_tabular, color_to_row

try:
    import click
    import click_log
except ImportError:
    print("You need to install pycpar with its command line dependencies to use")
    print("the command line interface.")
    sys.exit(1)


click_log.basic_config(log)


@click.group()
@click_log.simple_verbosity_option(log)
def cli():
    pass


@cli.command()
@click.option(
    "-o",
    "--output",
    type=click.File("w"),
    help="name of the output file",
    default="-",
)
@click.argument("colors", nargs=-1, required=True)
def parse(colors, output):
    """\
    Parses one or more colour specifications.

    The output of this command will be a tab-separated list of the input
    specifications, their canonical #rrggbbaa representations and their red,
    green, blue and alpha components (between 0 and 255, inclusive).
    """
    writer = csv.writer(output, dialect="excel-tab")
    success = True

    for string in colors:
        try:
            color = Color.from_string(string)
        except ColorParseError as ex:
            log.error(str(ex))
            success = False
        else:
            writer.writerow(color_to_row(string, color))

    if not success:
        sys.exit(1)


@cli.command()
@click.argument("color", required=True)
def name(color):
    """Prints the name of a colour given by its specification."""
    try:
        color_name = Color.from_string(color).name
    except ColorParseError as ex:
        log.error(str(ex))
        sys.exit(1)

    if color_name is None:
        log.error("Color {0!r} has no name".format(color))
        sys.exit(1)

    click.echo(color_name)


@cli.command()
def names():
    """Lists the names of all known colours and their canonical values."""
    for color_name in color_names():
        value = Color.from_value(lookup_color_value(color_name))
        click.echo("{0}\t{1}".format(color_name, value))


@cli.command()
@click.option(
    "-o",
    "--output",
    type=click.File("w"),
    help="name of the output file",
    default="-",
)
@click.option(
    "-p",
    "--progress",
    default=False,
    is_flag=True,
    help="Show the progress of the validation process with a progress bar.",
)
@click.argument("filename", type=click.File("r"), required=True)
def check(filename, output, progress):
    """\
    Validates a file containing one colour specification per line.

    The output of this command will be a tab-separated list of the
    specifications, the status of the parse attempts and the canonical
    #rrggbbaa representations of the colours that were parsed successfully.
    Exits with a non-zero exit code if at least one of the specifications is
    invalid.
    """
    failures = check_and_write_tabular(filename, output, progress)
    if failures:
        log.error("{0} invalid color specification(s) found".format(failures))
        sys.exit(1)


def main():
    """Main entry point of the command line interface."""
    cli()
