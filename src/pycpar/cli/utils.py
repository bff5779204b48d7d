import csv

from typing import IO, Iterable, List

from pycpar.colors import Color
from pycpar.parser import parse
from pycpar.status import Status

__all__ = ("check_and_write_tabular", "color_to_row")


def color_to_row(string: str, color: Color) -> List:
    """Converts a successfully parsed colour to the row that we want to
    write into the output of the ``parse`` command.
    """
    return [string, color.to_string(), color.red, color.green, color.blue, color.alpha]


def check_and_write_tabular(
    lines: Iterable[str], output: IO[str], progress: bool = False
) -> int:
    """Validates colour specifications coming from an iterable and dumps the
    outcome of each parse attempt in human-readable format to a stream.

    Each row of the output contains the colour specification, the name of the
    status code of the parse attempt and the canonical representation of the
    colour (empty if the parse attempt failed). Empty lines are skipped.

    Parameters:
        lines: the colour specifications to validate
        output: stream to dump the result to
        progress: whether to show a progress bar on the standard error stream

    Returns:
        the number of colour specifications that failed to parse
    """
    from tqdm import tqdm

    writer = csv.writer(output, dialect="excel-tab")
    failures = 0

    for line in tqdm(lines, disable=not progress, unit=" colors"):
        string = line.rstrip("\r\n")
        if not string.strip():
            continue

        result = parse(string)
        if result.status is Status.OK:
            canonical = Color.from_value(result.value).to_string()
        else:
            canonical = ""
            failures += 1

        writer.writerow([string, result.status.name, canonical])

    return failures
