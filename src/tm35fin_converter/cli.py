"""
TM35FIN Converter — CLI Entry Point
====================================
Command-line interface built with Click.  Installed as the
``tm35fin-convert`` command via ``pyproject.toml``.

Usage:
    tm35fin-convert --inputFile data/points.csv --outputFile out/points.json \\
                    --inputType csv --outputType json

Exit codes:
    0   success, or ``--help``
    1   any other converter error
    2   invalid or missing argument (Click usage error)
    3   malformed input file
    4   output could not be written
    5   a record failed to convert under ``--on-error abort``
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from shared.python.exceptions import (
    ConversionError,
    MalformedInputError,
    OutputWriteError,
    TM35FINError,
)
from src.tm35fin_converter.converter import (
    ERROR_POLICIES,
    ConverterConfig,
    Tm35finConverter,
)
from src.tm35fin_converter.records import FORMATS

EXIT_ERROR = 1
EXIT_MALFORMED_INPUT = 3
EXIT_OUTPUT_WRITE = 4
EXIT_CONVERSION = 5


def _exit_code(exc: TM35FINError) -> int:
    if isinstance(exc, MalformedInputError):
        return EXIT_MALFORMED_INPUT
    if isinstance(exc, OutputWriteError):
        return EXIT_OUTPUT_WRITE
    if isinstance(exc, ConversionError):
        return EXIT_CONVERSION
    return EXIT_ERROR


@click.command(
    name="tm35fin-convert",
    context_settings={"help_option_names": ["-h", "--help"]},
    help=(
        "Convert ETRS-TM35FIN grid coordinates to WGS84 longitude/latitude.\n\n"
        "Reads INPUTFILE (CSV lines 'y,x' or a JSON array of {\"x\", \"y\"} "
        "objects), converts every record, and writes OUTPUTFILE as CSV lines "
        "'longitude,latitude' or a JSON array of {\"lat\", \"lng\"} objects."
    ),
)
# ---------------------------------------------------------------------------
# Required arguments
# ---------------------------------------------------------------------------
@click.option(
    "--inputFile",
    "input_path",
    required=True,
    type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
    help="Use the given file as input.",
)
@click.option(
    "--outputFile",
    "output_path",
    required=True,
    type=click.Path(file_okay=True, dir_okay=False, path_type=Path),
    help="Write converted coordinates to the given file. "
         "Parent directories are created if absent.",
)
@click.option(
    "--inputType",
    "input_type",
    required=True,
    type=click.Choice(FORMATS, case_sensitive=False),
    help="Input file format.",
)
@click.option(
    "--outputType",
    "output_type",
    required=True,
    type=click.Choice(FORMATS, case_sensitive=False),
    help="Output file format.",
)
# ---------------------------------------------------------------------------
# Optional arguments
# ---------------------------------------------------------------------------
@click.option(
    "--on-error",
    type=click.Choice(ERROR_POLICIES, case_sensitive=False),
    default="skip",
    show_default=True,
    envvar="TM35FIN_ON_ERROR",
    help="What to do with a record outside the TM35FIN envelope: 'skip' logs "
         "and omits it, 'abort' stops without writing output. "
         "Can also be set via the TM35FIN_ON_ERROR environment variable.",
)
@click.option(
    "--legacy-coefficients/--corrected-coefficients",
    default=True,
    show_default=True,
    help="Krüger coefficient table.  The legacy table reproduces the "
         "established converter output; the corrected table uses h3/h4 for "
         "the last two northing terms.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def main(
    input_path: Path,
    output_path: Path,
    input_type: str,
    output_type: str,
    on_error: str,
    legacy_coefficients: bool,
    verbose: bool,
) -> None:
    """CLI entry point — wires Click options into Tm35finConverter."""
    config = ConverterConfig(
        input_type=input_type.lower(),  # type: ignore[arg-type]
        output_type=output_type.lower(),  # type: ignore[arg-type]
        on_error=on_error.lower(),  # type: ignore[arg-type]
        legacy_coefficients=legacy_coefficients,
    )

    tool = Tm35finConverter(
        input_path=input_path,
        output_path=output_path,
        config=config,
        verbose=verbose,
    )

    try:
        tool.run()
    except TM35FINError as exc:
        # User-facing errors: print a clean message, no stack trace
        click.echo(f"Error: {exc.message}", err=True)
        sys.exit(_exit_code(exc))

    assert tool.result is not None
    if tool.result.records_skipped:
        click.echo(
            f"Skipped {tool.result.records_skipped} record(s) outside the "
            "TM35FIN envelope.",
            err=True,
        )


if __name__ == "__main__":
    main()
