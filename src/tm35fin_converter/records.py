"""
TM35FIN Converter — Record Reader / Writer
===========================================
Decodes input files into :class:`PlanarCoordinate` records and encodes
converted :class:`GeographicCoordinate` records back to disk.

Formats:
    CSV in      one ``y,x`` pair per line, no header.
    CSV out     one ``longitude,latitude`` pair per line, no header,
                platform line separator.
    JSON in     ``[{"x": <number>, "y": <number>}, ...]``
    JSON out    ``[{"lat": <number>, "lng": <number>}, ...]``

Functions:
    read_records    Dispatch on ``input_type`` and return planar records.
    write_records   Dispatch on ``output_type`` and write geographic records.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Callable, Iterable

import pandas as pd

from shared.python.exceptions import MalformedInputError, OutputWriteError
from shared.python.validators import Validators
from src.tm35fin_converter.projection import GeographicCoordinate, PlanarCoordinate

logger = logging.getLogger("tm35fin.records")

FORMATS = ("csv", "json")


# ---------------------------------------------------------------------------
# Readers
# ---------------------------------------------------------------------------


def read_csv_records(path: Path) -> list[PlanarCoordinate]:
    """Read ``y,x`` lines from *path*.

    Blank lines are ignored.

    Raises:
        MalformedInputError: On ragged rows, missing fields or values that
            are not numbers.
    """
    try:
        df = pd.read_csv(
            path,
            header=None,
            dtype=str,
            skipinitialspace=True,
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError:
        logger.debug("%s is empty.", path)
        return []
    except pd.errors.ParserError as exc:
        raise MalformedInputError(str(path), str(exc).strip()) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise MalformedInputError(str(path), str(exc)) from exc

    if df.shape[1] != 2:
        raise MalformedInputError(
            str(path), f"expected 2 fields per line (y,x), got {df.shape[1]}"
        )

    return [
        PlanarCoordinate(
            x=_csv_number(x, path, record),
            y=_csv_number(y, path, record),
        )
        for record, (y, x) in enumerate(df.itertuples(index=False, name=None), start=1)
    ]


def _csv_number(text: object, path: Path, record: int) -> float:
    # float() rounds correctly; pd.to_numeric can be 1 ulp off on 17 digits
    if not isinstance(text, str):
        raise MalformedInputError(str(path), "missing value", record=record)
    try:
        return float(text)
    except ValueError as exc:
        raise MalformedInputError(
            str(path), f"not a number: {text!r}", record=record
        ) from exc


def _json_number(item: dict[str, Any], key: str, path: Path, record: int) -> float:
    if key not in item:
        raise MalformedInputError(str(path), f"missing key '{key}'", record=record)
    value = item[key]
    # bool is an int subclass but never a coordinate
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedInputError(
            str(path), f"'{key}' must be a number, got {value!r}", record=record
        )
    try:
        return float(value)
    except OverflowError as exc:
        raise MalformedInputError(
            str(path), f"'{key}' is too large for a float", record=record
        ) from exc


def read_json_records(path: Path) -> list[PlanarCoordinate]:
    """Read an array of ``{"x": ..., "y": ...}`` objects from *path*.

    Raises:
        MalformedInputError: If the document is not valid JSON, is not an
            array of objects, or an object lacks numeric ``x``/``y``.
    """
    try:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    except json.JSONDecodeError as exc:
        raise MalformedInputError(str(path), f"invalid JSON: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise MalformedInputError(str(path), str(exc)) from exc
    except ValueError as exc:
        # e.g. integer literals beyond the int-string conversion limit
        raise MalformedInputError(str(path), f"invalid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise MalformedInputError(
            str(path), f"expected a JSON array, got {type(data).__name__}"
        )

    records = []
    for record, item in enumerate(data, start=1):
        if not isinstance(item, dict):
            raise MalformedInputError(
                str(path), f"expected an object, got {item!r}", record=record
            )
        records.append(
            PlanarCoordinate(
                x=_json_number(item, "x", path, record),
                y=_json_number(item, "y", path, record),
            )
        )
    return records


# ---------------------------------------------------------------------------
# Writers
# ---------------------------------------------------------------------------


def write_csv_records(path: Path, coordinates: Iterable[GeographicCoordinate]) -> None:
    """Write ``longitude,latitude`` lines to *path*."""
    df = pd.DataFrame(
        [(c.longitude, c.latitude) for c in coordinates],
        columns=["longitude", "latitude"],
        dtype=float,
    )
    df.to_csv(path, header=False, index=False, lineterminator=os.linesep)


def write_json_records(path: Path, coordinates: Iterable[GeographicCoordinate]) -> None:
    """Write an array of ``{"lat": ..., "lng": ...}`` objects to *path*."""
    payload = [{"lat": c.latitude, "lng": c.longitude} for c in coordinates]
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(payload, fh)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

_READERS: dict[str, Callable[[Path], list[PlanarCoordinate]]] = {
    "csv": read_csv_records,
    "json": read_json_records,
}

_WRITERS: dict[str, Callable[[Path, Iterable[GeographicCoordinate]], None]] = {
    "csv": write_csv_records,
    "json": write_json_records,
}


def read_records(path: Path, input_type: str) -> list[PlanarCoordinate]:
    """Read planar records from *path* in the given format.

    Args:
        path: Input file.
        input_type: ``"csv"`` or ``"json"``.

    Returns:
        Records in file order.

    Raises:
        InvalidArgumentError: If *input_type* is not a known format.
        MalformedInputError: If the file cannot be decoded.
    """
    Validators.assert_choice("input_type", input_type, FORMATS)
    records = _READERS[input_type](Path(path))
    logger.debug("Read %d record(s) from %s", len(records), path)
    return records


def write_records(
    path: Path,
    coordinates: Iterable[GeographicCoordinate],
    output_type: str,
) -> None:
    """Write geographic records to *path* in the given format.

    Args:
        path: Output file, created or truncated.
        coordinates: Records in output order.
        output_type: ``"csv"`` or ``"json"``.

    Raises:
        InvalidArgumentError: If *output_type* is not a known format.
        OutputWriteError: If the file cannot be written.
    """
    Validators.assert_choice("output_type", output_type, FORMATS)
    try:
        _WRITERS[output_type](Path(path), coordinates)
    except OSError as exc:
        raise OutputWriteError(str(path), str(exc)) from exc
