"""
TM35FIN Converter — Core Tool
==============================
Provides :class:`Tm35finConverter`, which reads a CSV or JSON file of
ETRS-TM35FIN grid coordinates, converts every record to WGS84 with
:class:`~src.tm35fin_converter.projection.ProjectionConverter`, and writes
the result as CSV or JSON.

Classes:
    ConverterConfig     Formats, error policy and coefficient table.
    ConversionSummary   Immutable counts for a completed run.
    Tm35finConverter    Primary tool class (inherits GeoTool).

Typical usage::

    from pathlib import Path
    from src.tm35fin_converter.converter import ConverterConfig, Tm35finConverter

    tool = Tm35finConverter(
        input_path=Path("data/points.csv"),
        output_path=Path("output/points.json"),
        config=ConverterConfig(input_type="csv", output_type="json"),
    )
    tool.run()
    print(tool.result.summary())
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from shared.python.base_tool import GeoTool
from shared.python.exceptions import ConversionError
from shared.python.validators import Validators
from src.tm35fin_converter.projection import (
    ConversionResult,
    GeographicCoordinate,
    ProjectionConverter,
)
from src.tm35fin_converter.records import FORMATS, read_records, write_records

logger = logging.getLogger("tm35fin.converter")

ERROR_POLICIES = ("skip", "abort")


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ConversionSummary:
    """Immutable container for a completed conversion run.

    Attributes:
        records_read: Records decoded from the input file.
        records_converted: Records written to the output file.
        records_skipped: Records dropped because conversion failed.
        input_type: Input format keyword.
        output_type: Output format keyword.
        output_path: Path where the converted file was written.
        errors: The conversion failures, in input order.
    """

    records_read: int
    records_converted: int
    records_skipped: int
    input_type: str
    output_type: str
    output_path: Path
    errors: tuple[ConversionError, ...] = ()

    def summary(self) -> str:
        """Return a human-readable summary string for logging or display."""
        return (
            f"Converted {self.records_converted}/{self.records_read} records "
            f"({self.records_skipped} skipped) | "
            f"{self.input_type} → {self.output_type} | "
            f"Output: {self.output_path}"
        )


@dataclass
class ConverterConfig:
    """Configuration bundle for :class:`Tm35finConverter`.

    Attributes:
        input_type: ``"csv"`` (``y,x`` lines) or ``"json"``
                    (array of ``{"x", "y"}`` objects).
        output_type: ``"csv"`` (``longitude,latitude`` lines) or ``"json"``
                     (array of ``{"lat", "lng"}`` objects).
        on_error: ``"skip"`` logs and omits records that fail to convert;
                  ``"abort"`` raises the first failure and writes nothing.
        legacy_coefficients: Passed to
            :class:`~src.tm35fin_converter.projection.ProjectionConverter`.
    """

    input_type: Literal["csv", "json"]
    output_type: Literal["csv", "json"]
    on_error: Literal["skip", "abort"] = "skip"
    legacy_coefficients: bool = True


# ---------------------------------------------------------------------------
# Main tool class
# ---------------------------------------------------------------------------


class Tm35finConverter(GeoTool):
    """Convert a file of TM35FIN grid coordinates to WGS84.

    Inherits the Template Method pipeline from :class:`~shared.python.GeoTool`:
    ``validate_inputs`` → ``process`` → ``_report_success``.

    Records are converted one at a time in input order.  A failed record
    never affects its neighbours; what happens to it is decided by
    ``config.on_error``.

    Args:
        input_path: Path to the input file.
        output_path: Path where the converted output will be written.
        config: A :class:`ConverterConfig`.
        verbose: Enable DEBUG-level logging.  Defaults to ``False``.
    """

    def __init__(
        self,
        input_path: Path,
        output_path: Path,
        config: ConverterConfig,
        *,
        verbose: bool = False,
    ) -> None:
        super().__init__(input_path, output_path, verbose=verbose)
        self.config: ConverterConfig = config
        self.projection = ProjectionConverter(
            legacy_coefficients=config.legacy_coefficients
        )

        # Populated in process()
        self._result: ConversionSummary | None = None

    # ------------------------------------------------------------------
    # GeoTool abstract method implementations
    # ------------------------------------------------------------------

    def validate_inputs(self) -> None:
        """Validate the input file and configuration before processing.

        Raises:
            InputValidationError: If the input file is missing.
            InvalidArgumentError: If a format keyword or the error policy
                is not recognised.
            OutputWriteError: If the output directory cannot be created.
        """
        Validators.assert_file_exists(self.input_path)
        Validators.assert_choice("input_type", self.config.input_type, FORMATS)
        Validators.assert_choice("output_type", self.config.output_type, FORMATS)
        Validators.assert_choice("on_error", self.config.on_error, ERROR_POLICIES)
        Validators.assert_output_dir_writable(self.output_path)

        logger.debug("Inputs validated successfully.")

    def process(self) -> None:
        """Read, convert and write.

        Raises:
            MalformedInputError: If the input file cannot be decoded.
            ConversionError: First failing record, when ``on_error`` is
                ``"abort"``.
            OutputWriteError: If writing the output file fails.
        """
        records = read_records(self.input_path, self.config.input_type)

        converted: list[GeographicCoordinate] = []
        errors: list[ConversionError] = []
        for number, record in enumerate(records, start=1):
            result: ConversionResult = self.projection.convert(record.x, record.y)
            if result.ok:
                converted.append(result.unwrap())
                continue

            assert result.error is not None
            if self.config.on_error == "abort":
                logger.error("Record %d: %s", number, result.error.message)
                raise result.error
            logger.warning("Skipping record %d: %s", number, result.error.message)
            errors.append(result.error)

        write_records(self.output_path, converted, self.config.output_type)

        self._result = ConversionSummary(
            records_read=len(records),
            records_converted=len(converted),
            records_skipped=len(errors),
            input_type=self.config.input_type,
            output_type=self.config.output_type,
            output_path=self.output_path,
            errors=tuple(errors),
        )
        logger.info(self._result.summary())

    @property
    def result(self) -> ConversionSummary | None:
        """The :class:`ConversionSummary` from the last :meth:`run` call.

        Returns ``None`` if :meth:`run` has not completed yet.
        """
        return self._result
