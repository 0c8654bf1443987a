"""
TM35FIN Converter — Shared Input Validators
============================================
Static precondition checks used by the converter before and during
processing.

All methods raise an appropriate exception from
:mod:`shared.python.exceptions` rather than returning booleans, which keeps
``validate_inputs`` implementations short::

    class MyTool(GeoTool):
        def validate_inputs(self) -> None:
            Validators.assert_file_exists(self.input_path)
            Validators.assert_choice("input_type", self.input_type, ["csv", "json"])
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from shared.python.exceptions import (
    CoordinateOutOfRangeError,
    InputValidationError,
    InvalidArgumentError,
    OutputWriteError,
)


class Validators:
    """Collection of static precondition checks.

    All methods are ``@staticmethod``; this class is never instantiated.
    It exists purely as a logical namespace.
    """

    # ------------------------------------------------------------------
    # File-system checks
    # ------------------------------------------------------------------

    @staticmethod
    def assert_file_exists(path: Path) -> None:
        """Assert that *path* points to an existing regular file.

        Args:
            path: Path object to check.

        Raises:
            InputValidationError: If *path* does not exist or is a
                directory rather than a file.

        Example::

            Validators.assert_file_exists(Path("data/points.csv"))
        """
        path = Path(path)
        if not path.exists():
            raise InputValidationError(
                f"Input file not found: '{path}'. "
                "Check that the path is correct and the file exists."
            )
        if path.is_dir():
            raise InputValidationError(
                f"Expected a file but got a directory: '{path}'."
            )

    @staticmethod
    def assert_output_dir_writable(output_path: Path) -> None:
        """Assert that the parent directory of *output_path* is writable.

        Creates the parent directory (and any missing parents) if it does
        not yet exist.

        Args:
            output_path: Intended output file path.

        Raises:
            OutputWriteError: If the parent directory cannot be created.
        """
        parent = Path(output_path).parent
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OutputWriteError(str(output_path), str(exc)) from exc

    # ------------------------------------------------------------------
    # Option checks
    # ------------------------------------------------------------------

    @staticmethod
    def assert_choice(name: str, value: str, allowed: Sequence[str]) -> None:
        """Assert that *value* is one of *allowed* (case-sensitive).

        Raises:
            InvalidArgumentError: If *value* is not accepted.
        """
        if value not in allowed:
            raise InvalidArgumentError(name, value, list(allowed))

    # ------------------------------------------------------------------
    # Coordinate checks
    # ------------------------------------------------------------------

    @staticmethod
    def assert_in_range(axis: str, value: float, minimum: float, maximum: float) -> None:
        """Assert that *value* lies within ``[minimum, maximum]``.

        Both bounds are inclusive.  NaN never satisfies the check.

        Args:
            axis: Axis label used in the error (``"x"`` or ``"y"``).
            value: Coordinate value in metres.
            minimum: Lower inclusive bound.
            maximum: Upper inclusive bound.

        Raises:
            CoordinateOutOfRangeError: If *value* is outside the bounds.

        Example::

            Validators.assert_in_range("x", 6_700_000.0, 6582464.0358, 7799839.8902)
        """
        if not minimum <= value <= maximum:
            raise CoordinateOutOfRangeError(axis, value, minimum, maximum)
