"""
TM35FIN Converter — Custom Exception Hierarchy
===============================================
Every failure the converter can report is an exception from this module so
callers can catch it at the right level of granularity.

Hierarchy::

    TM35FINError                         ← catch-all base
    ├── InputValidationError             ← bad files, bad format keywords
    │   ├── InvalidArgumentError         ← unknown format / error policy
    │   └── MalformedInputError          ← CSV/JSON cannot be decoded
    ├── ConversionError                  ← one record could not be projected
    │   ├── CoordinateOutOfRangeError    ← outside the TM35FIN envelope
    │   └── NumericDomainError           ← math domain / non-finite value
    └── OutputWriteError                 ← cannot write to output path

The projection core never raises :class:`ConversionError` itself; it hands
instances back inside a result object.  They only propagate when a caller
asks for it (``ConversionResult.unwrap()`` or the ``abort`` error policy).

Usage::

    from shared.python.exceptions import CoordinateOutOfRangeError

    raise CoordinateOutOfRangeError("x", 1.0, 6582464.0358, 7799839.8902)
"""

from __future__ import annotations


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


class TM35FINError(Exception):
    """Base exception for the converter.

    Catch this to handle any converter error without caring about the
    exact subtype.

    Args:
        message: Human-readable description of the error.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------


class InputValidationError(TM35FINError):
    """Raised when the converter's inputs fail pre-processing validation.

    This is the parent class for more specific input problems.
    """


class InvalidArgumentError(InputValidationError):
    """Raised when an option value is not one of the accepted keywords.

    Args:
        name: Name of the offending option (e.g. ``"input_type"``).
        value: The value that was supplied.
        allowed: The accepted values.

    Example::

        raise InvalidArgumentError("input_type", "xml", ["csv", "json"])
    """

    def __init__(self, name: str, value: object, allowed: list[str]) -> None:
        allowed_str = ", ".join(f"'{a}'" for a in allowed)
        super().__init__(
            f"Invalid value {value!r} for '{name}'. Accepted values: {allowed_str}"
        )
        self.name: str = name
        self.value: object = value
        self.allowed: list[str] = allowed


class MalformedInputError(InputValidationError):
    """Raised when an input file cannot be decoded into coordinate records.

    Args:
        input_path: String representation of the file being read.
        reason: What was wrong with the content.
        record: 1-based record (line or array element) number, if known.

    Example::

        raise MalformedInputError("points.csv", "expected 2 fields, got 3", record=7)
    """

    def __init__(self, input_path: str, reason: str, record: int | None = None) -> None:
        where = f" (record {record})" if record is not None else ""
        super().__init__(f"Malformed input in '{input_path}'{where}: {reason}")
        self.input_path: str = input_path
        self.reason: str = reason
        self.record: int | None = record


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------


class ConversionError(TM35FINError):
    """A single coordinate pair could not be converted.

    Subclass this for the specific failure kinds.
    """


class CoordinateOutOfRangeError(ConversionError):
    """Raised when a coordinate lies outside the TM35FIN validity envelope.

    Args:
        axis: ``"x"`` or ``"y"``.
        value: The offending coordinate value in metres.
        minimum: Lower inclusive bound for *axis*.
        maximum: Upper inclusive bound for *axis*.

    Example::

        raise CoordinateOutOfRangeError("y", 10.0, 50199.4814, 761274.6247)
    """

    def __init__(self, axis: str, value: float, minimum: float, maximum: float) -> None:
        super().__init__(
            f"{axis}={value} is out of range ({minimum} - {maximum})"
        )
        self.axis: str = axis
        self.value: float = value
        self.minimum: float = minimum
        self.maximum: float = maximum


class NumericDomainError(ConversionError):
    """Raised when an intermediate value of the projection leaves the
    domain of a math function or stops being finite.

    Args:
        stage: Name of the computation step that failed
               (e.g. ``"conformal latitude"``).
        detail: Underlying error text or the offending value.
    """

    def __init__(self, stage: str, detail: str) -> None:
        super().__init__(f"Numeric domain error in {stage}: {detail}")
        self.stage: str = stage
        self.detail: str = detail


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


class OutputWriteError(TM35FINError):
    """Raised when the converter cannot write its output to disk.

    Args:
        output_path: String representation of the path that failed.
        reason: Underlying OS or library error message.

    Example::

        raise OutputWriteError("/read-only/dir/out.json", "Permission denied")
    """

    def __init__(self, output_path: str, reason: str) -> None:
        super().__init__(
            f"Failed to write output to '{output_path}': {reason}"
        )
        self.output_path: str = output_path
        self.reason: str = reason
