"""
TM35FIN Converter — Shared Python Package
==========================================
Re-exports the shared base class, exception hierarchy, and validator
utilities so the converter modules can import from a single location::

    from shared.python import GeoTool, Validators
    from shared.python.exceptions import ConversionError
"""

from shared.python.base_tool import GeoTool
from shared.python.exceptions import (
    ConversionError,
    CoordinateOutOfRangeError,
    InputValidationError,
    InvalidArgumentError,
    MalformedInputError,
    NumericDomainError,
    OutputWriteError,
    TM35FINError,
)
from shared.python.validators import Validators

__all__ = [
    "GeoTool",
    "Validators",
    "TM35FINError",
    "InputValidationError",
    "InvalidArgumentError",
    "MalformedInputError",
    "ConversionError",
    "CoordinateOutOfRangeError",
    "NumericDomainError",
    "OutputWriteError",
]
