"""
TM35FIN Converter
==================
Converts ETRS-TM35FIN grid coordinates to WGS84 longitude/latitude, reading
and writing CSV or JSON files.

Public API::

    from src.tm35fin_converter import ProjectionConverter, Tm35finConverter
"""

from src.tm35fin_converter.converter import (
    ConversionSummary,
    ConverterConfig,
    Tm35finConverter,
)
from src.tm35fin_converter.projection import (
    ConversionResult,
    GeographicCoordinate,
    PlanarCoordinate,
    ProjectionConverter,
    convert,
)

__all__ = [
    "ConversionResult",
    "ConversionSummary",
    "ConverterConfig",
    "GeographicCoordinate",
    "PlanarCoordinate",
    "ProjectionConverter",
    "Tm35finConverter",
    "convert",
]
__version__ = "1.0.0"
