"""
TM35FIN Converter — Inverse Projection
=======================================
Converts ETRS-TM35FIN grid coordinates to WGS84 longitude/latitude with an
inverse Gauss-Krüger projection (4th-order Krüger n-series) followed by a
conformal → geodetic latitude correction.

Axis convention follows Finnish geodetic practice: ``x`` is the north axis
value and ``y`` the east axis value, which carries the 500 000 m false
easting.

The module is pure arithmetic.  It performs no I/O and does not log;
failures come back as values inside :class:`ConversionResult`.

Classes:
    PlanarCoordinate        Input grid pair.
    GeographicCoordinate    Output longitude/latitude pair.
    ConversionResult        Either a coordinate or a ConversionError.
    ProjectionConverter     Validates and projects one pair at a time.

Usage::

    from src.tm35fin_converter.projection import ProjectionConverter

    result = ProjectionConverter().convert(6_672_000.0, 385_800.0)
    if result.ok:
        print(result.coordinate.longitude, result.coordinate.latitude)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

from shared.python.exceptions import ConversionError, NumericDomainError
from shared.python.validators import Validators

# ---------------------------------------------------------------------------
# Validity envelope of the TM35FIN grid (metres, inclusive)
# ---------------------------------------------------------------------------

X_MIN = 6582464.0358
X_MAX = 7799839.8902
Y_MIN = 50199.4814
Y_MAX = 761274.6247

# ---------------------------------------------------------------------------
# Ellipsoid and projection parameters
# ---------------------------------------------------------------------------

SEMI_MAJOR_AXIS = 6378137.0
FLATTENING = 1.0 / 298.257223563
SCALE_FACTOR = 0.9996
CENTRAL_MERIDIAN = math.radians(27.0)
FALSE_EASTING = 500000.0

THIRD_FLATTENING = FLATTENING / (2.0 - FLATTENING)
_N = THIRD_FLATTENING
MERIDIAN_ARC_SCALE = SEMI_MAJOR_AXIS / (1.0 + _N) * (1.0 + _N ** 2 / 4.0 + _N ** 4 / 64.0)
ECCENTRICITY = math.sqrt(2.0 * FLATTENING - FLATTENING ** 2)

H1 = _N / 2.0 - 2.0 / 3.0 * _N ** 2 + 37.0 / 96.0 * _N ** 3 - 1.0 / 360.0 * _N ** 4
H2 = 1.0 / 48.0 * _N ** 2 + 1.0 / 15.0 * _N ** 3 - 437.0 / 1440.0 * _N ** 4
H3 = 17.0 / 480.0 * _N ** 3 - 37.0 / 840.0 * _N ** 4
H4 = 4397.0 / 161280.0 * _N ** 4

# Coefficients applied to the k-th correction term (k = 1..4) of each series,
# as (xi_coefficients, eta_coefficients).
#
# NOTE: the legacy table reproduces the established converter output, which
# uses H2 for the third xi term and H3 for the fourth.  The Krüger series
# calls for H3 and H4 there.  The shift moves the result by up to ~0.4 m
# northward/southward; it is kept as the default until checked against an
# authoritative TM35FIN reference.
LEGACY_SERIES_COEFFICIENTS = ((H1, H2, H2, H3), (H1, H2, H3, H4))
KRUGER_SERIES_COEFFICIENTS = ((H1, H2, H3, H4), (H1, H2, H3, H4))

LATITUDE_ITERATIONS = 4


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PlanarCoordinate:
    """A grid coordinate pair in ETRS-TM35FIN, metres.

    Attributes:
        x: North axis value.
        y: East axis value (includes the 500 000 m false easting).
    """

    x: float
    y: float


@dataclass(frozen=True)
class GeographicCoordinate:
    """A WGS84 position in decimal degrees."""

    longitude: float
    latitude: float


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of converting one :class:`PlanarCoordinate`.

    Exactly one of ``coordinate`` and ``error`` is set.

    Attributes:
        source: The input pair.
        coordinate: The converted position, or ``None`` on failure.
        error: The failure, or ``None`` on success.
    """

    source: PlanarCoordinate
    coordinate: GeographicCoordinate | None = None
    error: ConversionError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> GeographicCoordinate:
        """Return the coordinate, raising the stored error on failure.

        Raises:
            ConversionError: The failure recorded for this pair.
        """
        if self.error is not None:
            raise self.error
        assert self.coordinate is not None
        return self.coordinate


# ---------------------------------------------------------------------------
# Numeric helpers
# ---------------------------------------------------------------------------


def _checked(stage: str, func: Callable[[float], float], value: float) -> float:
    """Apply *func* to *value*, turning math errors and non-finite results
    into :class:`NumericDomainError`.
    """
    try:
        result = func(value)
    except (ValueError, OverflowError) as exc:
        raise NumericDomainError(stage, f"{exc} (argument {value!r})") from exc
    if not math.isfinite(result):
        raise NumericDomainError(stage, f"non-finite result {result!r} (argument {value!r})")
    return result


def asinh(value: float) -> float:
    """Inverse hyperbolic sine, ``ln(v + sqrt(v² + 1))``."""
    return _checked("asinh", math.asinh, value)


def atanh(value: float) -> float:
    """Inverse hyperbolic tangent, ``0.5·ln((1 + v) / (1 - v))``.

    Raises:
        NumericDomainError: If ``|value| >= 1``.
    """
    return _checked("atanh", math.atanh, value)


# ---------------------------------------------------------------------------
# Converter
# ---------------------------------------------------------------------------


class ProjectionConverter:
    """Inverse TM35FIN projection for single coordinate pairs.

    Instances hold no mutable state; :meth:`convert` is a pure function of
    its arguments and the coefficient table chosen at construction.

    Args:
        legacy_coefficients: Use the legacy Krüger coefficient table
            (default) for output identical to the established converter.
            ``False`` selects the textbook H1..H4 table for both series.
    """

    def __init__(self, *, legacy_coefficients: bool = True) -> None:
        self.legacy_coefficients: bool = legacy_coefficients
        self._xi_coefficients, self._eta_coefficients = (
            LEGACY_SERIES_COEFFICIENTS if legacy_coefficients else KRUGER_SERIES_COEFFICIENTS
        )

    def convert(self, x: float, y: float) -> ConversionResult:
        """Convert one grid pair to WGS84.

        ``x`` is checked before ``y``; when both are out of range the
        reported axis is ``x``.

        Args:
            x: North axis value in metres.
            y: East axis value in metres.

        Returns:
            A :class:`ConversionResult` holding either the converted
            :class:`GeographicCoordinate` or a
            :class:`~shared.python.exceptions.CoordinateOutOfRangeError` /
            :class:`~shared.python.exceptions.NumericDomainError`.
        """
        source = PlanarCoordinate(x, y)
        try:
            Validators.assert_in_range("x", x, X_MIN, X_MAX)
            Validators.assert_in_range("y", y, Y_MIN, Y_MAX)
            coordinate = self._inverse(x, y)
        except ConversionError as exc:
            return ConversionResult(source=source, error=exc)
        return ConversionResult(source=source, coordinate=coordinate)

    def _inverse(self, x: float, y: float) -> GeographicCoordinate:
        xi = x / (MERIDIAN_ARC_SCALE * SCALE_FACTOR)
        eta = (y - FALSE_EASTING) / (MERIDIAN_ARC_SCALE * SCALE_FACTOR)

        xi_prime = xi
        eta_prime = eta
        try:
            for k, (cx, ce) in enumerate(
                zip(self._xi_coefficients, self._eta_coefficients), start=1
            ):
                m = 2.0 * k
                xi_prime -= cx * math.sin(m * xi) * math.cosh(m * eta)
                eta_prime -= ce * math.cos(m * xi) * math.sinh(m * eta)
            ratio = math.sin(xi_prime) / math.cosh(eta_prime)
        except OverflowError as exc:
            raise NumericDomainError("Krüger series", str(exc)) from exc

        beta = _checked("conformal latitude", math.asin, ratio)

        q = asinh(math.tan(beta))
        q_prime = q
        for _ in range(LATITUDE_ITERATIONS):
            q_prime = q + ECCENTRICITY * atanh(ECCENTRICITY * math.tanh(q_prime))

        latitude = math.degrees(math.atan(_checked("isometric latitude", math.sinh, q_prime)))
        longitude = math.degrees(
            CENTRAL_MERIDIAN
            + _checked("longitude", math.asin, math.tanh(eta_prime) / math.cos(beta))
        )
        return GeographicCoordinate(longitude=longitude, latitude=latitude)


_DEFAULT_CONVERTER = ProjectionConverter()


def convert(x: float, y: float) -> ConversionResult:
    """Convert one grid pair with the default (legacy) coefficient table."""
    return _DEFAULT_CONVERTER.convert(x, y)
