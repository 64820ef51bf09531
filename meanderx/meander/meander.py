"""
Meander synthesis along the smoothed valley axis

1. sample the axis at equal arc-length steps, points_per_wave per wavelength
2. offset each sample perpendicular to the local bearing by a sinusoid in
   arc length, damped to zero at both ends of the reach
3. connect the displaced points into the restored channel centerline
"""

import math

import numpy as np
from loguru import logger
from shapely.geometry import LineString

from meanderx.axis.axis import SmoothedAxis
from meanderx.axis.axis import smooth_axis
from meanderx.config import SmoothingConfig
from meanderx.config import SynthesisConfig
from meanderx.params import ValleyLine
from meanderx.utils.geodesy import destination


def synthesize_meander(
    valley_line: ValleyLine,
    amplitude: float,
    wavelength: float,
    points_per_wave: int = None,
    smoothing: SmoothingConfig = None,
    synthesis: SynthesisConfig = None,
) -> LineString:
    """
    Generate a meandering channel centerline along a valley line

    Parameters
    ----------
    valley_line : ValleyLine
        Ordered valley points
    amplitude : float
        Design meander amplitude in meters
    wavelength : float
        Design meander wavelength in meters, floored at
        synthesis.min_wavelength
    points_per_wave : int, optional
        Overrides synthesis.points_per_wave (default 20)
    smoothing : SmoothingConfig, optional
        Axis spline parameters
    synthesis : SynthesisConfig, optional
        Generator parameters

    Returns
    -------
    LineString
        Channel centerline in (lng, lat), empty if the valley line has fewer
        than two points
    """
    if synthesis is None:
        synthesis = SynthesisConfig()
    if points_per_wave is None:
        points_per_wave = synthesis.points_per_wave

    if len(valley_line) < 2:
        logger.debug("valley line has fewer than 2 points, returning empty path")
        return LineString()

    axis = smooth_axis(valley_line, smoothing)
    return meander_along_axis(
        axis,
        amplitude,
        wavelength,
        points_per_wave,
        synthesis.min_wavelength,
        synthesis.dampening_exponent,
    )


def meander_along_axis(
    axis: SmoothedAxis,
    amplitude,
    wavelength,
    points_per_wave=20,
    min_wavelength=10,
    dampening_exponent=0.2,
) -> LineString:
    axis_length = axis.length()
    safe_wavelength = max(wavelength, min_wavelength)
    total_steps = math.ceil((axis_length / safe_wavelength) * points_per_wave)

    if total_steps == 0:
        fractions = np.zeros(1)
    else:
        fractions = np.arange(total_steps + 1) / total_steps
    distances = fractions * axis_length

    lons, lats, bearings = axis.sample(distances)

    # zero at both ends, close to 1 over most of the reach
    dampening = np.sin(fractions * np.pi) ** dampening_exponent
    offsets = amplitude * dampening * np.sin(2 * np.pi * distances / safe_wavelength)

    offset_bearings = np.where(offsets > 0, bearings + 90, bearings + 270)
    mlons, mlats = destination(lons, lats, offset_bearings, np.abs(offsets))

    logger.debug(
        f"meander: {len(distances)} points over {axis_length:.1f} m, "
        f"wavelength {safe_wavelength} m, amplitude {amplitude} m"
    )

    coords = list(zip(np.atleast_1d(mlons), np.atleast_1d(mlats)))
    if len(coords) < 2:
        # a single point cannot form a linestring, repeat it
        coords = coords * 2
    return LineString(coords)
