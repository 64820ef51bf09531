"""
Smoothed valley axis

1. project the valley points into a local UTM zone
2. fit an interpolating spline through them
3. project the curve back to lng/lat and index it by geodesic arc length

Arc-length queries follow the geodesic of the segment that contains the
requested distance, so positions are exact on the WGS84 ellipsoid for the
sampled curve.
"""

import numpy as np
from loguru import logger
from shapely.geometry import LineString

from meanderx.axis.smooth import distinct_coords
from meanderx.axis.smooth import smooth_linestring
from meanderx.config import SmoothingConfig
from meanderx.params import GeoPoint
from meanderx.params import ValleyLine
from meanderx.utils.geodesy import WGS84
from meanderx.utils.geodesy import bearing
from meanderx.utils.geodesy import destination
from meanderx.utils.geodesy import local_crs
from meanderx.utils.geodesy import reproject
from meanderx.utils.geodesy import segment_geodesics


class SmoothedAxis:
    def __init__(self, linestring: LineString, lookahead: float = 1):
        coords = np.asarray(linestring.coords, dtype=float)[:, :2]
        if not np.isfinite(coords).all():
            raise ValueError("axis coordinates must be finite")

        # drop repeated vertices so every segment has a defined azimuth
        coords = np.asarray(distinct_coords(coords), dtype=float)
        azimuths, distances = segment_geodesics(coords[:, 0], coords[:, 1])
        if (distances <= 0).any():
            coords = coords[np.concatenate([[True], distances > 0])]
            azimuths, distances = segment_geodesics(coords[:, 0], coords[:, 1])

        self.linestring = linestring
        self.lookahead = lookahead
        self._lons = coords[:, 0]
        self._lats = coords[:, 1]
        self._azimuths = azimuths
        self._cumulative = np.concatenate([[0.0], np.cumsum(distances)])

    def length(self) -> float:
        return float(self._cumulative[-1])

    def positions(self, distances):
        """lng/lat arrays of the points at the given arc lengths"""
        distances = np.clip(np.atleast_1d(np.asarray(distances, dtype=float)), 0, self.length())
        if len(self._azimuths) == 0:
            return (
                np.full(distances.shape, self._lons[0]),
                np.full(distances.shape, self._lats[0]),
            )
        index = self._segment_index(distances)
        remaining = distances - self._cumulative[index]
        return destination(
            self._lons[index], self._lats[index], self._azimuths[index], remaining
        )

    def bearings(self, distances, positions=None):
        """forward azimuth in degrees at the given arc lengths

        positions, the (lons, lats) of the same distances, skips recomputing
        the points on the axis.
        """
        distances = np.clip(np.atleast_1d(np.asarray(distances, dtype=float)), 0, self.length())
        if len(self._azimuths) == 0:
            return np.zeros(distances.shape)
        if positions is None:
            positions = self.positions(distances)
        lons, lats = positions
        ahead = np.minimum(distances + self.lookahead, self.length())
        ahead_lons, ahead_lats = self.positions(ahead)
        azimuths = np.atleast_1d(bearing(lons, lats, ahead_lons, ahead_lats))

        # at the end of the curve there is nothing to look ahead to
        at_end = (ahead - distances) <= 1e-9
        segment_azimuths = self._azimuths[self._segment_index(distances)]
        return np.where(at_end, segment_azimuths, azimuths)

    def sample(self, distances):
        """positions and bearings for a batch of arc lengths"""
        lons, lats = self.positions(distances)
        return lons, lats, self.bearings(distances, positions=(lons, lats))

    def point_at(self, distance: float) -> GeoPoint:
        lons, lats = self.positions(distance)
        return GeoPoint(lat=float(lats[0]), lng=float(lons[0]))

    def bearing_at(self, distance: float) -> float:
        return float(self.bearings(distance)[0])

    def _segment_index(self, distances):
        index = np.searchsorted(self._cumulative, distances, side="right") - 1
        return np.clip(index, 0, len(self._azimuths) - 1)


def smooth_axis(valley_line: ValleyLine, config: SmoothingConfig = None) -> SmoothedAxis:
    """
    Fit the smoothed valley axis through the valley points

    Parameters
    ----------
    valley_line : ValleyLine
        Ordered valley points, at least two
    config : SmoothingConfig, optional
        Spline parameters. Run help(SmoothingConfig) for details

    Returns
    -------
    SmoothedAxis
        Curve supporting length, point_at and bearing_at queries
    """
    if config is None:
        config = SmoothingConfig()

    if len(valley_line) < 2:
        raise ValueError(f"valley line needs at least 2 points, got {len(valley_line)}")

    line = valley_line.linestring()
    if len(distinct_coords(line.coords)) > 2:
        crs = local_crs(line)
        smoothed = smooth_linestring(reproject(line, WGS84, crs), config)
        line = reproject(smoothed, crs, WGS84)

    axis = SmoothedAxis(line, config.lookahead)
    logger.debug(
        f"smoothed axis: {len(valley_line)} valley points, "
        f"{len(line.coords)} curve points, {axis.length():.1f} m"
    )
    return axis
