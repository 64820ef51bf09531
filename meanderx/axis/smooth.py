from shapely.geometry import LineString
from shapelysmooth import catmull_rom_smooth

from meanderx.config import SmoothingConfig


def distinct_coords(coords):
    """drop consecutive repeated vertices, splines need non-zero knot intervals"""
    distinct = []
    for coord in coords:
        if not distinct or tuple(coord) != tuple(distinct[-1]):
            distinct.append(tuple(coord))
    return distinct


def smooth_linestring(linestring: LineString, config: SmoothingConfig) -> LineString:
    """Fit a smooth curve through the vertices of a projected linestring.

    Catmull-Rom passes through every vertex with a continuous tangent, so
    bearings measured along the result do not jump at the input points.
    Lines with fewer than three distinct vertices are returned as a straight
    segment.
    """
    coords = distinct_coords(linestring.coords)
    if len(coords) < 3:
        return LineString([coords[0], coords[-1]])

    if config.method == "catmull_rom":
        return catmull_rom_smooth(
            LineString(coords), alpha=config.alpha, subdivs=config.subdivs
        )
    raise ValueError(f"unknown smoothing method: {config.method}")
