"""Design inputs: valley points and stream parameters."""

import json

from dataclasses import dataclass
from dataclasses import field
from dataclasses import fields
from dataclasses import asdict
from dataclasses import replace as dc_replace
from typing import Tuple

from shapely.geometry import LineString


@dataclass(frozen=True)
class GeoPoint:
    """Latitude / longitude pair in decimal degrees (WGS84)"""

    lat: float
    lng: float

    def to_lnglat(self) -> Tuple[float, float]:
        return (self.lng, self.lat)

    @classmethod
    def from_lnglat(cls, coord):
        return cls(lat=float(coord[1]), lng=float(coord[0]))


@dataclass(frozen=True)
class ValleyLine:
    """Ordered valley points defining the straightened reference alignment

    The line is immutable, editing operations return a new line.
    """

    points: Tuple[GeoPoint, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "points", tuple(self.points))

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def __getitem__(self, index):
        return self.points[index]

    @classmethod
    def from_lnglat(cls, coords):
        return cls(tuple(GeoPoint.from_lnglat(c) for c in coords))

    @classmethod
    def from_linestring(cls, linestring: LineString):
        return cls.from_lnglat(linestring.coords)

    def coords(self):
        """(lng, lat) tuples, the ordering used by shapely"""
        return [p.to_lnglat() for p in self.points]

    def linestring(self) -> LineString:
        if len(self.points) < 2:
            return LineString()
        return LineString(self.coords())

    def with_point_added(self, point: GeoPoint):
        return ValleyLine(self.points + (point,))

    def with_point_moved(self, index: int, point: GeoPoint):
        points = list(self.points)
        points[index] = point
        return ValleyLine(tuple(points))

    def with_point_removed(self, index: int):
        # a valley line keeps at least two points
        if len(self.points) <= 2:
            return self
        points = list(self.points)
        del points[index]
        return ValleyLine(tuple(points))


# Nottingham Road, KwaZulu-Natal
DEFAULT_VALLEY_LINE = ValleyLine(
    (
        GeoPoint(lat=-29.356, lng=29.997),
        GeoPoint(lat=-29.354, lng=30.001),
        GeoPoint(lat=-29.352, lng=30.005),
    )
)


@dataclass(frozen=True)
class StreamParams:
    """Design parameters for a restored reach

    Parameters
    ----------
    valley_slope : float, default=2.5
        Valley gradient in percent (0-100)
    bankfull_width : float, default=8
        Bankfull channel width in meters
    bankfull_depth : float, default=1.2
        Bankfull channel depth in meters
    mannings_n : float, default=0.045
        Manning roughness coefficient
    sinuosity_target : float, default=1.0
        Target sinuosity, informational only
    wavelength : float, default=100
        Design meander wavelength in meters
    amplitude : float, default=20
        Design meander amplitude in meters
    valley_line : ValleyLine
        Ordered points of the straightened valley axis
    """

    valley_slope: float = 2.5  # percent
    bankfull_width: float = 8  # meters
    bankfull_depth: float = 1.2  # meters
    mannings_n: float = 0.045
    sinuosity_target: float = 1.0
    wavelength: float = 100  # meters
    amplitude: float = 20  # meters
    valley_line: ValleyLine = field(default_factory=lambda: DEFAULT_VALLEY_LINE)

    @classmethod
    def default(cls):
        return cls()

    def replace(self, **changes):
        return dc_replace(self, **changes)

    def validate(self):
        """Raise a ValueError if the parameters cannot be evaluated"""
        if not 0 <= self.valley_slope <= 100:
            raise ValueError(
                f"valley_slope must be between 0 and 100 percent, got {self.valley_slope}"
            )
        if self.bankfull_width <= 0:
            raise ValueError(
                f"bankfull_width must be positive, got {self.bankfull_width}"
            )
        if self.bankfull_depth <= 0:
            raise ValueError(
                f"bankfull_depth must be positive, got {self.bankfull_depth}"
            )
        if self.mannings_n <= 0:
            raise ValueError(f"mannings_n must be positive, got {self.mannings_n}")
        if self.amplitude < 0:
            raise ValueError(f"amplitude must not be negative, got {self.amplitude}")
        if len(self.valley_line) < 2:
            raise ValueError(
                f"valley_line needs at least 2 points, got {len(self.valley_line)}"
            )
        return self

    def to_dict(self):
        params = asdict(self)
        params["valley_line"] = [asdict(p) for p in self.valley_line]
        return params

    @classmethod
    def from_dict(cls, params):
        """Build parameters from a dictionary, e.g. the [stream] table of a
        TOML parameter file. valley_line is a list of {lat, lng} tables."""
        params = dict(params)
        unknown = set(params) - {f.name for f in fields(cls)}
        if unknown:
            raise ValueError(f"Unknown stream parameters: {', '.join(sorted(unknown))}")
        if "valley_line" in params:
            try:
                points = [GeoPoint(lat=p["lat"], lng=p["lng"]) for p in params["valley_line"]]
            except KeyError as e:
                raise ValueError(f"valley_line point missing key: {e}") from e
            params["valley_line"] = ValleyLine(tuple(points))
        return cls(**params)

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), indent=4)
