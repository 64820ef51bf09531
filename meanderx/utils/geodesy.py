import numpy as np
import geopandas as gpd
from pyproj import Geod
from shapely.geometry import LineString

WGS84 = "EPSG:4326"
GEOD = Geod(ellps="WGS84")


def geodesic_length(linestring: LineString) -> float:
    """length in meters of a lng/lat linestring, 0 for empty lines"""
    if linestring is None or linestring.is_empty or len(linestring.coords) < 2:
        return 0.0
    return float(GEOD.geometry_length(linestring))


def segment_geodesics(lons, lats):
    """forward azimuth and length of each segment of a lng/lat vertex sequence"""
    lons = np.asarray(lons, dtype=float)
    lats = np.asarray(lats, dtype=float)
    if len(lons) < 2:
        return np.array([]), np.array([])
    azimuths, _, distances = GEOD.inv(lons[:-1], lats[:-1], lons[1:], lats[1:])
    return np.atleast_1d(azimuths), np.atleast_1d(distances)


def bearing(lons1, lats1, lons2, lats2):
    azimuths, _, _ = GEOD.inv(lons1, lats1, lons2, lats2)
    return azimuths


def destination(lons, lats, azimuths, distances):
    """point reached by travelling distances (m) along azimuths (deg)"""
    lons, lats, _ = GEOD.fwd(lons, lats, azimuths, distances)
    return lons, lats


def local_crs(geometry):
    """metric UTM crs for the zone containing the geometry"""
    return gpd.GeoSeries([geometry], crs=WGS84).estimate_utm_crs()


def reproject(geometry, src_crs, dst_crs):
    return gpd.GeoSeries([geometry], crs=src_crs).to_crs(dst_crs).iloc[0]
