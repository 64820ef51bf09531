"""
Hydraulic consequences of a channel redesign

All quantities are SI. Slopes are decimal (m/m), not percent.

sinuosity          SI = channel length / valley length, never below 1
channel slope      S = valley slope / SI
hydraulic radius   R = W * D / (W + 2D)
manning velocity   v = (1 / n) * R^(2/3) * S^(1/2)
shear stress       tau = rho * g * R * S
stream power       omega = rho * g * Q * S, Q = v * W * D
radius of curv.    rc = L^2 / (4 pi^2 A)
"""

import math

from dataclasses import dataclass
from dataclasses import asdict

import pandas as pd
from loguru import logger
from shapely.geometry import LineString

from meanderx.config import HydraulicConfig
from meanderx.params import StreamParams
from meanderx.utils.geodesy import geodesic_length


@dataclass(frozen=True)
class HydraulicMetrics:
    original_slope: float
    new_slope: float
    sinuosity_index: float
    original_velocity: float  # m/s
    new_velocity: float  # m/s
    shear_stress: float  # Pa
    stream_power: float  # W/m
    channel_length: float  # m
    valley_length: float  # m
    radius_of_curvature: float  # m

    @property
    def added_length(self) -> float:
        return self.channel_length - self.valley_length

    def comparison(self) -> pd.DataFrame:
        """straight vs restored velocity and slope"""
        return pd.DataFrame(
            {
                "original": [self.original_velocity, self.original_slope * 100],
                "new": [self.new_velocity, self.new_slope * 100],
            },
            index=pd.Index(["velocity (m/s)", "slope (%)"], name="metric"),
        )

    def to_dict(self):
        return asdict(self)


def sinuosity_index(channel_length, valley_length):
    if valley_length <= 0:
        return 1.0
    return max(1.0, channel_length / valley_length)


def hydraulic_radius(width, depth):
    perimeter = width + 2 * depth
    if perimeter <= 0:
        raise ValueError(f"wetted perimeter must be positive, got {perimeter}")
    return (width * depth) / perimeter


def manning_velocity(radius, slope, mannings_n):
    return (1 / mannings_n) * radius ** (2 / 3) * slope**0.5


def boundary_shear_stress(radius, slope, rho=1000, g=9.81):
    return rho * g * radius * slope


def stream_power(discharge, slope, rho=1000, g=9.81):
    return rho * g * discharge * slope


def radius_of_curvature(wavelength, amplitude):
    if amplitude <= 0:
        return 0.0
    return wavelength**2 / (4 * math.pi**2 * amplitude)


def compute_hydraulics(
    params: StreamParams,
    meander_path: LineString,
    config: HydraulicConfig = None,
) -> HydraulicMetrics:
    """
    Estimate the hydraulics of the straight and the restored channel

    Parameters
    ----------
    params : StreamParams
        Design parameters, bankfull width, depth and mannings n must be
        positive
    meander_path : LineString
        Restored channel centerline in (lng, lat), may be empty
    config : HydraulicConfig, optional
        Physical constants

    Returns
    -------
    HydraulicMetrics
    """
    if config is None:
        config = HydraulicConfig()

    for name in ["bankfull_width", "bankfull_depth", "mannings_n"]:
        value = getattr(params, name)
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")
    if params.valley_slope < 0:
        raise ValueError(f"valley_slope must not be negative, got {params.valley_slope}")

    valley_length = geodesic_length(params.valley_line.linestring())
    channel_length = geodesic_length(meander_path)
    si = sinuosity_index(channel_length, valley_length)

    original_slope = params.valley_slope / 100
    new_slope = original_slope / si

    w = params.bankfull_width
    d = params.bankfull_depth
    radius = hydraulic_radius(w, d)

    original_velocity = manning_velocity(radius, original_slope, params.mannings_n)
    new_velocity = manning_velocity(radius, new_slope, params.mannings_n)

    discharge = new_velocity * w * d

    metrics = HydraulicMetrics(
        original_slope=original_slope,
        new_slope=new_slope,
        sinuosity_index=si,
        original_velocity=original_velocity,
        new_velocity=new_velocity,
        shear_stress=boundary_shear_stress(radius, new_slope, config.rho, config.g),
        stream_power=stream_power(discharge, new_slope, config.rho, config.g),
        channel_length=channel_length,
        valley_length=valley_length,
        radius_of_curvature=radius_of_curvature(params.wavelength, params.amplitude),
    )
    logger.debug(
        f"valley {valley_length:.1f} m, channel {channel_length:.1f} m, "
        f"sinuosity {si:.3f}, velocity {original_velocity:.2f} -> {new_velocity:.2f} m/s"
    )
    return metrics
