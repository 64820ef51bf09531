import json

from dataclasses import dataclass
from dataclasses import field
from dataclasses import fields
from dataclasses import asdict


SMOOTHING_METHODS = ["catmull_rom"]


@dataclass
class SmoothingConfig:
    """Parameters for Valley Axis Smoothing

    Parameters
    ----------
    method : str, default="catmull_rom"
        Curve fitted through the valley points. "catmull_rom" passes through
        every input point, so the axis is never shorter than the valley line
    alpha : float, default=0.5
        Catmull-Rom parametrization, 0 is uniform, 0.5 centripetal and 1
        chordal. Lower values give sharper turns at the input points
    subdivs : int, default=50
        Number of curve points generated between each pair of input points
    lookahead : float, default=1
        Distance ahead along the axis in meters used to measure the tangent
        bearing
    """

    method: str = "catmull_rom"
    alpha: float = 0.5
    subdivs: int = 50
    lookahead: float = 1  # meters

    def __post_init__(self):
        if self.method not in SMOOTHING_METHODS:
            raise ValueError(f"method needs to be one of {SMOOTHING_METHODS}")


@dataclass
class SynthesisConfig:
    """Parameters for Meander Synthesis

    Parameters
    ----------
    points_per_wave : int, default=20
        Number of centerline points generated per meander wavelength
    min_wavelength : float, default=10
        Floor on the design wavelength in meters
    dampening_exponent : float, default=0.2
        Exponent on the sin(pi * f) envelope that pins the meander to the
        valley ends. Small values keep the amplitude near full over most of
        the reach
    """

    points_per_wave: int = 20
    min_wavelength: float = 10  # meters
    dampening_exponent: float = 0.2


@dataclass
class HydraulicConfig:
    """Physical constants for the hydraulic estimates

    Parameters
    ----------
    rho : float, default=1000
        Density of water in kg/m^3
    g : float, default=9.81
        Gravitational acceleration in m/s^2
    """

    rho: float = 1000  # kg/m3
    g: float = 9.81  # m/s2


@dataclass
class EcologyConfig:
    """Thresholds for the ecological and geomorphic assessment

    Parameters
    ----------
    pool_riffle_spacing : float, default=6
        Spacing of pool-riffle units in bankfull widths
    avulsion_ratio : float, default=2.0
        Radius of curvature to bankfull width ratio below which a bend is
        too tight for the channel
    avulsion_sinuosity : float, default=1.05
        Sinuosity that must be exceeded before the avulsion check applies
    degraded_sinuosity : float, default=1.2
        Channels below this sinuosity are considered straightened
    stable_sinuosity : float, default=1.5
        Upper bound of the recovering band
    hyporheic_medium : float, default=1.3
        Sinuosity above which hyporheic potential is Medium
    hyporheic_high : float, default=1.5
        Sinuosity above which hyporheic potential is High
    aggradation_ratio : float, default=0.6
        Shear stress ratio (restored / straight) below which the reach
        deposits sediment
    degradation_ratio : float, default=1.2
        Shear stress ratio above which the reach scours
    """

    pool_riffle_spacing: float = 6  # bankfull widths
    avulsion_ratio: float = 2.0
    avulsion_sinuosity: float = 1.05
    degraded_sinuosity: float = 1.2
    stable_sinuosity: float = 1.5
    hyporheic_medium: float = 1.3
    hyporheic_high: float = 1.5
    aggradation_ratio: float = 0.6
    degradation_ratio: float = 1.2


@dataclass
class MeanderConfig:
    """Complete Configuration for the Meander Design Workflow
    Parameters
    ----------
    smoothing : SmoothingConfig
        Configuration for the valley axis. Run help(SmoothingConfig) for
        details
    synthesis : SynthesisConfig
        Configuration for the meander generator. Run help(SynthesisConfig)
        for details
    hydraulics : HydraulicConfig
        Physical constants. Run help(HydraulicConfig) for details
    ecology : EcologyConfig
        Assessment thresholds. Run help(EcologyConfig) for details

    Examples
    --------
    Create a configuration with default parameters:

    >>> config = MeanderConfig()

    Create a configuration with custom parameters:

    >>> config = MeanderConfig()
    >>> config.synthesis.points_per_wave = 40

    """

    smoothing: SmoothingConfig = field(default_factory=SmoothingConfig)
    synthesis: SynthesisConfig = field(default_factory=SynthesisConfig)
    hydraulics: HydraulicConfig = field(default_factory=HydraulicConfig)
    ecology: EcologyConfig = field(default_factory=EcologyConfig)

    def to_dict(self):
        """Convert the entire config to a nested dictionary"""
        return asdict(self)

    @classmethod
    def from_dict(cls, params):
        """Build a config from a nested dictionary, e.g. a parsed TOML table

        Sections and keys that are missing keep their defaults. Unknown
        sections or keys raise a ValueError.
        """
        sections = {f.name: f.default_factory for f in fields(cls)}
        kwargs = {}
        for name, values in (params or {}).items():
            if name not in sections:
                raise ValueError(f"Unknown config section: {name}")
            section_cls = sections[name]
            known = {f.name for f in fields(section_cls)}
            unknown = set(values) - known
            if unknown:
                raise ValueError(
                    f"Unknown keys in [{name}]: {', '.join(sorted(unknown))}"
                )
            kwargs[name] = section_cls(**values)
        return cls(**kwargs)

    def __str__(self) -> str:
        """Convert the config to a string"""
        return json.dumps(self.to_dict(), indent=4)
