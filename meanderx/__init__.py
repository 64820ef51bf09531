# meanderx/__init__.py
"""
MeanderX: Meander synthesis and restoration assessment

This package designs a meandering channel centerline along a straightened
valley line and estimates the hydraulic and ecological response.

Main Functions
-------------
synthesize_meander : Generate the restored channel centerline
compute_hydraulics : Sinuosity, slope, velocity, shear stress and stream power
assess_ecology : Health, habitat, hyporheic and sediment classification
design_channel : Run the full workflow for one design
sweep_designs : Evaluate a grid of amplitudes and wavelengths

"""

from loguru import logger

from .params import GeoPoint
from .params import ValleyLine
from .params import StreamParams
from .config import MeanderConfig
from .config import SmoothingConfig
from .config import SynthesisConfig
from .config import HydraulicConfig
from .config import EcologyConfig
from .axis.axis import SmoothedAxis
from .axis.axis import smooth_axis
from .meander.meander import synthesize_meander
from .hydraulics.hydraulics import HydraulicMetrics
from .hydraulics.hydraulics import compute_hydraulics
from .ecology.rules import StreamHealth
from .ecology.rules import HyporheicPotential
from .ecology.rules import SedimentRegime
from .ecology.ecology import EcologicalAssessment
from .ecology.ecology import assess_ecology
from .design import ChannelDesign
from .core import design_channel
from .core import sweep_designs

logger.disable("meanderx")

__all__ = [
    # main
    "design_channel",
    "sweep_designs",
    # Configuration
    "MeanderConfig",
    "SmoothingConfig",
    "SynthesisConfig",
    "HydraulicConfig",
    "EcologyConfig",
    # Inputs
    "GeoPoint",
    "ValleyLine",
    "StreamParams",
    # Pipeline stages
    "SmoothedAxis",
    "smooth_axis",
    "synthesize_meander",
    "compute_hydraulics",
    "assess_ecology",
    # Results
    "HydraulicMetrics",
    "EcologicalAssessment",
    "ChannelDesign",
    "StreamHealth",
    "HyporheicPotential",
    "SedimentRegime",
]

__version__ = "0.1.0"
