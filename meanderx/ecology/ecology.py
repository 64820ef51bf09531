import math

from dataclasses import dataclass
from typing import Tuple

from loguru import logger

from meanderx.config import EcologyConfig
from meanderx.config import HydraulicConfig
from meanderx.ecology.rules import HyporheicPotential
from meanderx.ecology.rules import Observation
from meanderx.ecology.rules import SedimentRegime
from meanderx.ecology.rules import StreamHealth
from meanderx.ecology.rules import classify_hyporheic
from meanderx.ecology.rules import first_match
from meanderx.ecology.rules import health_rules
from meanderx.ecology.rules import hyporheic_thresholds
from meanderx.ecology.rules import sediment_rules
from meanderx.hydraulics.hydraulics import HydraulicMetrics
from meanderx.hydraulics.hydraulics import boundary_shear_stress
from meanderx.hydraulics.hydraulics import hydraulic_radius
from meanderx.params import StreamParams


@dataclass(frozen=True)
class EcologicalAssessment:
    habitat_units: int
    hyporheic_potential: HyporheicPotential
    sediment_transport: SedimentRegime
    health: StreamHealth
    warnings: Tuple[str, ...] = ()

    @property
    def stats(self):
        return {
            "habitat_units": self.habitat_units,
            "hyporheic_potential": self.hyporheic_potential.value,
            "sediment_transport": self.sediment_transport.value,
        }

    def to_dict(self):
        return {
            "stats": self.stats,
            "health": self.health.value,
            "warnings": list(self.warnings),
        }


def habitat_units(channel_length, bankfull_width, spacing=6):
    """number of pool-riffle units, one every `spacing` channel widths"""
    if bankfull_width <= 0:
        return 0
    return int(math.floor(channel_length / (spacing * bankfull_width)))


def observe(metrics: HydraulicMetrics, params: StreamParams, hydraulics: HydraulicConfig):
    if params.bankfull_width > 0:
        curvature_ratio = metrics.radius_of_curvature / params.bankfull_width
    else:
        curvature_ratio = math.inf

    # same hydraulic radius, slope of the straightened channel
    reference = 0.0
    if metrics.original_slope > 0 and params.bankfull_width + 2 * params.bankfull_depth > 0:
        reference = boundary_shear_stress(
            hydraulic_radius(params.bankfull_width, params.bankfull_depth),
            metrics.original_slope,
            hydraulics.rho,
            hydraulics.g,
        )
    stress_ratio = metrics.shear_stress / reference if reference > 0 else 1.0

    return Observation(
        sinuosity_index=metrics.sinuosity_index,
        radius_of_curvature=metrics.radius_of_curvature,
        bankfull_width=params.bankfull_width,
        curvature_ratio=curvature_ratio,
        stress_ratio=stress_ratio,
    )


def assess_ecology(
    metrics: HydraulicMetrics,
    params: StreamParams,
    config: EcologyConfig = None,
    hydraulics: HydraulicConfig = None,
) -> EcologicalAssessment:
    """
    Classify the ecological and geomorphic outlook of a design

    Parameters
    ----------
    metrics : HydraulicMetrics
        Output of compute_hydraulics for the design
    params : StreamParams
        The same design parameters
    config : EcologyConfig, optional
        Classification thresholds
    hydraulics : HydraulicConfig, optional
        Physical constants for the reference shear stress

    Returns
    -------
    EcologicalAssessment
        habitat units, hyporheic potential, sediment regime, health and any
        warnings raised by the health rules
    """
    if config is None:
        config = EcologyConfig()
    if hydraulics is None:
        hydraulics = HydraulicConfig()

    obs = observe(metrics, params, hydraulics)

    health_rule = first_match(health_rules(config), obs)
    warnings = []
    message = health_rule.message(obs)
    if message is not None:
        logger.warning(message)
        warnings.append(message)

    sediment = first_match(sediment_rules(config), obs).category
    hyporheic = classify_hyporheic(obs.sinuosity_index, hyporheic_thresholds(config))

    assessment = EcologicalAssessment(
        habitat_units=habitat_units(
            metrics.channel_length, params.bankfull_width, config.pool_riffle_spacing
        ),
        hyporheic_potential=hyporheic,
        sediment_transport=sediment,
        health=health_rule.category,
        warnings=tuple(warnings),
    )
    logger.debug(
        f"health {assessment.health.value} ({health_rule.name}), "
        f"stress ratio {obs.stress_ratio:.2f}, {assessment.habitat_units} habitat units"
    )
    return assessment
