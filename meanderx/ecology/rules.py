"""
Ordered classification rules

Each rule pairs a predicate with the category it assigns. Health and
sediment rules are evaluated in order and the first match wins. Hyporheic
thresholds are ascending and the highest one exceeded wins.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable
from typing import Optional

from meanderx.config import EcologyConfig


class StreamHealth(Enum):
    DEGRADED = "Degraded"
    RECOVERING = "Recovering"
    STABLE = "Stable"
    HIGH_RISK = "High Risk (Avulsion)"


class HyporheicPotential(Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class SedimentRegime(Enum):
    AGGRADATION = "Aggradation (Deposition)"
    EQUILIBRIUM = "Equilibrium"
    DEGRADATION = "Degradation (Scour)"


@dataclass(frozen=True)
class Observation:
    """the values the rules are evaluated against"""

    sinuosity_index: float
    radius_of_curvature: float
    bankfull_width: float
    curvature_ratio: float  # radius of curvature / bankfull width
    stress_ratio: float  # restored / straight channel shear stress


@dataclass(frozen=True)
class Rule:
    name: str
    predicate: Callable[[Observation], bool]
    category: Enum
    warning: Optional[str] = None

    def matches(self, obs: Observation) -> bool:
        return bool(self.predicate(obs))

    def message(self, obs: Observation) -> Optional[str]:
        if self.warning is None:
            return None
        return self.warning.format(
            radius=obs.radius_of_curvature,
            width=obs.bankfull_width,
            ratio=obs.curvature_ratio,
            sinuosity=obs.sinuosity_index,
        )


def health_rules(config: EcologyConfig):
    return [
        Rule(
            "avulsion",
            lambda o: o.curvature_ratio < config.avulsion_ratio
            and o.sinuosity_index > config.avulsion_sinuosity,
            StreamHealth.HIGH_RISK,
            "CRITICAL: Radius of Curvature ({radius:.1f}m) is too tight for width "
            "({width}m). Ratio {ratio:.1f} < " + f"{config.avulsion_ratio}.",
        ),
        Rule(
            "straightened",
            lambda o: o.sinuosity_index < config.degraded_sinuosity,
            StreamHealth.DEGRADED,
            "Channel is straightened. Low habitat diversity.",
        ),
        Rule(
            "recovering",
            lambda o: config.degraded_sinuosity
            < o.sinuosity_index
            < config.stable_sinuosity,
            StreamHealth.RECOVERING,
        ),
        Rule("stable", lambda o: True, StreamHealth.STABLE),
    ]


def hyporheic_thresholds(config: EcologyConfig):
    return [
        (config.hyporheic_medium, HyporheicPotential.MEDIUM),
        (config.hyporheic_high, HyporheicPotential.HIGH),
    ]


def sediment_rules(config: EcologyConfig):
    return [
        Rule(
            "aggradation",
            lambda o: o.stress_ratio < config.aggradation_ratio,
            SedimentRegime.AGGRADATION,
        ),
        Rule(
            "degradation",
            lambda o: o.stress_ratio > config.degradation_ratio,
            SedimentRegime.DEGRADATION,
        ),
        Rule("equilibrium", lambda o: True, SedimentRegime.EQUILIBRIUM),
    ]


def first_match(rules, obs: Observation) -> Rule:
    for rule in rules:
        if rule.matches(obs):
            return rule
    raise ValueError("no rule matched, rule lists must end with a default")


def classify_hyporheic(sinuosity, thresholds) -> HyporheicPotential:
    potential = HyporheicPotential.LOW
    for threshold, category in thresholds:
        if sinuosity > threshold:
            potential = category
    return potential
