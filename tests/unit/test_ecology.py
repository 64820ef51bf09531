# tests/unit/test_ecology.py

import math

import pytest

from meanderx.config import EcologyConfig
from meanderx.ecology.ecology import assess_ecology
from meanderx.ecology.ecology import habitat_units
from meanderx.ecology.rules import HyporheicPotential
from meanderx.ecology.rules import Observation
from meanderx.ecology.rules import SedimentRegime
from meanderx.ecology.rules import StreamHealth
from meanderx.ecology.rules import first_match
from meanderx.ecology.rules import health_rules
from meanderx.hydraulics.hydraulics import HydraulicMetrics
from meanderx.hydraulics.hydraulics import hydraulic_radius
from meanderx.params import StreamParams


@pytest.fixture
def params():
    return StreamParams.default()


def make_metrics(si, rc, original_slope=0.025, channel_length=1000.0, shear_stress=None):
    """metrics consistent with the default 8 m x 1.2 m channel"""
    new_slope = original_slope / si
    if shear_stress is None:
        shear_stress = 1000 * 9.81 * hydraulic_radius(8, 1.2) * new_slope
    return HydraulicMetrics(
        original_slope=original_slope,
        new_slope=new_slope,
        sinuosity_index=si,
        original_velocity=1.0,
        new_velocity=1.0 / math.sqrt(si),
        shear_stress=shear_stress,
        stream_power=0.0,
        channel_length=channel_length,
        valley_length=channel_length / si,
        radius_of_curvature=rc,
    )


@pytest.mark.parametrize(
    "si, rc, expected",
    [
        (1.3, 10.0, StreamHealth.HIGH_RISK),
        (1.1, 100.0, StreamHealth.DEGRADED),
        (1.3, 100.0, StreamHealth.RECOVERING),
        (1.6, 100.0, StreamHealth.STABLE),
        # the recovering band is open on both ends
        (1.2, 100.0, StreamHealth.STABLE),
        (1.5, 100.0, StreamHealth.STABLE),
        # no bend, no avulsion check
        (1.0, 0.0, StreamHealth.DEGRADED),
    ],
)
def test_health_classification(params, si, rc, expected):
    result = assess_ecology(make_metrics(si, rc), params)
    assert result.health == expected


def test_high_risk_warning_cites_geometry(params):
    result = assess_ecology(make_metrics(1.3, 10.0), params)
    assert len(result.warnings) == 1
    assert "10.0m" in result.warnings[0]
    assert "too tight" in result.warnings[0]
    assert "8" in result.warnings[0]


def test_degraded_warning(params):
    result = assess_ecology(make_metrics(1.1, 100.0), params)
    assert result.warnings == ("Channel is straightened. Low habitat diversity.",)


def test_recovering_has_no_warnings(params):
    assert assess_ecology(make_metrics(1.3, 100.0), params).warnings == ()


def test_avulsion_boundary(params):
    # radius of curvature just under twice the 8 m width
    rc = 2.0 * 8 * 0.995
    assert assess_ecology(make_metrics(1.06, rc), params).health == StreamHealth.HIGH_RISK
    assert assess_ecology(make_metrics(1.05, rc), params).health != StreamHealth.HIGH_RISK
    assert assess_ecology(make_metrics(1.06, 16.0), params).health != StreamHealth.HIGH_RISK


def test_zero_width_never_flags_avulsion(params):
    result = assess_ecology(make_metrics(1.3, 1.0), params.replace(bankfull_width=0))
    assert result.health != StreamHealth.HIGH_RISK
    assert result.habitat_units == 0


def test_rules_are_ordered():
    rules = health_rules(EcologyConfig())
    assert [r.category for r in rules] == [
        StreamHealth.HIGH_RISK,
        StreamHealth.DEGRADED,
        StreamHealth.RECOVERING,
        StreamHealth.STABLE,
    ]
    # tight and straight matches the avulsion rule first
    obs = Observation(1.1, 5.0, 8.0, 5.0 / 8.0, 1.0)
    assert first_match(rules, obs).name == "avulsion"


@pytest.mark.parametrize(
    "si, expected",
    [
        (1.0, HyporheicPotential.LOW),
        (1.3, HyporheicPotential.LOW),
        (1.31, HyporheicPotential.MEDIUM),
        (1.5, HyporheicPotential.MEDIUM),
        (1.51, HyporheicPotential.HIGH),
    ],
)
def test_hyporheic_potential(params, si, expected):
    assert assess_ecology(make_metrics(si, 100.0), params).hyporheic_potential == expected


@pytest.mark.parametrize(
    "si, expected",
    [
        (1.0, SedimentRegime.EQUILIBRIUM),
        (1.5, SedimentRegime.EQUILIBRIUM),
        (2.0, SedimentRegime.AGGRADATION),
    ],
)
def test_sediment_regime(params, si, expected):
    assert assess_ecology(make_metrics(si, 100.0), params).sediment_transport == expected


def test_sediment_degradation(params):
    reference = 1000 * 9.81 * hydraulic_radius(8, 1.2) * 0.025
    metrics = make_metrics(1.0, 100.0, shear_stress=1.5 * reference)
    assert assess_ecology(metrics, params).sediment_transport == SedimentRegime.DEGRADATION


def test_flat_valley_is_in_equilibrium(params):
    metrics = make_metrics(1.3, 100.0, original_slope=0.0)
    assert assess_ecology(metrics, params).sediment_transport == SedimentRegime.EQUILIBRIUM


@pytest.mark.parametrize(
    "length, width, expected", [(480, 8, 10), (479, 8, 9), (0, 8, 0), (100, 0, 0)]
)
def test_habitat_units(length, width, expected):
    assert habitat_units(length, width) == expected


def test_custom_thresholds(params):
    config = EcologyConfig(degraded_sinuosity=1.05)
    result = assess_ecology(make_metrics(1.1, 100.0), params, config)
    assert result.health == StreamHealth.RECOVERING


def test_stats(params):
    result = assess_ecology(make_metrics(1.3, 100.0, channel_length=960), params)
    assert result.stats == {
        "habitat_units": 20,
        "hyporheic_potential": "Low",
        "sediment_transport": "Equilibrium",
    }
    assert result.to_dict()["health"] == "Recovering"
