# tests/unit/test_params.py

import json

import pytest

from meanderx.config import MeanderConfig
from meanderx.config import SmoothingConfig
from meanderx.params import DEFAULT_VALLEY_LINE
from meanderx.params import GeoPoint
from meanderx.params import StreamParams
from meanderx.params import ValleyLine


def test_default_design():
    params = StreamParams.default()
    assert params.valley_slope == 2.5
    assert params.bankfull_width == 8
    assert params.bankfull_depth == 1.2
    assert params.mannings_n == 0.045
    assert params.wavelength == 100
    assert params.amplitude == 20
    assert len(params.valley_line) == 3
    assert params.validate() is params


def test_lnglat_ordering():
    point = GeoPoint(lat=-29.356, lng=29.997)
    assert point.to_lnglat() == (29.997, -29.356)
    assert GeoPoint.from_lnglat((29.997, -29.356)) == point
    assert DEFAULT_VALLEY_LINE.coords()[0] == (29.997, -29.356)


def test_valley_line_editing_returns_new_lines():
    line = DEFAULT_VALLEY_LINE
    added = line.with_point_added(GeoPoint(lat=-29.350, lng=30.009))
    moved = line.with_point_moved(1, GeoPoint(lat=-29.353, lng=30.001))
    removed = line.with_point_removed(1)

    assert len(line) == 3
    assert len(added) == 4
    assert added[-1] == GeoPoint(lat=-29.350, lng=30.009)
    assert moved[1].lat == -29.353
    assert len(removed) == 2
    assert removed[1] == line[2]


def test_valley_line_keeps_two_points():
    line = DEFAULT_VALLEY_LINE.with_point_removed(0)
    assert line.with_point_removed(0) is line


def test_short_line_has_empty_linestring():
    assert ValleyLine((GeoPoint(lat=0.0, lng=0.0),)).linestring().is_empty


@pytest.mark.parametrize(
    "changes",
    [
        {"valley_slope": -1},
        {"valley_slope": 101},
        {"bankfull_width": 0},
        {"bankfull_depth": -0.5},
        {"mannings_n": 0},
        {"amplitude": -5},
        {"valley_line": ValleyLine((GeoPoint(lat=0.0, lng=0.0),))},
    ],
)
def test_validate_rejects(changes):
    with pytest.raises(ValueError):
        StreamParams.default().replace(**changes).validate()


def test_params_from_dict():
    params = StreamParams.from_dict(
        {
            "amplitude": 40,
            "wavelength": 200,
            "valley_line": [{"lat": 0.0, "lng": 0.0}, {"lat": 0.0, "lng": 0.01}],
        }
    )
    assert params.amplitude == 40
    assert params.bankfull_width == 8
    assert params.valley_line[1] == GeoPoint(lat=0.0, lng=0.01)
    assert StreamParams.from_dict(params.to_dict()) == params


def test_params_from_dict_unknown_key():
    with pytest.raises(ValueError, match="sinuosity"):
        StreamParams.from_dict({"sinuosity": 1.4})


def test_params_from_dict_bad_point():
    with pytest.raises(ValueError):
        StreamParams.from_dict({"valley_line": [{"lat": 0.0}]})


def test_params_str_is_json():
    data = json.loads(str(StreamParams.default()))
    assert data["valley_line"][0] == {"lat": -29.356, "lng": 29.997}


def test_config_from_dict_partial():
    config = MeanderConfig.from_dict(
        {"synthesis": {"points_per_wave": 40}, "smoothing": {"alpha": 0.0}}
    )
    assert config.synthesis.points_per_wave == 40
    assert config.synthesis.min_wavelength == 10
    assert config.smoothing.alpha == 0.0
    assert config.smoothing.method == "catmull_rom"
    assert config.ecology.avulsion_ratio == 2.0


def test_config_from_dict_rejects_unknown():
    with pytest.raises(ValueError):
        MeanderConfig.from_dict({"floor": {}})
    with pytest.raises(ValueError):
        MeanderConfig.from_dict({"ecology": {"avulsion": 3}})


def test_config_round_trip():
    config = MeanderConfig(smoothing=SmoothingConfig(alpha=0.0))
    assert MeanderConfig.from_dict(config.to_dict()) == config
    assert json.loads(str(config))["smoothing"]["alpha"] == 0.0
