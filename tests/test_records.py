import pytest

from pinched.records import SpeciesParameters, read_parameters
from pinched.util import constants


def test_unit_conversion(params):
    assert params.id == 1
    assert params.alpha == (2.0, 2.0, 2.0)
    # MeV -> GeV
    assert params.mean_energy == pytest.approx((0.012, 0.015, 0.018))
    # erg -> GeV
    assert params.luminosity == pytest.approx((5e52 * 624.15,) * 3)


def test_conversion_factor():
    params = SpeciesParameters.from_line(
        "7 2 2 2 10 10 10 1 2 3", gev_per_erg=1.0
    )
    assert params.id == 7
    assert params.luminosity == (1.0, 2.0, 3.0)
    assert constants.erg == 624.15


def test_immutable(params):
    with pytest.raises(AttributeError):
        params.id = 3


@pytest.mark.parametrize(
    "line",
    [
        "1 2.0 2.0 2.0 12 15 18 5e52 5e52",
        "1 2.0 2.0 2.0 12 15 18 5e52 5e52 5e52 5e52",
        "1 2.0 2.0 2.0 12 15 18 5e52 5e52 lots",
        "x 2.0 2.0 2.0 12 15 18 5e52 5e52 5e52",
    ],
)
def test_malformed_line(line):
    with pytest.raises(ValueError):
        SpeciesParameters.from_line(line)


def test_read_parameters(parameter_lines):
    records = list(read_parameters(parameter_lines))
    assert [r.id for r in records] == [1, 2]
    assert records[1].alpha == (3.0, 2.5, 1.5)


def test_comments_and_blank_lines(parameter_lines):
    lines = ["# id alpha E0 L\n", "\n"] + parameter_lines[:1] + ["   \n"] + parameter_lines[1:]
    assert [r.id for r in read_parameters(lines)] == [1, 2]


def test_truncated_stream(parameter_lines):
    lines = parameter_lines + ["3  2.0  2.0  2.0  12  15"]
    assert [r.id for r in read_parameters(lines)] == [1, 2]


def test_garbage_ends_stream(parameter_lines):
    lines = parameter_lines[:1] + ["this is not a record\n"] + parameter_lines[1:]
    assert [r.id for r in read_parameters(lines)] == [1]


def test_empty_stream():
    assert list(read_parameters([])) == []
