import pytest
import numpy as np

from pinched.records import SpeciesParameters


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    # keep a user's settings from leaking into the tests
    monkeypatch.delenv("PINCHED_CONFIG", raising=False)
    monkeypatch.delenv("OUTFLUXDIR", raising=False)


@pytest.fixture(scope="session")
def parameter_lines():
    return [
        "1  2.0  2.0  2.0  12  15  18  5e52  5e52  5e52\n",
        "2  3.0  2.5  1.5  10  14  16  2e52  3e52  4e52\n",
    ]


@pytest.fixture
def params(parameter_lines):
    return SpeciesParameters.from_line(parameter_lines[0])


@pytest.fixture
def outdir(tmp_path):
    """An output root with hierarchy subdirectories"""
    for subdir in ("nh", "ih"):
        (tmp_path / subdir).mkdir()
    return tmp_path


@pytest.fixture
def workdir(tmp_path, monkeypatch, parameter_lines):
    """A working directory holding a parameter file, with OUTFLUXDIR set"""
    out = tmp_path / "fluxes"
    for subdir in ("", "nh", "ih"):
        (out / subdir).mkdir(exist_ok=True)
    (tmp_path / "pinched_info.dat").write_text("".join(parameter_lines))
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OUTFLUXDIR", str(out))
    return out


@pytest.fixture(scope="session")
def triples():
    rng = np.random.default_rng(12345)
    return rng.uniform(0, 1e10, size=(200, 3))
