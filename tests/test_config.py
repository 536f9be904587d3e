import pytest

from pinched.config import Configuration, ConfigurationError


def test_defaults():
    config = Configuration()
    assert config["distance_cm"] == pytest.approx(3.08568025e22)
    assert config["gev_per_erg"] == pytest.approx(624.15)
    assert config["energy_step"] == pytest.approx(0.0002)
    assert config["energy_bins"] == 500
    assert config["columns"] == 7
    assert config["hierarchy_dirs"] == {"normal": "nh", "inverted": "ih"}


def test_override_file(tmp_path):
    override = tmp_path / "override.yaml"
    override.write_text("columns: 4\nenergy_bins: 100\n")
    config = Configuration(str(override))
    assert config["columns"] == 4
    assert config["energy_bins"] == 100
    assert config["energy_step"] == pytest.approx(0.0002)


def test_override_from_environment(tmp_path, monkeypatch):
    override = tmp_path / "override.yaml"
    override.write_text("output_dir_env: MY_FLUX_DIR\n")
    monkeypatch.setenv("PINCHED_CONFIG", str(override))
    assert Configuration()["output_dir_env"] == "MY_FLUX_DIR"


def test_unknown_key(tmp_path):
    override = tmp_path / "override.yaml"
    override.write_text("colums: 4\n")
    with pytest.raises(ValueError):
        Configuration(str(override))


@pytest.mark.parametrize(
    "name,value",
    [
        ("columns", 5),
        ("energy_step", 0),
        ("energy_step", "small"),
        ("energy_bins", 0),
        ("distance_cm", -1.0),
        ("hierarchy_dirs", {"normal": "nh"}),
        ("hierarchy_dirs", {"normal": "nh", "inverted": "ih", "nh": "x"}),
        ("hierarchy_dirs", {"normal": "nh", "inverted": ""}),
        ("hierarchy_dirs", ["nh", "ih"]),
    ],
)
def test_invalid_value(name, value):
    with pytest.raises(ValueError):
        Configuration().set_parameter(name, value)


def test_restore():
    config = Configuration()
    config.set_parameter("columns", 4)
    assert config["columns"] == 4
    config.restore_config()
    assert config["columns"] == 7


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError, match="missing.yaml"):
        Configuration(str(tmp_path / "missing.yaml"))


@pytest.mark.parametrize("text", ["columns: [4\n", "- columns\n- 4\n"])
def test_unreadable_file(tmp_path, text):
    override = tmp_path / "override.yaml"
    override.write_text(text)
    with pytest.raises(ConfigurationError, match="override.yaml"):
        Configuration(str(override))


def test_partial_hierarchy_dirs(tmp_path):
    override = tmp_path / "override.yaml"
    override.write_text("hierarchy_dirs: {normal: nh}\n")
    with pytest.raises(ConfigurationError):
        Configuration(str(override))
