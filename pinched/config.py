import os
import logging
from numbers import Real

from .mixing import Hierarchy
from .util import data_dir

logger = logging.getLogger(__name__)

default_config = os.path.join(data_dir, "pinched_config.yaml")


class ConfigurationError(ValueError):
    """A configuration file is missing, unreadable, or holds invalid settings"""


class Configuration(object):
    """Settings for flux table generation, read from YAML files"""

    def __init__(self, config=None):
        """
        :param config: path to a YAML file whose keys override the packaged
            defaults. If None, the file named by $PINCHED_CONFIG is used, if set.
        """
        if config is None:
            config = os.environ.get("PINCHED_CONFIG", None)
        if config is not None and not os.path.isfile(config):
            config = os.path.realpath(os.path.join(data_dir, config))
        self.configfile = config
        self.restore_config()

    def restore_config(self):
        """Revert all changed settings back to what is in the config files"""
        self.configuration = self._load(default_config)
        if self.configfile is not None:
            overrides = self._load(self.configfile) or {}
            if not isinstance(overrides, dict):
                raise ConfigurationError(
                    "{} should hold a mapping of parameter names to values".format(
                        self.configfile
                    )
                )
            for name, value in overrides.items():
                self._check(name, value)
            self.configuration.update(overrides)
            logger.debug(f"configuration overridden from {self.configfile}")

    @staticmethod
    def _load(filename):
        import yaml

        try:
            with open(filename) as file:
                return yaml.full_load(file)
        except OSError as e:
            raise ConfigurationError(
                "Can't read configuration {}: {}".format(filename, e.strerror)
            )
        except yaml.YAMLError as e:
            raise ConfigurationError(
                "Can't parse configuration {}: {}".format(filename, e)
            )

    def _check(self, name, value):
        if name not in self.configuration:
            raise ConfigurationError(
                "Unknown configuration parameter {} (known: {})".format(
                    name, ", ".join(sorted(self.configuration))
                )
            )
        if name == "columns" and value not in (4, 7):
            raise ConfigurationError("columns must be 4 or 7, got {}".format(value))
        if name in ("energy_step", "distance_cm", "gev_per_erg") and not (
            isinstance(value, Real) and value > 0
        ):
            raise ConfigurationError("{} must be positive, got {}".format(name, value))
        if name == "energy_bins" and not (
            isinstance(value, Real) and int(value) == value and value >= 1
        ):
            raise ConfigurationError(
                "energy_bins must be a positive integer, got {}".format(value)
            )
        if name == "hierarchy_dirs":
            names = set(h.name for h in Hierarchy)
            if (
                not isinstance(value, dict)
                or set(value) != names
                or not all(isinstance(v, str) and v for v in value.values())
            ):
                raise ConfigurationError(
                    "hierarchy_dirs must map each of {} to a directory name, got {}".format(
                        ", ".join(sorted(names)), value
                    )
                )

    def get_parameter(self, name):
        return self.configuration[name]

    def set_parameter(self, name, value):
        self._check(name, value)
        logger.debug(f"Old value for parameter {name}: {self.get_parameter(name)}")
        self.configuration[name] = value
        logger.info(f"New value for parameter {name}: {self.get_parameter(name)}")

    def __getitem__(self, name):
        return self.get_parameter(name)
