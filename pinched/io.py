import os
import logging

import numpy as np

from .mixing import Hierarchy
from .util import Species

logger = logging.getLogger(__name__)

default_hierarchy_dirs = {"normal": "nh", "inverted": "ih"}


class InputMissing(FileNotFoundError):
    """The parameter file can not be read"""


class OutputUnavailable(EnvironmentError):
    """A directory that output files should go to does not exist or is not writable"""


def open_parameters(filename):
    try:
        return open(filename)
    except OSError as e:
        raise InputMissing("Can't open {}: {}".format(filename, e.strerror))


class OutputLocation(object):
    """Where the flux tables for each record go"""

    def __init__(
        self,
        root,
        filename_template="pinched_{id}.dat",
        hierarchy_dirs=None,
    ):
        if hierarchy_dirs is None:
            hierarchy_dirs = default_hierarchy_dirs
        self.root = root
        self.filename_template = filename_template
        self._subdirs = {
            Hierarchy[name]: subdir for name, subdir in hierarchy_dirs.items()
        }

    @classmethod
    def from_environment(cls, variable="OUTFLUXDIR", **kwargs):
        root = os.environ.get(variable, None)
        if root is None:
            raise OutputUnavailable(
                "You need to set the environment variable {} to the output directory.".format(
                    variable
                )
            )
        return cls(root, **kwargs)

    def directory(self, hierarchy=None):
        if hierarchy is None:
            return self.root
        return os.path.join(self.root, self._subdirs[hierarchy])

    def filename(self, id, hierarchy=None):
        return os.path.join(
            self.directory(hierarchy), self.filename_template.format(id=id)
        )

    def check(self, hierarchies=()):
        """
        Ensure that all directories needed for output exist and are writable

        :raises OutputUnavailable: on the first directory that is not usable
        """
        for hierarchy in (None,) + tuple(hierarchies):
            dirname = self.directory(hierarchy)
            if not os.path.isdir(dirname) or not os.access(dirname, os.W_OK):
                raise OutputUnavailable(
                    "Output directory {} does not exist or is not writable".format(
                        dirname
                    )
                )


def expand_columns(energies, flux, columns=7, heavy=None):
    """
    Arrange a flux table into output columns

    :param energies: energies in GeV
    :param flux: array of shape (len(energies), 3), columns ordered as :py:class:`Species`
    :param columns: 7 for the SNOwGLoBES layout
        (E, nue, numu, nutau, nuebar, numubar, nutaubar), or 4 for (E, nue, nuebar, nux)
    :param heavy: a tuple (nu_x, anti-nu_x) of per-species heavy-lepton fluxes
        for the 7-column layout, e.g. from :py:func:`pinched.mixing.mix_heavy`.
        If None, all heavy-lepton flavors carry the nux flux.
    """
    nue = flux[:, Species.nue.value]
    nuebar = flux[:, Species.nuebar.value]
    nux = flux[:, Species.nux.value]
    if columns == 7:
        if heavy is None:
            nux_nu, nux_nubar = nux, nux
        else:
            nux_nu, nux_nubar = heavy
        return np.column_stack(
            (energies, nue, nux_nu, nux_nu, nuebar, nux_nubar, nux_nubar)
        )
    elif columns == 4:
        return np.column_stack((energies, nue, nuebar, nux))
    else:
        raise ValueError("columns must be 4 or 7, got {}".format(columns))


def write_table(f, energies, flux, columns=7, float_format="%.6e", heavy=None):
    try:
        np.savetxt(f, expand_columns(energies, flux, columns, heavy), fmt=float_format)
        f.flush()
    except OSError as e:
        raise OutputUnavailable(
            "Writing {} failed: {}".format(getattr(f, "name", f), e.strerror or e)
        )


def open_output(filename):
    try:
        return open(filename, "w")
    except OSError as e:
        raise OutputUnavailable(
            "Outfile {} not opened: {}. Check that the output directory exists".format(
                filename, e.strerror
            )
        )
