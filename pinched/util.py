import os
from enum import Enum

import numpy as np

data_dir = os.path.realpath(os.path.dirname(__file__))


class constants:
    # energies are in GeV, lengths in cm
    GeV = 1.0
    MeV = 1e-3
    erg = 624.15
    pc = 3.08568025e18
    kpc = 1e3 * pc


# Enum has no facility for setting docstrings inline. Do it by hand.
Species = Enum("Species", ["nue", "nuebar", "nux"], start=0)
Species.__doc__ = "Species groups carried in a flux triple, in column order"
Species.nue.__doc__ = "electron neutrino"
Species.nuebar.__doc__ = "electron antineutrino"
Species.nux.__doc__ = "a single heavy-lepton flavor (nu_mu, nu_tau or their antiparticles)"

# number of heavy-lepton species represented by the nux column
Species.nux.multiplicity = 4
Species.nue.multiplicity = 1
Species.nuebar.multiplicity = 1


def energy_grid(step=0.0002, bins=500):
    """
    Energy samples at which flux tables are evaluated

    :param step: spacing of the samples in GeV, also the bin width of the tabulated flux
    :param bins: number of steps; the grid has bins+1 samples starting at 0
    :returns: an array of energies in GeV
    """
    return np.arange(bins + 1) * step
