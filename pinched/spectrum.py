"""
Garching quasi-thermal ("pinched") supernova neutrino spectra

See:
Keil, Raffelt & Janka, Monte Carlo study of supernova neutrino spectra formation
http://arxiv.org/abs/astro-ph/0208035
"""

import numpy as np
from scipy.special import gamma

from .util import Species, energy_grid

# flux tables are computed for a galactic supernova at 10 kpc
distance = 3.08568025e22
estep = 0.0002


def shape(E, E0, alpha):
    """
    Normalized pinched energy distribution

    The distribution integrates to 1 over [0, inf) and has mean E0. Larger
    alpha gives a narrower ("pinched") spectrum; alpha=2 is close to a
    Fermi-Dirac spectrum with zero chemical potential. No input validation
    is done: E0 <= 0 or alpha <= -1 yield nonsense. For -1 < alpha < 0 the
    density diverges at E=0 and evaluates to inf there (still integrable).

    :param E: neutrino energy
    :param E0: average energy, in the same units as E
    :param alpha: pinching parameter
    :returns: dN/dE, in units of 1/E
    """
    N = (alpha + 1.0) ** (alpha + 1.0) / (E0 * gamma(alpha + 1.0))
    with np.errstate(divide="ignore"):
        return N * np.power(E / E0, alpha) * np.exp(-(alpha + 1.0) * E / E0)


def normalize(E, L, E0, alpha, distance=distance, bin_width=estep):
    """
    Number flux at Earth in an energy bin

    :param E: neutrino energy in GeV
    :param L: luminosity in GeV/s (or emitted energy in GeV for a fluence)
    :param E0: average energy in GeV. Species with E0 <= 0 are switched off.
    :param alpha: pinching parameter
    :param distance: distance to the source in cm
    :param bin_width: width of the energy bin in GeV
    :returns: flux in 1/(cm^2 s) in a bin of width *bin_width* at E
    """
    if E0 <= 0:
        return np.zeros_like(np.asarray(E, dtype=float))
    return (
        1.0
        / (4 * np.pi * distance ** 2)
        * L
        / E0
        * shape(E, E0, alpha)
        * bin_width
    )


def fluxes(params, energies=None, distance=distance, bin_width=estep):
    """
    Tabulate the unmixed flux of all species for one parameter record

    :param params: a :py:class:`pinched.records.SpeciesParameters`
    :param energies: energies in GeV. If None, use the default grid with
        spacing *bin_width*.
    :returns: an array of shape (len(energies), 3), columns ordered as :py:class:`Species`
    """
    if energies is None:
        energies = energy_grid(bin_width)
    table = np.empty((len(energies), len(Species)))
    for species in Species:
        table[:, species.value] = normalize(
            energies,
            params.luminosity[species.value],
            params.mean_energy[species.value],
            params.alpha[species.value],
            distance=distance,
            bin_width=bin_width,
        )
    return table


def total_number(L, E0, distance=distance):
    """
    Energy-integrated number flux, L/E0/(4 pi d^2)

    This is what a flux table sums to in the limit of a fine, wide grid.
    """
    if E0 <= 0:
        return 0.0
    return L / E0 / (4 * np.pi * distance ** 2)
