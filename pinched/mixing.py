"""
Flavor conversion of supernova neutrinos in the stellar envelope

Both MSW resonances are taken to be adiabatic (large theta13), so each
flavor state produced in the core leaves the star as a single mass
eigenstate. The survival probabilities of nu_e and anti-nu_e then depend only
on the mass ordering and theta12:

    ==========  ===============  ====================
    hierarchy   p (nu_e)          pbar (anti-nu_e)
    ==========  ===============  ====================
    normal      0                cos^2(theta12)
    inverted    sin^2(theta12)   0
    ==========  ===============  ====================

See:
Dighe & Smirnov, Identifying the neutrino mass spectrum from a supernova neutrino burst
http://arxiv.org/abs/hep-ph/9907423
"""

from enum import Enum

import numpy as np

from .util import Species

Hierarchy = Enum("Hierarchy", ["normal", "inverted"])
Hierarchy.__doc__ = "Neutrino mass ordering"
Hierarchy.normal.__doc__ = "m3 heaviest; nu_e leaves the star as nu_3"
Hierarchy.inverted.__doc__ = "m3 lightest; anti-nu_e leaves the star as anti-nu_3"


def survival_probabilities(theta12, hierarchy):
    """
    :param theta12: solar mixing angle in radians
    :param hierarchy: a :py:class:`Hierarchy`
    :returns: a tuple (p, pbar) of nu_e and anti-nu_e survival probabilities
    """
    if hierarchy is Hierarchy.normal:
        return 0.0, np.cos(theta12) ** 2
    elif hierarchy is Hierarchy.inverted:
        return np.sin(theta12) ** 2, 0.0
    else:
        raise ValueError("Unknown hierarchy {}".format(hierarchy))


def mix(flux, theta12, hierarchy):
    """
    Observed fluxes at Earth from fluxes produced in the core

    :param flux: unmixed fluxes of nu_e, anti-nu_e and a single heavy-lepton
        flavor. The last axis must have length 3, ordered as :py:class:`Species`.
    :param theta12: solar mixing angle in radians
    :param hierarchy: a :py:class:`Hierarchy`
    :returns: an array of the same shape. The heavy-lepton column is the
        flux per heavy-lepton species, averaged over nu_mu, nu_tau and their
        antiparticles. Use :py:func:`mix_heavy` to get the neutrino and
        antineutrino fluxes separately.
    """
    flux = np.asarray(flux, dtype=float)
    if flux.shape[-1] != len(Species):
        raise ValueError(
            "expected {} species along the last axis, got shape {}".format(
                len(Species), flux.shape
            )
        )
    p, pbar = survival_probabilities(theta12, hierarchy)
    F_e = flux[..., Species.nue.value]
    F_ebar = flux[..., Species.nuebar.value]
    F_x = flux[..., Species.nux.value]

    mixed = np.empty_like(flux)
    mixed[..., Species.nue.value] = p * F_e + (1 - p) * F_x
    mixed[..., Species.nuebar.value] = pbar * F_ebar + (1 - pbar) * F_x
    F_x_nu, F_x_nubar = mix_heavy(flux, theta12, hierarchy)
    mixed[..., Species.nux.value] = (F_x_nu + F_x_nubar) / 2.0
    return mixed


def mix_heavy(flux, theta12, hierarchy):
    """
    Observed flux per heavy-lepton species, separately for neutrinos and
    antineutrinos

    :param flux: unmixed fluxes, last axis ordered as :py:class:`Species`
    :returns: a tuple (nu_x, anti-nu_x) of arrays with the shape of *flux*
        without its last axis
    """
    flux = np.asarray(flux, dtype=float)
    p, pbar = survival_probabilities(theta12, hierarchy)
    F_e = flux[..., Species.nue.value]
    F_ebar = flux[..., Species.nuebar.value]
    F_x = flux[..., Species.nux.value]
    # whatever nu_e (anti-nu_e) was lost is shared between the two heavy
    # neutrino (antineutrino) flavors
    F_x_nu = ((1 - p) * F_e + (1 + p) * F_x) / 2.0
    F_x_nubar = ((1 - pbar) * F_ebar + (1 + pbar) * F_x) / 2.0
    return F_x_nu, F_x_nubar


def total(flux):
    """
    Flux summed over all six flavors

    Each heavy-lepton species is counted once, i.e. the nux column enters
    with weight 4. This sum is the same before and after :py:func:`mix`.
    """
    flux = np.asarray(flux, dtype=float)
    weights = np.array([species.multiplicity for species in Species], dtype=float)
    return (flux * weights).sum(axis=-1)
