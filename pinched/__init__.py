"""
Supernova neutrino flux tables from the Garching pinched parameterization
"""

from .mixing import Hierarchy, mix
from .spectrum import fluxes, normalize, shape

__version__ = "0.1"
