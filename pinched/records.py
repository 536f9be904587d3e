import logging
from collections import namedtuple

from .util import Species, constants

logger = logging.getLogger(__name__)

_nfields = 1 + 3 * len(Species)


class SpeciesParameters(
    namedtuple("SpeciesParameters", ["id", "alpha", "mean_energy", "luminosity"])
):
    """
    Pinched-spectrum parameters of one time bin

    :param id: integer label of the bin, used to name the output files
    :param alpha: pinching parameters, one per :py:class:`Species`
    :param mean_energy: average energies in GeV, one per :py:class:`Species`
    :param luminosity: luminosities in GeV/s (or emitted energies in GeV), one per :py:class:`Species`
    """

    __slots__ = ()

    @classmethod
    def from_line(cls, line, gev_per_erg=constants.erg):
        """
        Parse a line of the form::

            id  alpha_e alpha_ebar alpha_x  E0_e E0_ebar E0_x  L_e L_ebar L_x

        with average energies in MeV and luminosities in erg/s (or erg).

        :raises ValueError: if the line does not hold exactly 10 numbers
        """
        fields = line.split()
        if len(fields) != _nfields:
            raise ValueError(
                "expected {} fields, got {}: {!r}".format(_nfields, len(fields), line)
            )
        id = int(fields[0])
        values = [float(v) for v in fields[1:]]
        alpha = tuple(values[0:3])
        mean_energy = tuple(e * constants.MeV for e in values[3:6])
        luminosity = tuple(l * gev_per_erg for l in values[6:9])
        return cls(id, alpha, mean_energy, luminosity)


def read_parameters(lines, gev_per_erg=constants.erg):
    """
    Yield parameter records from an iterable of lines

    Blank lines and lines starting with '#' are skipped. The first line that
    can not be parsed ends the stream; anything after it is ignored.
    """
    for lineno, line in enumerate(lines, 1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        try:
            params = SpeciesParameters.from_line(stripped, gev_per_erg)
        except ValueError as e:
            logger.debug(f"end of parameter stream at line {lineno}: {e}")
            return
        yield params
