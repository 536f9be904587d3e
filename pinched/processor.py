import logging

from .config import Configuration
from .io import OutputLocation, open_output, open_parameters, write_table
from .mixing import Hierarchy, mix, mix_heavy
from .records import read_parameters
from .spectrum import fluxes
from .util import energy_grid

logger = logging.getLogger(__name__)


class RecordProcessor(object):
    def __init__(self, output, theta12=None, config=None):
        """
        :param output: an :py:class:`pinched.io.OutputLocation`
        :param theta12: mixing angle in radians. If None or 0, only unmixed
            tables are written; otherwise tables for both mass hierarchies
            are written as well.
        :param config: a :py:class:`pinched.config.Configuration`
        """
        self.output = output
        self.config = Configuration() if config is None else config
        self.theta12 = theta12
        if theta12 is not None and abs(theta12) > 0:
            self.hierarchies = tuple(Hierarchy)
        else:
            self.hierarchies = ()
        self.energies = energy_grid(
            self.config["energy_step"], self.config["energy_bins"]
        )

    @property
    def mixing(self):
        return len(self.hierarchies) > 0

    def tables(self, params):
        """
        Flux tables for one record

        :returns: a dict mapping None (unmixed) and each requested
            :py:class:`Hierarchy` to a tuple (flux, heavy). flux has shape
            (len(energies), 3); heavy is None for the unmixed table, and the
            (nu_x, anti-nu_x) per-species fluxes after mixing otherwise.
        """
        unmixed = fluxes(
            params,
            self.energies,
            distance=self.config["distance_cm"],
            bin_width=self.config["energy_step"],
        )
        tables = {None: (unmixed, None)}
        for hierarchy in self.hierarchies:
            tables[hierarchy] = (
                mix(unmixed, self.theta12, hierarchy),
                mix_heavy(unmixed, self.theta12, hierarchy),
            )
        return tables

    def process(self, params):
        """
        Write the flux tables for one record

        :returns: the list of files written
        """
        logger.info(f"Flux {params.id}: alpha: {params.alpha}")
        logger.info(f"Flux {params.id}: E0 [GeV]: {params.mean_energy}")
        logger.info(f"Flux {params.id}: Luminosity [GeV/s]: {params.luminosity}")
        written = []
        for hierarchy, (table, heavy) in self.tables(params).items():
            filename = self.output.filename(params.id, hierarchy)
            logger.info(f"Output file: {filename}")
            with open_output(filename) as f:
                write_table(
                    f,
                    self.energies,
                    table,
                    columns=self.config["columns"],
                    float_format=self.config["float_format"],
                    heavy=heavy,
                )
            written.append(filename)
        return written

    def run(self, records):
        """
        Write flux tables for every record in *records*

        :raises OutputUnavailable: before anything is written if an output
            directory is missing
        :returns: the number of records processed
        """
        self.output.check(self.hierarchies)
        count = 0
        for params in records:
            self.process(params)
            count += 1
        logger.info(f"Processed {count} records")
        return count


def make_tables(theta12=None, config=None):
    """
    Read the parameter file and write flux tables to the directory named by
    the output environment variable.

    :raises InputMissing: if the parameter file can not be opened
    :raises OutputUnavailable: if the output directories are not usable
    :returns: the number of records processed
    """
    if config is None:
        config = Configuration()
    if theta12 is not None and abs(theta12) > 0:
        logger.info(f"Assuming MSW with th12= {theta12} radians")
    else:
        logger.info("No oscillations assumed")

    with open_parameters(config["input_file"]) as lines:
        output = OutputLocation.from_environment(
            config["output_dir_env"],
            filename_template=config["filename_template"],
            hierarchy_dirs=config["hierarchy_dirs"],
        )
        processor = RecordProcessor(output, theta12, config)
        return processor.run(read_parameters(lines, config["gev_per_erg"]))
