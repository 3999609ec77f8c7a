"""Run a simulation described by a JSON or YAML config file."""

import logging
import sys
from galaxy_dynamics.simulator import Simulator
from galaxy_dynamics.utils import load_config, setup_logging

logger = logging.getLogger("galaxy_dynamics.examples")


def main(config_path: str):
    config = load_config(config_path)
    setup_logging(config.log_level, config.log_file)

    sim = Simulator.from_config(config)
    sim.run(config.n_steps)
    logger.info("Finished %d steps at t=%.2f, particle counts %s", sim.step_count, sim.time, sim.particle_counts())


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "examples/config_example.yaml")
