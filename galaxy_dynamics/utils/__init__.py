"""Configuration, logging and reproducibility helpers."""

from galaxy_dynamics.utils.config import Config, load_config, save_config
from galaxy_dynamics.utils.logging_setup import setup_logging
from galaxy_dynamics.utils.reproducibility import make_rng, set_all_seeds

__all__ = ["Config", "load_config", "save_config", "setup_logging", "make_rng", "set_all_seeds"]
