"""Shared fixtures for galaxy_dynamics tests."""

import logging
import numpy as np
import pytest
from galaxy_dynamics import constants
from galaxy_dynamics.physics.galaxy_physics import GalaxyPhysics
from galaxy_dynamics.physics.params import PhysicsParams
from galaxy_dynamics.physics.particle_field import ParticleField


@pytest.fixture
def make_galaxy():
    """Factory building a GalaxyPhysics from a list of (x, y, z) positions."""
    def _make(positions, gm=1.0, size=10.0, temperature=1000.0, **params):
        positions = np.asarray(positions, dtype=np.float64)
        field = ParticleField.create(len(positions), positions.ravel(), temperature=temperature)
        physics = PhysicsParams(
            mass=gm * constants.SIMULATION_MASS_UNIT,
            size=size,
            temperature=temperature,
            **params,
        )
        return GalaxyPhysics(field, physics)
    return _make


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo any setup_logging() call so caplog keeps working."""
    yield
    logger = logging.getLogger("galaxy_dynamics")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
