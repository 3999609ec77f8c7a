"""Base class for seed-position presets."""

from abc import ABC, abstractmethod
from typing import Optional
import numpy as np
from galaxy_dynamics.errors import ValidationError


class Preset(ABC):
    """Abstract base class for seed-position generators."""

    def __init__(self, n_particles: int = 1000, seed: Optional[int] = None):
        """Initialize preset.

        Args:
            n_particles: Number of particles
            seed: Random seed for reproducibility
        """
        if isinstance(n_particles, bool) or not isinstance(n_particles, int) or n_particles <= 0:
            raise ValidationError(f"n_particles must be a positive integer, got {n_particles!r}")
        self.n_particles = n_particles
        self.seed = seed

    @abstractmethod
    def generate(self) -> np.ndarray:
        """Generate seed positions.

        Returns:
            Flat array of 3 * n_particles coordinates (x, y, z per particle)
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass
