"""Elliptical (spheroidal) seed positions."""

from typing import Optional
import numpy as np
from galaxy_dynamics.presets.base import Preset


class EllipticalPreset(Preset):
    """Uniform-density spheroid, flattened along y by (1 - ellipticity)."""

    def __init__(
        self,
        n_particles: int = 10000,
        seed: Optional[int] = None,
        radius: float = 10.0,
        ellipticity: float = 0.0,
    ):
        super().__init__(n_particles, seed)
        self.radius = radius
        self.ellipticity = ellipticity

    @property
    def name(self) -> str:
        return "elliptical"

    def generate(self) -> np.ndarray:
        rng = np.random.default_rng(self.seed)
        n = self.n_particles

        # Uniform in volume: r = R * u^(1/3)
        r = self.radius * np.cbrt(rng.random(n))
        cos_phi = rng.uniform(-1.0, 1.0, n)
        sin_phi = np.sqrt(1.0 - cos_phi ** 2)
        theta = rng.uniform(0.0, 2 * np.pi, n)

        x = r * sin_phi * np.cos(theta)
        y = r * cos_phi * (1.0 - self.ellipticity)
        z = r * sin_phi * np.sin(theta)
        return np.column_stack([x, y, z]).ravel()
