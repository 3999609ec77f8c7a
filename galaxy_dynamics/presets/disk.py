"""Spiral disk seed positions."""

from typing import Optional
import numpy as np
from galaxy_dynamics.presets.base import Preset


class SpiralDiskPreset(Preset):
    """Thin rotating disk with a sheared spiral pattern in the x-z plane.

    r ~ U(0, R)
    theta ~ U(0, 2*pi) + spiral * sqrt(r / R)
    y ~ U(-0.5, 0.5) * height * exp(-r / (0.5 * R))
    """

    def __init__(
        self,
        n_particles: int = 10000,
        seed: Optional[int] = None,
        radius: float = 10.0,
        height: float = 1.0,
        spiral: float = 2.0,
    ):
        super().__init__(n_particles, seed)
        self.radius = radius
        self.height = height
        self.spiral = spiral

    @property
    def name(self) -> str:
        return "spiral_disk"

    def generate(self) -> np.ndarray:
        rng = np.random.default_rng(self.seed)
        n = self.n_particles

        r = rng.random(n) * self.radius
        theta = rng.random(n) * 2 * np.pi + self.spiral * np.sqrt(r / self.radius)
        y = (rng.random(n) - 0.5) * self.height * np.exp(-r / (self.radius * 0.5))

        positions = np.column_stack([r * np.cos(theta), y, r * np.sin(theta)])
        return positions.ravel()
