"""Tidal pull by a nearby partner."""

import numpy as np
from galaxy_dynamics.interactions.base import InteractionModel
from galaxy_dynamics.physics.galaxy_physics import unit_vector


class Tidal(InteractionModel):
    """Pull A toward B while the centroids are within range."""

    @property
    def kind(self) -> str:
        return "tidal"

    @property
    def requires_partner(self) -> bool:
        return True

    def apply(self, galaxy_a, galaxy_b, elapsed, progress, delta_time, rng):
        separation = galaxy_b.centroid() - galaxy_a.centroid()
        distance = float(np.linalg.norm(separation))
        threshold = self.params.distance
        if distance >= threshold:
            return

        strength = self.params.strength * (1.0 - distance / threshold)
        galaxy_a.apply_tidal_force(unit_vector(separation), strength, delta_time)
