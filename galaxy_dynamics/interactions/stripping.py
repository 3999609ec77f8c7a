"""Ram-pressure stripping."""

import logging
from galaxy_dynamics import constants
from galaxy_dynamics.interactions.base import InteractionModel

logger = logging.getLogger(__name__)


class Stripping(InteractionModel):
    """Directional drag plus random loss of outer particles.

    Removal radius is size / (1 + s) around the centroid, where s is the
    decayed strength. Particle count never increases.
    """

    def __init__(self, params):
        super().__init__(params)
        self._removed = 0

    @property
    def kind(self) -> str:
        return "stripping"

    @property
    def removed(self) -> int:
        return self._removed

    def apply(self, galaxy_a, galaxy_b, elapsed, progress, delta_time, rng):
        strength = self.decayed_strength(progress)
        if strength == 0:
            return

        galaxy_a.apply_ram_pressure(self.params.ram_direction, strength, delta_time)

        if rng.random() < strength * constants.STRIPPING_PROBABILITY_SCALE:
            radius = galaxy_a.params.size / (1.0 + strength)
            self._removed += galaxy_a.strip_beyond(radius)
