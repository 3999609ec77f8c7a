"""Galaxy merger: mutual attraction followed by absorption."""

import logging
import numpy as np
from galaxy_dynamics import constants
from galaxy_dynamics.interactions.base import InteractionModel
from galaxy_dynamics.physics.galaxy_physics import unit_vector

logger = logging.getLogger(__name__)


class Merger(InteractionModel):
    """Pull two galaxies together, then fold B's particles into A.

    Past the absorption start, the cumulative share of B's particles (counted
    when absorption begins) that has moved into A is
    (p - 0.5) / 2 * 0.5. Absorption is irreversible and must be the last
    interaction applied to A in a tick.
    """

    def __init__(self, params):
        super().__init__(params)
        self._donor_count = None
        self._absorbed = 0

    @property
    def kind(self) -> str:
        return "merger"

    @property
    def requires_partner(self) -> bool:
        return True

    @property
    def absorbed(self) -> int:
        return self._absorbed

    def absorption_fraction(self, progress: float) -> float:
        if progress <= constants.MERGER_ABSORPTION_START:
            return 0.0
        return (progress - constants.MERGER_ABSORPTION_START) * constants.MERGER_ABSORPTION_SCALE

    def apply(self, galaxy_a, galaxy_b, elapsed, progress, delta_time, rng):
        direction = unit_vector(galaxy_b.centroid() - galaxy_a.centroid())
        pull = direction * (self.params.strength * progress)
        galaxy_a.apply_acceleration(pull, delta_time)
        galaxy_b.apply_acceleration(-pull, delta_time)

        fraction = self.absorption_fraction(progress)
        if fraction <= 0:
            return
        if self._donor_count is None:
            self._donor_count = galaxy_b.count
            logger.info("Merger absorption started (donor has %d particles)", self._donor_count)
        target = int(np.floor(fraction * self._donor_count))
        if target > self._absorbed:
            self._absorbed += galaxy_a.absorb(galaxy_b, target - self._absorbed)
