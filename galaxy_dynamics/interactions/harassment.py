"""Galaxy harassment: repeated fast encounters as a smooth perturbation."""

import math
from galaxy_dynamics import constants
from galaxy_dynamics.interactions.base import InteractionModel


class Harassment(InteractionModel):

    @property
    def kind(self) -> str:
        return "harassment"

    def apply(self, galaxy_a, galaxy_b, elapsed, progress, delta_time, rng):
        tau = elapsed * constants.HARASSMENT_TIME_SCALE
        fx, fy, fz = constants.HARASSMENT_PHASES
        strength = self.params.strength
        perturbation = (
            math.sin(tau * fx) * strength,
            math.cos(tau * fy) * strength,
            math.sin(tau * fz) * strength,
        )
        galaxy_a.apply_acceleration(perturbation, delta_time)
