"""High-energy collision: shockwave, heating and scatter."""

import math
from galaxy_dynamics import constants
from galaxy_dynamics.interactions.base import InteractionModel


class Collision(InteractionModel):
    """Single-galaxy collision whose effects fade as (1 - p)."""

    @property
    def kind(self) -> str:
        return "collision"

    def apply(self, galaxy_a, galaxy_b, elapsed, progress, delta_time, rng):
        strength = self.decayed_strength(progress)
        if strength == 0:
            return

        shockwave = math.sin(elapsed * constants.SHOCKWAVE_FREQUENCY) * strength
        galaxy_a.apply_shockwave(shockwave, delta_time)
        galaxy_a.heat(strength * delta_time * constants.COLLISION_HEATING)
        galaxy_a.scatter(strength, delta_time, rng)
