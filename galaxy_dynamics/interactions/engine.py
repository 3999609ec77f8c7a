"""Interaction clock and dispatch."""

import logging
import math
from typing import Optional
from galaxy_dynamics.errors import ValidationError
from galaxy_dynamics.interactions.base import InteractionModel, InteractionParams
from galaxy_dynamics.interactions.factory import create_interaction
from galaxy_dynamics.physics.galaxy_physics import GalaxyPhysics
from galaxy_dynamics.utils.reproducibility import make_rng

logger = logging.getLogger(__name__)


class InteractionEngine:
    """Drives one interaction model over a bounded duration.

    The engine holds references to the galaxies it couples but does not own
    them; callers keep them alive and must run every GalaxyPhysics.update for
    a tick before calling update here.
    """

    def __init__(
        self,
        galaxy_a: GalaxyPhysics,
        params: InteractionParams,
        galaxy_b: Optional[GalaxyPhysics] = None,
        seed: Optional[int] = None,
    ):
        """Initialize engine.

        Args:
            galaxy_a: Primary galaxy
            params: Interaction parameters
            galaxy_b: Partner galaxy (required for merger and tidal)
            seed: Seed for the stochastic parts (collision scatter, stripping)

        Raises:
            ValidationError: If a two-body kind has no partner or A is B
        """
        self.model: InteractionModel = create_interaction(params)
        if self.model.requires_partner and galaxy_b is None:
            raise ValidationError(f"'{params.kind}' interaction requires two galaxies")
        if galaxy_b is not None and galaxy_b is galaxy_a:
            raise ValidationError("An interaction cannot couple a galaxy with itself")

        self.galaxy_a = galaxy_a
        self.galaxy_b = galaxy_b
        self.params = params
        self.rng = make_rng(seed)
        self.elapsed = 0.0
        self._progress = 0.0

    def update(self, delta_time: float):
        """Advance the clock and apply the interaction. No-op once complete."""
        if self.is_complete():
            return
        if not math.isfinite(delta_time):
            logger.warning("Skipping interaction tick with non-finite delta_time=%r", delta_time)
            return

        self.elapsed += delta_time
        self._progress = min(max(self.elapsed / self.params.duration, 0.0), 1.0)
        self.model.apply(self.galaxy_a, self.galaxy_b, self.elapsed, self._progress, delta_time, self.rng)

        if self.is_complete():
            logger.info("%s interaction complete after %.4g s", self.params.kind, self.elapsed)

    def progress(self) -> float:
        return self._progress

    def is_complete(self) -> bool:
        return self._progress >= 1.0
