"""Main simulation controller."""

import logging
import math
import time
from typing import Callable, List, Optional
from galaxy_dynamics.errors import ValidationError
from galaxy_dynamics.interactions.base import InteractionParams
from galaxy_dynamics.interactions.engine import InteractionEngine
from galaxy_dynamics.physics.galaxy_physics import GalaxyPhysics
from galaxy_dynamics.presets.catalog import build_galaxy
from galaxy_dynamics.utils.config import Config
from galaxy_dynamics.utils.reproducibility import set_all_seeds

logger = logging.getLogger(__name__)


class Simulator:
    """Runs galaxies and interactions in the required per-tick order.

    Every GalaxyPhysics.update for a tick finishes before any interaction
    engine reads or writes the same galaxies. Completed engines are dropped.
    """

    def __init__(self, dt: float = 1.0 / 60.0, apply_dust_lanes: bool = False):
        """Initialize simulator.

        Args:
            dt: Default time step used by step() and run()
            apply_dust_lanes: Re-apply dust lanes after each tick
        """
        self.dt = dt
        self.apply_dust_lanes = apply_dust_lanes
        self.galaxies: List[GalaxyPhysics] = []
        self.engines: List[InteractionEngine] = []
        self.time = 0.0
        self.step_count = 0
        self.paused = False

        # Profiling: last step timing (ms)
        self._last_physics_ms: Optional[float] = None
        self._last_interactions_ms: Optional[float] = None
        self._profile: bool = False

        # Callbacks
        self.on_step_callback: Optional[Callable] = None
        self.on_interaction_complete: Optional[Callable] = None

    @classmethod
    def from_config(cls, config: Config) -> "Simulator":
        """Build galaxies and interactions described by a config.

        Raises:
            ValidationError: If the config or any galaxy/interaction in it is invalid
        """
        config.validate()
        if config.seed is not None:
            set_all_seeds(config.seed)

        sim = cls(dt=config.dt, apply_dust_lanes=config.apply_dust_lanes)
        for i, entry in enumerate(config.galaxies):
            seed = entry.get("seed", None if config.seed is None else config.seed + i)
            galaxy = build_galaxy(
                entry["type"],
                n_particles=entry.get("n_particles"),
                seed=seed,
                offset=entry.get("offset"),
                **entry.get("physics", {}),
            )
            sim.add_galaxy(galaxy)

        for i, entry in enumerate(config.interactions):
            entry = dict(entry)
            index_a = entry.pop("galaxy_a", 0)
            index_b = entry.pop("galaxy_b", None)
            seed = entry.pop("seed", None if config.seed is None else config.seed + 1000 + i)
            params = InteractionParams.from_dict(entry)
            sim.add_interaction(
                params,
                sim.galaxies[index_a],
                sim.galaxies[index_b] if index_b is not None else None,
                seed=seed,
            )
        return sim

    def add_galaxy(self, galaxy: GalaxyPhysics) -> GalaxyPhysics:
        self.galaxies.append(galaxy)
        return galaxy

    def add_interaction(
        self,
        params: InteractionParams,
        galaxy_a: GalaxyPhysics,
        galaxy_b: Optional[GalaxyPhysics] = None,
        seed: Optional[int] = None,
    ) -> InteractionEngine:
        """Couple registered galaxies with a new interaction engine."""
        for galaxy in (galaxy_a, galaxy_b):
            if galaxy is not None and galaxy not in self.galaxies:
                raise ValidationError("Interactions may only couple galaxies added to this simulator")
        engine = InteractionEngine(galaxy_a, params, galaxy_b=galaxy_b, seed=seed)
        self.engines.append(engine)
        logger.info("Started %s interaction (duration %.4g s)", params.kind, params.duration)
        return engine

    def cancel_interaction(self, engine: InteractionEngine):
        """Stop driving an engine. Its effects so far are kept."""
        if engine in self.engines:
            self.engines.remove(engine)
            logger.info("Cancelled %s interaction at progress %.3f", engine.params.kind, engine.progress())

    def set_profiling(self, enabled: bool = True):
        """Enable or disable step timing (physics ms, interactions ms)."""
        self._profile = enabled

    def get_timing(self) -> dict:
        """Return last step timing in ms: physics_ms, interactions_ms."""
        return {
            "physics_ms": self._last_physics_ms,
            "interactions_ms": self._last_interactions_ms,
        }

    def step(self, delta_time: Optional[float] = None):
        """Perform one tick: physics for all galaxies, then interactions."""
        if self.paused:
            return
        dt = self.dt if delta_time is None else delta_time
        if not math.isfinite(dt):
            logger.warning("Skipping tick with non-finite delta_time=%r", dt)
            return

        if self._profile:
            t0 = time.perf_counter()
        for galaxy in self.galaxies:
            galaxy.update(dt)
        if self._profile:
            t1 = time.perf_counter()

        for engine in self.engines:
            engine.update(dt)
        finished = [engine for engine in self.engines if engine.is_complete()]
        for engine in finished:
            self.engines.remove(engine)
            if self.on_interaction_complete:
                self.on_interaction_complete(self, engine)
        if self._profile:
            t2 = time.perf_counter()
            self._last_physics_ms = (t1 - t0) * 1000.0
            self._last_interactions_ms = (t2 - t1) * 1000.0

        if self.apply_dust_lanes:
            for galaxy in self.galaxies:
                galaxy.apply_dust_lanes()

        self.time += dt
        self.step_count += 1

        if self.on_step_callback:
            self.on_step_callback(self)

    def run(self, n_steps: int, delta_time: Optional[float] = None):
        """Run simulation for specified number of steps.

        Args:
            n_steps: Number of steps to run
            delta_time: Step length (default: self.dt)
        """
        for _ in range(n_steps):
            if self.paused:
                return
            self.step(delta_time)

    def pause(self):
        """Pause simulation."""
        self.paused = True

    def resume(self):
        """Resume simulation."""
        self.paused = False

    def set_timestep(self, dt: float):
        """Set time step.

        Raises:
            ValidationError: If dt is not a finite positive number
        """
        if not math.isfinite(dt) or dt <= 0:
            raise ValidationError(f"dt must be a finite number > 0, got {dt!r}")
        self.dt = dt

    def particle_counts(self) -> List[int]:
        return [galaxy.count for galaxy in self.galaxies]
