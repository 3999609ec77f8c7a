"""Per-tick kinematic and thermal integration of one galaxy."""

import logging
import math
from typing import Sequence
import numpy as np
from galaxy_dynamics import constants
from galaxy_dynamics.physics.params import PhysicsParams
from galaxy_dynamics.physics.particle_field import ParticleField

logger = logging.getLogger(__name__)


def unit_vector(vector) -> np.ndarray:
    """Normalize a 3-vector; the zero vector stays zero."""
    v = np.asarray(vector, dtype=np.float64).reshape(3)
    norm = np.linalg.norm(v)
    if norm == 0 or not np.isfinite(norm):
        return np.zeros(3)
    return v / norm


class GalaxyPhysics:
    """Owns one ParticleField and advances it under a fixed central potential.

    The orbital plane is x-z; y is the disk normal. Gravity comes from a
    point mass at the origin (no particle-particle forces).

    Integration is semi-implicit (symplectic) Euler:
    1. x += v_old * dt
    2. a = -GM x / |x|^3 at the new position; v += a * dt
    """

    def __init__(self, field: ParticleField, params: PhysicsParams):
        """Initialize circular orbits and a radial temperature profile.

        Args:
            field: Particle state to own (mutated in place from now on)
            params: Validated physics parameters
        """
        self.field = field
        self.params = params

        x = field.position[:, 0]
        z = field.position[:, 2]
        r = np.hypot(x, z)
        orbiting = r > 0

        # v = sqrt(GM/r), direction (-z, 0, x) / r
        omega = np.zeros_like(r)
        omega[orbiting] = np.sqrt(self.gm / r[orbiting]) / r[orbiting]
        field.velocity[:, 0] = -z * omega
        field.velocity[:, 1] = 0.0
        field.velocity[:, 2] = x * omega

        field.temperature[:] = np.maximum(0.0, params.temperature * (1.0 - r / params.size))
        self._derive_colors()

    @property
    def gm(self) -> float:
        """G times the galaxy mass in kilograms."""
        return constants.G * self.params.mass * constants.SOLAR_MASS_KG

    @property
    def count(self) -> int:
        return self.field.count

    def update(self, delta_time: float):
        """Advance positions, velocities, temperatures and colors by one tick.

        A zero delta_time leaves positions and velocities untouched. A
        non-finite delta_time is logged and the tick is skipped.
        """
        if not math.isfinite(delta_time):
            logger.warning("Skipping physics tick with non-finite delta_time=%r", delta_time)
            return

        field = self.field
        field.position += field.velocity * delta_time

        r = np.linalg.norm(field.position, axis=1)
        active = r > 0
        if np.any(active):
            r_active = r[active]
            a_mag = self.gm / (r_active * r_active)
            acc = -field.position[active] / r_active[:, np.newaxis] * a_mag[:, np.newaxis]
            field.acceleration[active] = acc
            field.velocity[active] += acc * delta_time

        self.update_temperature(delta_time)

    def update_temperature(self, delta_time: float):
        """Apply cooling and star-formation heating, then recolor."""
        if not math.isfinite(delta_time):
            return
        field = self.field
        change = (self.params.star_formation_rate - constants.COOLING_RATE) * delta_time
        field.temperature[:] = np.maximum(0.0, field.temperature + change)
        self._derive_colors()

    def _derive_colors(self):
        """Hot particles red, cool particles blue."""
        baseline = self.params.temperature
        if baseline > 0:
            n = np.clip(self.field.temperature / baseline, 0.0, 1.0)
        else:
            n = np.zeros(self.field.count)
        self.field.color[:, 0] = n
        self.field.color[:, 1] = constants.GREEN_RATIO * n
        self.field.color[:, 2] = 1.0 - n

    def apply_dust_lanes(self):
        """Darken particles lying in a two-armed spiral dust pattern.

        Depends only on current positions, so it has to be re-applied after
        every position update for the lanes to stay visible.
        """
        if self.params.dust_density <= 0 or self.field.count == 0:
            return
        x = self.field.position[:, 0]
        z = self.field.position[:, 2]
        r = np.hypot(x, z)
        angle = np.arctan2(z, x)
        phase = constants.DUST_SPIRAL_WINDING * r / self.params.size + angle
        in_lane = np.abs(np.sin(phase)) < self.params.dust_density
        self.field.color[in_lane] *= constants.DUST_DARKENING

    def update_params(self, **changes):
        """Replace parameter fields with new values (no interpolation).

        Raises:
            ValidationError: If any value is invalid; current params are kept
        """
        self.params = self.params.merged(**changes)

    # Hooks used by interaction models

    def centroid(self) -> np.ndarray:
        return self.field.centroid()

    def apply_acceleration(self, vector: Sequence[float], delta_time: float):
        """Add a uniform acceleration to every particle for this tick."""
        vec = np.asarray(vector, dtype=np.float64).reshape(3)
        self.field.acceleration += vec
        self.field.velocity += vec * delta_time

    def apply_shockwave(self, amount: float, delta_time: float):
        """Radial kick away from the centroid (inward when amount < 0)."""
        offsets = self.field.position - self.centroid()
        dist = np.linalg.norm(offsets, axis=1)
        unit = np.zeros_like(offsets)
        nonzero = dist > 0
        unit[nonzero] = offsets[nonzero] / dist[nonzero, np.newaxis]
        self.field.acceleration += unit * amount
        self.field.velocity += unit * amount * delta_time

    def heat(self, amount: float):
        """Raise every particle's temperature by amount (clamped at 0)."""
        self.field.temperature[:] = np.maximum(0.0, self.field.temperature + amount)
        self._derive_colors()

    def scatter(self, amount: float, delta_time: float, rng: np.random.Generator):
        """Randomize velocities with a normal kick of scale amount * delta_time."""
        if amount == 0 or self.field.count == 0:
            return
        kick = rng.standard_normal((self.field.count, 3)) * (amount * delta_time)
        self.field.velocity += kick

    def apply_tidal_force(self, direction: Sequence[float], strength: float, delta_time: float):
        """Pull every particle along direction with the given strength."""
        self.apply_acceleration(unit_vector(direction) * strength, delta_time)

    def apply_ram_pressure(self, direction: Sequence[float], strength: float, delta_time: float):
        self.apply_acceleration(unit_vector(direction) * strength, delta_time)

    def strip_beyond(self, radius: float) -> int:
        """Permanently remove particles farther than radius from the centroid.

        Returns:
            Number of particles removed
        """
        dist = np.linalg.norm(self.field.position - self.centroid(), axis=1)
        keep = dist <= radius
        removed = int(self.field.count - np.count_nonzero(keep))
        if removed:
            self.field = self.field.compact(keep)
            logger.info("Stripped %d particles beyond r=%.4g (%d remain)", removed, radius, self.field.count)
        return removed

    def absorb(self, donor: "GalaxyPhysics", count: int) -> int:
        """Move the donor's particles nearest this galaxy's centroid into this galaxy.

        Args:
            donor: Galaxy losing particles
            count: Number of particles to take

        Returns:
            Number of particles actually moved
        """
        count = min(int(count), donor.count)
        if count <= 0:
            return 0
        dist = np.linalg.norm(donor.field.position - self.centroid(), axis=1)
        take = np.zeros(donor.count, dtype=bool)
        take[np.argsort(dist, kind="stable")[:count]] = True

        self.field = self.field.concatenate(donor.field.compact(take))
        donor.field = donor.field.compact(~take)
        logger.info("Absorbed %d particles (now %d, donor %d)", count, self.field.count, donor.field.count)
        return count
