"""Catalog of named galaxy types."""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence
import numpy as np
from galaxy_dynamics import constants
from galaxy_dynamics.errors import ValidationError
from galaxy_dynamics.physics.galaxy_physics import GalaxyPhysics
from galaxy_dynamics.physics.params import PhysicsParams
from galaxy_dynamics.physics.particle_field import ParticleField
from galaxy_dynamics.presets.base import Preset
from galaxy_dynamics.presets.disk import SpiralDiskPreset
from galaxy_dynamics.presets.elliptical import EllipticalPreset


@dataclass(frozen=True)
class GalaxyType:
    """Morphology and physics defaults for one kind of galaxy."""
    name: str
    morphology: str  # "spiral", "elliptical", "lenticular", "ring", "merger"
    size: float
    arm_count: int
    dust_density: float
    star_formation_rate: float
    rotation_speed: float
    particle_count: int
    spiral_tightness: float
    gm: float = 2000.0  # G * M in simulation units
    temperature: float = 10000.0
    ellipticity: float = 0.0

    @property
    def mass(self) -> float:
        """Mass in solar masses."""
        return self.gm * constants.SIMULATION_MASS_UNIT

    def physics_params(self, **overrides) -> PhysicsParams:
        params = PhysicsParams(
            mass=self.mass,
            size=self.size,
            rotation_speed=self.rotation_speed,
            dust_density=self.dust_density,
            star_formation_rate=self.star_formation_rate,
            temperature=self.temperature,
        )
        return params.merged(**overrides) if overrides else params

    def preset(self, n_particles: Optional[int] = None, seed: Optional[int] = None) -> Preset:
        n = n_particles if n_particles is not None else self.particle_count
        if self.morphology == "elliptical":
            return EllipticalPreset(n, seed=seed, radius=self.size, ellipticity=self.ellipticity)
        # Tightly wound types get more shear
        spiral = 2.0 + 4.0 * self.spiral_tightness
        return SpiralDiskPreset(n, seed=seed, radius=self.size, height=0.1 * self.size, spiral=spiral)


GALAXY_TYPES: Dict[str, GalaxyType] = {
    t.name: t
    for t in (
        GalaxyType("milky-way-like", "spiral", 50, 4, 0.5, 0.7, 0.0005, 100000, 0.3),
        GalaxyType("andromeda-like", "spiral", 65, 2, 0.6, 0.5, 0.0004, 120000, 0.4, gm=3000.0),
        GalaxyType("antennae", "merger", 40, 2, 0.8, 0.9, 0.0006, 150000, 0.1, temperature=15000.0),
        GalaxyType("m87-like", "elliptical", 80, 0, 0.2, 0.1, 0.0002, 200000, 0.0,
                   gm=6000.0, temperature=6000.0, ellipticity=0.1),
        GalaxyType("cartwheel", "ring", 45, 1, 0.4, 0.8, 0.0004, 90000, 0.0),
        GalaxyType("sombrero", "lenticular", 55, 0, 0.7, 0.3, 0.0003, 110000, 0.0, temperature=8000.0),
        GalaxyType("grand-design-spiral", "spiral", 55, 2, 0.6, 0.8, 0.0004, 110000, 0.35),
        GalaxyType("flocculent-spiral", "spiral", 45, 6, 0.4, 0.6, 0.0006, 90000, 0.25),
        GalaxyType("barred-spiral", "spiral", 60, 2, 0.7, 0.75, 0.0003, 130000, 0.4),
        GalaxyType("multi-arm-spiral", "spiral", 52, 5, 0.55, 0.65, 0.0005, 115000, 0.3),
        GalaxyType("giant-cD", "elliptical", 200, 0, 0.1, 0.05, 0.0001, 500000, 0.0,
                   gm=20000.0, temperature=5000.0, ellipticity=0.2),
        GalaxyType("e0-spherical", "elliptical", 70, 0, 0.15, 0.08, 0.0002, 250000, 0.0,
                   gm=5000.0, temperature=6000.0),
    )
}


def list_galaxy_types() -> List[str]:
    return list(GALAXY_TYPES)


def get_galaxy_type(name: str) -> GalaxyType:
    """Look up a galaxy type by name.

    Raises:
        ValidationError: If the name is not in the catalog
    """
    galaxy_type = GALAXY_TYPES.get(name)
    if galaxy_type is None:
        raise ValidationError(f"Unknown galaxy type: {name}. Available: {list_galaxy_types()}")
    return galaxy_type


def build_galaxy(
    name: str,
    n_particles: Optional[int] = None,
    seed: Optional[int] = None,
    offset: Optional[Sequence[float]] = None,
    **physics_overrides,
) -> GalaxyPhysics:
    """Create a ready-to-run galaxy from the catalog.

    Args:
        name: Galaxy type name
        n_particles: Particle count (default: the type's particle count)
        seed: Random seed for the seed positions
        offset: Optional [x, y, z] shift applied to every seed position
        **physics_overrides: PhysicsParams fields to override

    Returns:
        GalaxyPhysics owning a new ParticleField
    """
    galaxy_type = get_galaxy_type(name)
    params = galaxy_type.physics_params(**physics_overrides)
    preset = galaxy_type.preset(n_particles, seed)
    positions = preset.generate()
    if offset is not None:
        shift = np.asarray(offset, dtype=np.float64)
        if shift.shape != (3,):
            raise ValidationError(f"offset must have 3 components, got {offset!r}")
        positions = (positions.reshape(-1, 3) + shift).ravel()
    field = ParticleField.create(preset.n_particles, positions, temperature=params.temperature)
    return GalaxyPhysics(field, params)
