"""Diagnostics for particle fields."""

from typing import Dict, Tuple
import numpy as np
from galaxy_dynamics.physics.particle_field import ParticleField


def radii(field: ParticleField) -> np.ndarray:
    """3-D distance of each particle from the origin."""
    return np.linalg.norm(field.position, axis=1)


def planar_radii(field: ParticleField) -> np.ndarray:
    """Distance of each particle from the y axis (orbital plane radius)."""
    return np.hypot(field.position[:, 0], field.position[:, 2])


def kinetic_energy(field: ParticleField) -> float:
    """Specific kinetic energy summed over particles: K = 0.5 * sum(v^2)."""
    return float(0.5 * np.sum(field.velocity ** 2))


def radial_profile(field: ParticleField, bins: int = 10) -> Tuple[np.ndarray, np.ndarray]:
    """Histogram of particle radii."""
    hist, bin_edges = np.histogram(radii(field), bins=bins)
    return hist, bin_edges


def temperature_summary(field: ParticleField) -> Dict[str, float]:
    """Min, max and mean temperature (zeros for an empty field)."""
    if field.count == 0:
        return {"min": 0.0, "max": 0.0, "mean": 0.0}
    t = field.temperature
    return {"min": float(t.min()), "max": float(t.max()), "mean": float(t.mean())}
