"""Closed-form orbital helpers."""

import math
from typing import Tuple
from galaxy_dynamics import constants
from galaxy_dynamics.errors import ValidationError


def circular_velocity(mass: float, r: float) -> float:
    """Keplerian circular speed v = sqrt(G * M / r).

    Args:
        mass: Central mass in solar masses
        r: Orbital radius (simulation length units)

    Returns:
        Circular speed
    """
    if r <= 0:
        raise ValidationError(f"radius must be > 0, got {r}")
    return math.sqrt(constants.G * mass * constants.SOLAR_MASS_KG / r)


def orbital_parameters(mass1: float, mass2: float, distance: float, eccentricity: float = 0.0) -> Tuple[float, float]:
    """Period and orbital speed of a two-body system.

    Args:
        mass1: First mass in kilograms
        mass2: Second mass in kilograms
        distance: Separation in metres
        eccentricity: Orbital eccentricity (0 for circular)

    Returns:
        Tuple of (period, velocity)
    """
    if distance <= 0:
        raise ValidationError(f"distance must be > 0, got {distance}")
    if mass1 + mass2 <= 0:
        raise ValidationError("total mass must be > 0")
    total_mass = mass1 + mass2
    period = 2 * math.pi * math.sqrt(distance ** 3 / (constants.G * total_mass))
    # vis-viva with semi-major axis a = distance * (1 + e)
    velocity = math.sqrt(constants.G * total_mass * (2 / distance - 1 / (distance * (1 + eccentricity))))
    return period, velocity
