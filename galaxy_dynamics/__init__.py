"""
Galaxy Dynamics - particle-based galactic dynamics core.

Features:
- Structure-of-arrays particle fields
- Symplectic Euler integration under a central potential with a thermal model
- Dust-lane shading
- Merger, collision, tidal, stripping and harassment interactions
- Galaxy type catalog and seed-position presets
"""

__version__ = "0.1.0"

from galaxy_dynamics.errors import GalaxyDynamicsError, IndexOutOfRange, ValidationError
from galaxy_dynamics.physics import GalaxyPhysics, ParticleField, PhysicsParams
from galaxy_dynamics.interactions import InteractionEngine, InteractionParams
from galaxy_dynamics.simulator import Simulator

__all__ = [
    "GalaxyDynamicsError",
    "IndexOutOfRange",
    "ValidationError",
    "ParticleField",
    "PhysicsParams",
    "GalaxyPhysics",
    "InteractionEngine",
    "InteractionParams",
    "Simulator",
]
