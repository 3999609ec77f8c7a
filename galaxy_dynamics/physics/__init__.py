"""Particle state and per-galaxy physics."""

from galaxy_dynamics.physics.particle_field import ParticleField
from galaxy_dynamics.physics.params import PhysicsParams
from galaxy_dynamics.physics.galaxy_physics import GalaxyPhysics

__all__ = ["ParticleField", "PhysicsParams", "GalaxyPhysics"]
