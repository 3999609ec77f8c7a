"""Exception types raised by galaxy_dynamics."""


class GalaxyDynamicsError(Exception):
    """Base class for all galaxy_dynamics errors."""


class ValidationError(GalaxyDynamicsError, ValueError):
    """Bad construction or update parameters."""


class IndexOutOfRange(GalaxyDynamicsError, IndexError):
    """Particle accessor called with an index outside the field."""
