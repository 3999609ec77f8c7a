"""Structure-of-arrays particle state for one simulated galaxy."""

from typing import Dict, Sequence
import numpy as np
from galaxy_dynamics.errors import IndexOutOfRange, ValidationError


def _as_vector(value) -> np.ndarray:
    """Coerce value to a float 3-vector."""
    try:
        vector = np.asarray(value, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"expected a 3-vector, got {value!r}") from e
    if vector.shape != (3,):
        raise ValidationError(f"expected a 3-vector, got shape {vector.shape}")
    return vector


class ParticleField:
    """Parallel position/velocity/acceleration/temperature/color arrays.

    The particle count is fixed for the lifetime of a field. Shrinking or
    growing is done by `compact` and `concatenate`, which return new fields
    instead of splicing arrays in place.

    Invariants:
    - all arrays have length N (vectors are (N, 3))
    - temperature >= 0
    - color channels in [0, 1]
    """

    def __init__(self, position, velocity, acceleration, temperature, color):
        """Wrap existing arrays (no validation of values, only shapes).

        Use `ParticleField.create` to build a field from seed positions.
        """
        self.position = np.asarray(position, dtype=np.float64).reshape(-1, 3)
        n = self.position.shape[0]
        self.velocity = np.asarray(velocity, dtype=np.float64).reshape(n, 3)
        self.acceleration = np.asarray(acceleration, dtype=np.float64).reshape(n, 3)
        self.temperature = np.asarray(temperature, dtype=np.float64).reshape(n)
        self.color = np.asarray(color, dtype=np.float64).reshape(n, 3)

    @classmethod
    def create(cls, count: int, seed_positions: Sequence[float], temperature: float = 0.0) -> "ParticleField":
        """Build a field from a flat sequence of 3*count coordinates.

        Args:
            count: Number of particles (> 0)
            seed_positions: Flat x, y, z sequence of length 3*count
            temperature: Uniform baseline temperature (Kelvin, >= 0)

        Returns:
            New ParticleField with zero velocity and acceleration

        Raises:
            ValidationError: If count, seed length or temperature is invalid
        """
        if isinstance(count, bool) or not isinstance(count, (int, np.integer)) or count <= 0:
            raise ValidationError(f"count must be a positive integer, got {count!r}")
        try:
            seeds = np.asarray(seed_positions, dtype=np.float64).ravel()
        except (TypeError, ValueError) as e:
            raise ValidationError(f"seed_positions must be numeric, got {seed_positions!r}") from e
        if seeds.size != 3 * count:
            raise ValidationError(
                f"seed_positions must hold {3 * count} values for {count} particles, got {seeds.size}"
            )
        if not np.all(np.isfinite(seeds)):
            raise ValidationError("seed_positions must be finite")
        if not np.isfinite(temperature) or temperature < 0:
            raise ValidationError(f"temperature must be finite and >= 0, got {temperature!r}")

        return cls(
            position=seeds.reshape(count, 3).copy(),
            velocity=np.zeros((count, 3)),
            acceleration=np.zeros((count, 3)),
            temperature=np.full(count, float(temperature)),
            color=np.ones((count, 3)),
        )

    @classmethod
    def empty(cls) -> "ParticleField":
        """Return a field with no particles."""
        return cls(np.zeros((0, 3)), np.zeros((0, 3)), np.zeros((0, 3)), np.zeros(0), np.zeros((0, 3)))

    @property
    def count(self) -> int:
        return self.position.shape[0]

    def __len__(self) -> int:
        return self.count

    def __repr__(self) -> str:
        return f"ParticleField(count={self.count})"

    def _check_index(self, index: int):
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            raise IndexOutOfRange(f"particle index must be an integer, got {index!r}")
        if index < 0 or index >= self.count:
            raise IndexOutOfRange(f"particle index {index} out of range for {self.count} particles")

    def get_position(self, index: int) -> np.ndarray:
        self._check_index(index)
        return self.position[index].copy()

    def set_position(self, index: int, value: Sequence[float]):
        self._check_index(index)
        self.position[index] = _as_vector(value)

    def get_velocity(self, index: int) -> np.ndarray:
        self._check_index(index)
        return self.velocity[index].copy()

    def set_velocity(self, index: int, value: Sequence[float]):
        self._check_index(index)
        self.velocity[index] = _as_vector(value)

    def get_acceleration(self, index: int) -> np.ndarray:
        self._check_index(index)
        return self.acceleration[index].copy()

    def set_acceleration(self, index: int, value: Sequence[float]):
        self._check_index(index)
        self.acceleration[index] = _as_vector(value)

    def get_temperature(self, index: int) -> float:
        self._check_index(index)
        return float(self.temperature[index])

    def set_temperature(self, index: int, value: float):
        """Set one particle's temperature, clamped to >= 0."""
        self._check_index(index)
        try:
            value = float(value)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"temperature must be a number, got {value!r}") from e
        self.temperature[index] = max(0.0, value)

    def get_color(self, index: int) -> np.ndarray:
        self._check_index(index)
        return self.color[index].copy()

    def set_color(self, index: int, value: Sequence[float]):
        """Set one particle's color, each channel clamped to [0, 1]."""
        self._check_index(index)
        self.color[index] = np.clip(_as_vector(value), 0.0, 1.0)

    def compact(self, keep_mask) -> "ParticleField":
        """Return a new field holding only the particles where keep_mask is True.

        Args:
            keep_mask: Boolean array of length N

        Returns:
            New ParticleField (arrays are copies)
        """
        mask = np.asarray(keep_mask, dtype=bool)
        if mask.shape != (self.count,):
            raise ValidationError(f"keep_mask must have shape ({self.count},), got {mask.shape}")
        return ParticleField(
            self.position[mask],
            self.velocity[mask],
            self.acceleration[mask],
            self.temperature[mask],
            self.color[mask],
        )

    def concatenate(self, other: "ParticleField") -> "ParticleField":
        """Return a new field with this field's particles followed by other's."""
        return ParticleField(
            np.concatenate([self.position, other.position]),
            np.concatenate([self.velocity, other.velocity]),
            np.concatenate([self.acceleration, other.acceleration]),
            np.concatenate([self.temperature, other.temperature]),
            np.concatenate([self.color, other.color]),
        )

    def copy(self) -> "ParticleField":
        return ParticleField(
            self.position.copy(),
            self.velocity.copy(),
            self.acceleration.copy(),
            self.temperature.copy(),
            self.color.copy(),
        )

    def centroid(self) -> np.ndarray:
        """Mean particle position (zero vector for an empty field)."""
        if self.count == 0:
            return np.zeros(3)
        return self.position.mean(axis=0)

    def views(self) -> Dict[str, np.ndarray]:
        """Read-only views of the buffers a renderer consumes."""
        out = {}
        for name in ("position", "color", "temperature"):
            view = getattr(self, name).view()
            view.flags.writeable = False
            out[name] = view
        return out
