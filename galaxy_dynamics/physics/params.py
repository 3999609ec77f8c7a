"""Physics parameter snapshot for one galaxy."""

import math
import numbers
from dataclasses import dataclass, fields, replace
from typing import Any, Dict
from galaxy_dynamics.errors import ValidationError


@dataclass(frozen=True)
class PhysicsParams:
    """Immutable galaxy parameters. Updates produce a new snapshot."""
    mass: float  # Solar masses
    size: float  # Kiloparsecs
    rotation_speed: float = 0.0  # Radians per second
    dust_density: float = 0.0  # 0-1
    star_formation_rate: float = 0.0  # 0-1
    temperature: float = 0.0  # Kelvin

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ValidationError(f"{f.name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ValidationError(f"{f.name} must be finite, got {value!r}")

        if self.mass <= 0:
            raise ValidationError(f"mass must be > 0, got {self.mass}")
        if self.size <= 0:
            raise ValidationError(f"size must be > 0, got {self.size}")
        if not 0.0 <= self.dust_density <= 1.0:
            raise ValidationError(f"dust_density must be in [0, 1], got {self.dust_density}")
        if not 0.0 <= self.star_formation_rate <= 1.0:
            raise ValidationError(f"star_formation_rate must be in [0, 1], got {self.star_formation_rate}")
        if self.temperature < 0:
            raise ValidationError(f"temperature must be >= 0, got {self.temperature}")

    def merged(self, **changes) -> "PhysicsParams":
        """Return a new snapshot with the given fields replaced.

        Raises:
            ValidationError: For unknown field names or invalid values
        """
        known = {f.name for f in fields(self)}
        unknown = set(changes) - known
        if unknown:
            raise ValidationError(f"Unknown physics parameter(s): {sorted(unknown)}")
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PhysicsParams":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValidationError(f"Unknown physics parameter(s): {sorted(unknown)}")
        try:
            return cls(**data)
        except TypeError as e:
            raise ValidationError(str(e)) from e
