"""Interaction parameters and the abstract interaction model."""

import math
import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional, Tuple
import numpy as np
from galaxy_dynamics.errors import ValidationError
from galaxy_dynamics.physics.galaxy_physics import GalaxyPhysics

InteractionKind = Literal["merger", "collision", "tidal", "stripping", "harassment"]
INTERACTION_KINDS = ("merger", "collision", "tidal", "stripping", "harassment")


@dataclass(frozen=True)
class InteractionParams:
    """Interaction configuration supplied by external controls."""
    kind: InteractionKind
    strength: float = 1.0
    duration: float = 10.0  # Simulated seconds
    distance: float = 1.0  # Tidal activation threshold
    ram_direction: Tuple[float, float, float] = (1.0, 0.0, 0.0)  # Stripping only

    def __post_init__(self):
        if self.kind not in INTERACTION_KINDS:
            raise ValidationError(f"Unknown interaction kind '{self.kind}'. Available: {list(INTERACTION_KINDS)}")
        for name in ("strength", "duration", "distance"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
                raise ValidationError(f"{name} must be a finite number, got {value!r}")
        if self.strength < 0:
            raise ValidationError(f"strength must be >= 0, got {self.strength}")
        if self.duration <= 0:
            raise ValidationError(f"duration must be > 0, got {self.duration}")
        if self.distance <= 0:
            raise ValidationError(f"distance must be > 0, got {self.distance}")

        ram = np.asarray(self.ram_direction, dtype=np.float64)
        if ram.shape != (3,) or not np.all(np.isfinite(ram)) or not np.any(ram):
            raise ValidationError(f"ram_direction must be a finite non-zero 3-vector, got {self.ram_direction!r}")
        object.__setattr__(self, "ram_direction", tuple(float(c) for c in ram))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InteractionParams":
        try:
            return cls(**data)
        except TypeError as e:
            raise ValidationError(str(e)) from e


class InteractionModel(ABC):
    """One interaction kind's per-tick effect on one or two galaxies."""

    def __init__(self, params: InteractionParams):
        self.params = params

    @property
    @abstractmethod
    def kind(self) -> str:
        """Return the interaction kind this model implements."""
        pass

    @property
    def requires_partner(self) -> bool:
        """True if the model couples two galaxies."""
        return False

    @abstractmethod
    def apply(
        self,
        galaxy_a: GalaxyPhysics,
        galaxy_b: Optional[GalaxyPhysics],
        elapsed: float,
        progress: float,
        delta_time: float,
        rng: np.random.Generator,
    ):
        """Apply this tick's effect.

        Args:
            galaxy_a: Primary galaxy (always present)
            galaxy_b: Partner galaxy for two-body kinds, else None
            elapsed: Interaction clock after advancing (seconds)
            progress: clamp(elapsed / duration, 0, 1)
            delta_time: Tick length
            rng: Random generator owned by the engine
        """
        pass

    def decayed_strength(self, progress: float) -> float:
        """Strength fading linearly to zero over the interaction."""
        return self.params.strength * (1.0 - progress)
