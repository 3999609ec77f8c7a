"""Configuration management."""

import json
import math
from dataclasses import dataclass, asdict, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional
import yaml
from galaxy_dynamics.errors import ValidationError


def _default_galaxies() -> List[Dict[str, Any]]:
    return [{"type": "milky-way-like"}]


@dataclass
class Config:
    """Simulation configuration.

    galaxies: one dict per galaxy with keys
        type (galaxy catalog name), n_particles, physics (PhysicsParams
        overrides), offset ([x, y, z] shift of the seed positions), seed
    interactions: one dict per interaction with InteractionParams keys plus
        galaxy_a / galaxy_b (indices into galaxies) and seed
    """
    # Simulation parameters
    dt: float = 1.0 / 60.0
    n_steps: int = 600
    seed: Optional[int] = None
    apply_dust_lanes: bool = True

    # Scene
    galaxies: List[Dict[str, Any]] = field(default_factory=_default_galaxies)
    interactions: List[Dict[str, Any]] = field(default_factory=list)

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def validate(self) -> "Config":
        """Check values that can be checked without building the scene.

        Raises:
            ValidationError: On the first invalid value
        """
        if not isinstance(self.dt, (int, float)) or not math.isfinite(self.dt) or self.dt <= 0:
            raise ValidationError(f"dt must be a finite number > 0, got {self.dt!r}")
        if not isinstance(self.n_steps, int) or self.n_steps < 0:
            raise ValidationError(f"n_steps must be a non-negative integer, got {self.n_steps!r}")
        if not self.galaxies:
            raise ValidationError("at least one galaxy is required")
        for i, galaxy in enumerate(self.galaxies):
            if not isinstance(galaxy, dict) or "type" not in galaxy:
                raise ValidationError(f"galaxies[{i}] must be a mapping with a 'type' key")
        n_galaxies = len(self.galaxies)
        for i, interaction in enumerate(self.interactions):
            if not isinstance(interaction, dict) or "kind" not in interaction:
                raise ValidationError(f"interactions[{i}] must be a mapping with a 'kind' key")
            for key in ("galaxy_a", "galaxy_b"):
                index = interaction.get(key, 0 if key == "galaxy_a" else None)
                if index is None:
                    continue
                if not isinstance(index, int) or not 0 <= index < n_galaxies:
                    raise ValidationError(f"interactions[{i}].{key}={index!r} is not a galaxy index")
        return self

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValidationError(f"Unknown config key(s): {sorted(unknown)}")
        return cls(**data).validate()


def load_config(config_path: str) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        Validated Config object
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        if config_path.suffix in ('.yaml', '.yml'):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    if not isinstance(data, dict):
        raise ValidationError(f"{config_path} does not contain a mapping")
    return Config.from_dict(data)


def save_config(config: Config, output_path: str):
    """Save configuration to file.

    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)

    with open(output_path, 'w') as f:
        if output_path.suffix in ('.yaml', '.yml'):
            yaml.safe_dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
