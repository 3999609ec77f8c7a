"""Seed-position presets and the galaxy type catalog."""

from galaxy_dynamics.presets.base import Preset
from galaxy_dynamics.presets.disk import SpiralDiskPreset
from galaxy_dynamics.presets.elliptical import EllipticalPreset
from galaxy_dynamics.presets.catalog import (
    GALAXY_TYPES,
    GalaxyType,
    build_galaxy,
    get_galaxy_type,
    list_galaxy_types,
)

__all__ = [
    "Preset",
    "SpiralDiskPreset",
    "EllipticalPreset",
    "GALAXY_TYPES",
    "GalaxyType",
    "build_galaxy",
    "get_galaxy_type",
    "list_galaxy_types",
]
