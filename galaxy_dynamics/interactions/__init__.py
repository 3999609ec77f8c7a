"""Interaction models coupling one or two galaxies."""

from galaxy_dynamics.interactions.base import INTERACTION_KINDS, InteractionModel, InteractionParams
from galaxy_dynamics.interactions.collision import Collision
from galaxy_dynamics.interactions.engine import InteractionEngine
from galaxy_dynamics.interactions.factory import create_interaction, list_interaction_kinds
from galaxy_dynamics.interactions.harassment import Harassment
from galaxy_dynamics.interactions.merger import Merger
from galaxy_dynamics.interactions.stripping import Stripping
from galaxy_dynamics.interactions.tidal import Tidal

__all__ = [
    "INTERACTION_KINDS",
    "InteractionModel",
    "InteractionParams",
    "InteractionEngine",
    "create_interaction",
    "list_interaction_kinds",
    "Merger",
    "Collision",
    "Tidal",
    "Stripping",
    "Harassment",
]
