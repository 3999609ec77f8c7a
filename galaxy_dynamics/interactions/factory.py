"""Factory mapping interaction kinds to model classes."""

from typing import Dict, List, Type
from galaxy_dynamics.errors import ValidationError
from galaxy_dynamics.interactions.base import InteractionModel, InteractionParams
from galaxy_dynamics.interactions.collision import Collision
from galaxy_dynamics.interactions.harassment import Harassment
from galaxy_dynamics.interactions.merger import Merger
from galaxy_dynamics.interactions.stripping import Stripping
from galaxy_dynamics.interactions.tidal import Tidal

_MODELS: Dict[str, Type[InteractionModel]] = {
    "merger": Merger,
    "collision": Collision,
    "tidal": Tidal,
    "stripping": Stripping,
    "harassment": Harassment,
}


def list_interaction_kinds() -> List[str]:
    """List all interaction kinds that can be created."""
    return list(_MODELS)


def create_interaction(params: InteractionParams) -> InteractionModel:
    """Create the model for params.kind.

    Raises:
        ValidationError: If the kind is unknown
    """
    model_class = _MODELS.get(params.kind)
    if model_class is None:
        raise ValidationError(f"Unknown interaction kind '{params.kind}'. Available: {list_interaction_kinds()}")
    return model_class(params)
