"""Reproducibility utilities for deterministic simulations."""

import random
from typing import Optional
import numpy as np


def set_all_seeds(seed: int):
    """Seed Python's and NumPy's global random generators.

    Args:
        seed: Random seed
    """
    random.seed(seed)
    np.random.seed(seed)


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create an independent NumPy generator (fresh entropy when seed is None)."""
    return np.random.default_rng(seed)
