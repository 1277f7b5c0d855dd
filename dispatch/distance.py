from __future__ import annotations

import random
from typing import Optional


class RandomDistanceProvider:
    """
    Stand-in for a routed distance between restaurant and customer.
    Each call returns a uniform float in [0, max_distance).
    """
    def __init__(self, max_distance: float = 21.0, seed: Optional[int] = None):
        if max_distance <= 0:
            raise ValueError("max_distance must be > 0")
        self.max_distance = max_distance
        self._random = random.Random(seed)

    def __call__(self, *args) -> float:
        # random() is in [0, 1) so the upper bound is never reached
        return self._random.random() * self.max_distance
