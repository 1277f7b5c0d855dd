"""
Purpose: Central configuration for order assignment.
What it does:

Stores the tunables used when a Delivery is created:

MAX_DISTANCE = 21.0   (distances are drawn from [0, MAX_DISTANCE))
RANDOM_SEED = None    (set it to make distances reproducible)

Both can be overridden from the environment (or a .env file):

DISPATCH_MAX_DISTANCE=21
DISPATCH_RANDOM_SEED=42

Rule: No logic here—just parameters so you can tune without rewriting code.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class AssignmentPolicy:
    """
    Central configuration for order assignment.
    """

    # --- Distance ---
    # Upper bound (exclusive) of the stand-in distance given to each Delivery.
    max_distance: float = 21.0

    # Seed for the distance generator. None means a fresh, unseeded generator.
    random_seed: Optional[int] = None

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        if self.max_distance <= 0:
            raise ValueError("max_distance must be > 0")


def default_assignment_policy() -> AssignmentPolicy:
    """
    Convenience factory: defaults, overridden by DISPATCH_* environment variables.
    """
    load_dotenv()

    max_distance = os.getenv("DISPATCH_MAX_DISTANCE")
    random_seed = os.getenv("DISPATCH_RANDOM_SEED")

    p = AssignmentPolicy(
        max_distance=float(max_distance) if max_distance else AssignmentPolicy.max_distance,
        random_seed=int(random_seed) if random_seed else None,
    )
    p.validate()
    return p
