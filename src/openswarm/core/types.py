"""Core data types for OpenSwarm."""

from dataclasses import dataclass
from typing import Optional, Tuple
import numpy as np
from enum import Enum


class VelocityUpdateType(Enum):
    """Available velocity update policies."""
    INERTIA_WEIGHT = "inertia_weight"
    CONSTRICTION_FACTOR = "constriction_factor"


class BestTracking(Enum):
    """How personal bests are remembered."""
    PER_PARTICLE = "per_particle"
    SHARED = "shared"  # single best of the current scan, shared by all particles


class TerminationCriterion(Enum):
    """Which objective value is compared against the tolerance."""
    GLOBAL_BEST = "global_best"
    LAST_EVALUATED = "last_evaluated"


@dataclass
class SwarmState:
    """
    Working state of one optimization run.

    Positions and velocities are stacked along the first axis, so particle
    ``k`` is ``positions[k]`` and every slice has the shape of the start point.
    """
    positions: np.ndarray
    velocities: np.ndarray
    personal_best_positions: np.ndarray
    personal_best_values: np.ndarray
    global_best_position: np.ndarray
    global_best_value: float = np.inf
    last_value: float = np.inf
    iteration: int = 0

    @classmethod
    def from_point(cls, point: np.ndarray, swarm_size: int,
                   best_tracking: BestTracking = BestTracking.PER_PARTICLE) -> "SwarmState":
        """Allocate a swarm whose particles all start at ``point``."""
        positions = np.repeat(point[np.newaxis, ...], swarm_size, axis=0).astype(float)
        # Velocities start equal to the start point, not at zero.
        velocities = positions.copy()

        if best_tracking == BestTracking.PER_PARTICLE:
            personal_best_positions = positions.copy()
            personal_best_values = np.full(swarm_size, np.inf)
        else:
            personal_best_positions = positions[0].copy()
            personal_best_values = np.full(1, np.inf)

        return cls(
            positions=positions,
            velocities=velocities,
            personal_best_positions=personal_best_positions,
            personal_best_values=personal_best_values,
            global_best_position=positions[0].copy()
        )

    @property
    def swarm_size(self) -> int:
        return self.positions.shape[0]

    @property
    def point_shape(self) -> Tuple[int, ...]:
        return self.positions.shape[1:]

    def shape_mismatch(self, point_shape: Tuple[int, ...]) -> Optional[str]:
        """Describe the first array that no longer matches ``point_shape``."""
        expected = (self.swarm_size,) + tuple(point_shape)
        if self.positions.shape != expected:
            return f"positions have shape {self.positions.shape}, expected {expected}"
        if self.velocities.shape != expected:
            return f"velocities have shape {self.velocities.shape}, expected {expected}"
        if self.global_best_position.shape != tuple(point_shape):
            return (f"global best has shape {self.global_best_position.shape}, "
                    f"expected {tuple(point_shape)}")
        return None
