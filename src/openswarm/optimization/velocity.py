"""Velocity update policies for Particle Swarm Optimization.

Both policies share the update shape

    v_i <- a * (b * v_i + c1 * r1 o (pbest_i - x_i) + c2 * r2 o (gbest - x_i))

and differ in how the previous velocity is damped: the inertia-weight variant
scales it by a free weight omega, the constriction-factor variant scales the
whole update by a coefficient chi derived from c1 and c2.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Union

import numpy as np

from openswarm.core.types import VelocityUpdateType
from openswarm.models.optimization import ConfigurationError

logger = logging.getLogger(__name__)


class VelocityUpdatePolicy(ABC):
    """Abstract base class for velocity update policies."""

    name = "velocity_update"

    def initialize(self, cognitive_acceleration: float, social_acceleration: float) -> None:
        """Precompute constants that depend on the acceleration coefficients."""

    @abstractmethod
    def update(
        self,
        positions: np.ndarray,
        velocities: np.ndarray,
        personal_best: np.ndarray,
        global_best: np.ndarray,
        inertia_weight: float,
        cognitive_acceleration: float,
        social_acceleration: float,
        rng: np.random.Generator
    ) -> None:
        """Write the next velocity of every particle into ``velocities``."""

    @staticmethod
    def _attraction(
        positions: np.ndarray,
        personal_best: np.ndarray,
        global_best: np.ndarray,
        cognitive_acceleration: float,
        social_acceleration: float,
        rng: np.random.Generator
    ) -> np.ndarray:
        # Fresh r1, r2 for every particle; personal_best is either one point
        # per particle or a single shared point and broadcasts either way.
        r1 = rng.random(positions.shape)
        r2 = rng.random(positions.shape)

        cognitive = cognitive_acceleration * r1 * (personal_best - positions)
        social = social_acceleration * r2 * (global_best - positions)
        return cognitive + social

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class InertiaWeight(VelocityUpdatePolicy):
    """
    PSO with inertia weight.

    The inertia weight calibrates the influence of the previous velocity:

        v_i(t + 1) = w * v_i(t) + c1 * r1 * (pbest_i - x_i) + c2 * r2 * (gbest - x_i)
    """

    name = VelocityUpdateType.INERTIA_WEIGHT.value

    def update(self, positions, velocities, personal_best, global_best,
               inertia_weight, cognitive_acceleration, social_acceleration, rng):
        attraction = self._attraction(
            positions, personal_best, global_best,
            cognitive_acceleration, social_acceleration, rng
        )
        velocities[...] = inertia_weight * velocities + attraction


class ConstrictionFactor(VelocityUpdatePolicy):
    """
    PSO with Clerc's constriction factor.

    With phi = c1 + c2 > 4 the constriction coefficient

        chi = 2 / |2 - phi - sqrt(phi^2 - 4 * phi)|

    damps the whole update and the inertia weight is not used:

        v_i(t + 1) = chi * (v_i(t) + c1 * r1 * (pbest_i - x_i) + c2 * r2 * (gbest - x_i))
    """

    name = VelocityUpdateType.CONSTRICTION_FACTOR.value

    def __init__(self):
        self.constriction: Optional[float] = None

    def initialize(self, cognitive_acceleration: float, social_acceleration: float) -> None:
        phi = cognitive_acceleration + social_acceleration
        if phi <= 4.0:
            raise ConfigurationError(
                "Constriction factor requires cognitive_acceleration + "
                f"social_acceleration > 4, got {phi}",
                details={
                    "cognitive_acceleration": cognitive_acceleration,
                    "social_acceleration": social_acceleration,
                }
            )

        self.constriction = 2.0 / abs(2.0 - phi - np.sqrt(phi * phi - 4.0 * phi))
        logger.debug(f"Constriction coefficient {self.constriction:.6f} for phi={phi}")

    def update(self, positions, velocities, personal_best, global_best,
               inertia_weight, cognitive_acceleration, social_acceleration, rng):
        if self.constriction is None:
            raise ConfigurationError("ConstrictionFactor.update called before initialize")

        attraction = self._attraction(
            positions, personal_best, global_best,
            cognitive_acceleration, social_acceleration, rng
        )
        velocities[...] = self.constriction * (velocities + attraction)

    def __repr__(self) -> str:
        return f"ConstrictionFactor(constriction={self.constriction})"


_POLICIES = {
    VelocityUpdateType.INERTIA_WEIGHT: InertiaWeight,
    VelocityUpdateType.CONSTRICTION_FACTOR: ConstrictionFactor,
}


def create_velocity_update(kind: Union[str, VelocityUpdateType]) -> VelocityUpdatePolicy:
    """Build a velocity update policy from its name."""
    try:
        kind = VelocityUpdateType(kind)
    except ValueError:
        allowed = [member.value for member in VelocityUpdateType]
        raise ConfigurationError(
            f"Unknown velocity update '{kind}', expected one of {allowed}",
            details={"velocity_update": kind}
        ) from None

    return _POLICIES[kind]()
