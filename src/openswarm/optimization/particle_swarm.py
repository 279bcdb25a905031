"""Particle Swarm Optimization for OpenSwarm.

PSO follows the social behaviour of bird flocks: a swarm of particles moves
through the search space, each pulled towards the best point it remembers and
the best point the swarm has seen. See J. Kennedy and R. Eberhart, "Particle
swarm optimization", Proceedings of ICNN'95, vol. 4, pp. 1942-1948.

The objective is any object with an ``evaluate(point) -> float`` method, or a
plain callable taking the point.
"""

import time
import logging
from typing import Any, Callable, Optional, Union

import numpy as np

from openswarm.core.config import PSOConfig
from openswarm.core.types import SwarmState, BestTracking, TerminationCriterion
from openswarm.models.optimization import (
    OptimizationResult,
    OptimizationStatus,
    ShapeError,
)
from openswarm.optimization.velocity import (
    VelocityUpdatePolicy,
    ConstrictionFactor,
    create_velocity_update,
)

logger = logging.getLogger(__name__)

RandomState = Union[None, int, np.random.Generator]

# Clerc and Kennedy's coefficients, giving phi = 4.1 and chi ~ 0.7298.
CONSTRICTION_ACCELERATION = 2.05


def as_evaluator(objective: Any) -> Callable[[np.ndarray], Any]:
    """Return the evaluation entry point of ``objective``."""
    evaluate = getattr(objective, "evaluate", None)
    if callable(evaluate):
        return evaluate
    if callable(objective):
        return objective
    raise TypeError(
        f"Objective must expose evaluate(point) or be callable, got {type(objective).__name__}"
    )


class ParticleSwarmOptimizer:
    """
    Particle Swarm Optimizer.

    Hyperparameters live in a :class:`PSOConfig` and can be changed between
    runs through the properties below. Swarm state is allocated fresh for every
    run and sized from the start point.
    """

    def __init__(
        self,
        config: Optional[PSOConfig] = None,
        velocity_update: Optional[VelocityUpdatePolicy] = None,
        random_state: RandomState = None
    ):
        self.config = config if config is not None else PSOConfig()
        self._velocity_update = velocity_update
        self._policy_injected = velocity_update is not None
        self.rng = np.random.default_rng(
            random_state if random_state is not None else self.config.seed
        )
        self.result: Optional[OptimizationResult] = None

        logger.info("Particle Swarm Optimizer initialized")

    @property
    def swarm_size(self) -> int:
        return self.config.swarm_size

    @swarm_size.setter
    def swarm_size(self, value: int):
        self.config.swarm_size = value

    @property
    def inertia_weight(self) -> float:
        return self.config.inertia_weight

    @inertia_weight.setter
    def inertia_weight(self, value: float):
        self.config.inertia_weight = value

    @property
    def cognitive_acceleration(self) -> float:
        return self.config.cognitive_acceleration

    @cognitive_acceleration.setter
    def cognitive_acceleration(self, value: float):
        self.config.cognitive_acceleration = value

    @property
    def social_acceleration(self) -> float:
        return self.config.social_acceleration

    @social_acceleration.setter
    def social_acceleration(self, value: float):
        self.config.social_acceleration = value

    @property
    def max_iterations(self) -> int:
        """Maximum number of iterations (0 means no limit)."""
        return self.config.max_iterations

    @max_iterations.setter
    def max_iterations(self, value: int):
        self.config.max_iterations = value

    @property
    def tolerance(self) -> float:
        return self.config.tolerance

    @tolerance.setter
    def tolerance(self, value: float):
        self.config.tolerance = value

    @property
    def velocity_update(self) -> VelocityUpdatePolicy:
        """
        Velocity update policy.

        Unless a policy was passed in or assigned, it follows
        ``config.velocity_update`` and is rebuilt when that name changes.
        """
        if not self._policy_injected:
            wanted = getattr(self.config.velocity_update, "value", self.config.velocity_update)
            if self._velocity_update is None or self._velocity_update.name != wanted:
                self._velocity_update = create_velocity_update(wanted)
        return self._velocity_update

    @velocity_update.setter
    def velocity_update(self, policy: VelocityUpdatePolicy):
        self._velocity_update = policy
        self._policy_injected = True

    def optimize(self, objective: Any, iterate: np.ndarray) -> float:
        """
        Optimize the given objective starting from ``iterate``.

        The best position found is copied back into ``iterate`` when it is a
        writable floating-point numpy array. Other arrays are left untouched
        with a warning, since casting would truncate the point; read
        ``self.result.x`` instead. The full run summary is kept in
        ``self.result``.

        With ``termination: last_evaluated`` a converged run returns the value
        of the last particle scanned, while ``iterate`` receives the global
        best position, so the two need not match.

        Args:
            objective: Object with ``evaluate(point)`` or a callable
            iterate: Starting point of every particle (modified in place)

        Returns:
            Objective value of the final point
        """
        result = self.minimize(objective, iterate)

        if isinstance(iterate, np.ndarray) and iterate.flags.writeable:
            if np.issubdtype(iterate.dtype, np.floating):
                iterate[...] = result.x
            else:
                logger.warning(
                    f"Best point not written back: iterate has dtype {iterate.dtype}, "
                    "use a floating-point array or read result.x"
                )

        return result.fun

    def minimize(
        self,
        objective: Any,
        x0: np.ndarray,
        callback: Optional[Callable[[int, SwarmState], None]] = None
    ) -> OptimizationResult:
        """
        Run particle swarm optimization without touching ``x0``.

        Args:
            objective: Object with ``evaluate(point)`` or a callable
            x0: Starting point of every particle
            callback: Called as ``callback(iteration, state)`` after each
                iteration's position update

        Returns:
            Optimization result with the best point and its objective value
        """
        config = self.config
        config.validate()

        policy = self.velocity_update
        policy.initialize(config.cognitive_acceleration, config.social_acceleration)

        evaluate = as_evaluator(objective)
        start = np.array(x0, dtype=float)
        point_shape = start.shape
        tracking = config.best_tracking_mode
        criterion = config.termination_criterion

        state = SwarmState.from_point(start, config.swarm_size, tracking)

        unbounded = config.max_iterations == 0
        limit = config.max_unbounded_iterations if unbounded else config.max_iterations

        logger.info(
            f"Starting PSO with {config.swarm_size} particles, {policy.name} velocity update, "
            f"point shape {point_shape}"
        )

        start_time = time.time()
        history = []
        nfev = 0
        nonfinite = 0
        final_value = None
        nit = 0

        for iteration in range(1, limit + 1):
            nit = iteration
            state.iteration = iteration

            nonfinite += self._evaluate_swarm(evaluate, state, tracking)
            nfev += state.swarm_size

            self._update_global_best(state, tracking)

            policy.update(
                state.positions,
                state.velocities,
                state.personal_best_positions,
                state.global_best_position,
                config.inertia_weight,
                config.cognitive_acceleration,
                config.social_acceleration,
                self.rng
            )
            state.positions += state.velocities

            mismatch = state.shape_mismatch(point_shape)
            if mismatch is not None:
                raise ShapeError(
                    f"Swarm state diverged from start point: {mismatch}",
                    details={"iteration": iteration, "point_shape": list(point_shape)}
                )

            if config.record_history:
                history.append(state.global_best_value)

            if callback is not None:
                callback(iteration, state)

            if criterion == TerminationCriterion.GLOBAL_BEST:
                value = state.global_best_value
            else:
                value = state.last_value

            if value < config.tolerance:
                logger.info(
                    f"PSO: minimized within tolerance {config.tolerance}; "
                    "terminating optimization."
                )
                final_value = value
                break

        if final_value is not None:
            status = OptimizationStatus.CONVERGED
            message = f"Objective within tolerance {config.tolerance}"
        elif unbounded:
            status = OptimizationStatus.ITERATION_CAP
            message = f"Stopped at safety cap of {limit} iterations"
            logger.warning(
                f"PSO: no convergence with unlimited iterations; stopped at safety cap {limit}"
            )
        else:
            status = OptimizationStatus.MAX_ITERATIONS
            message = f"Reached maximum of {limit} iterations"

        if np.isfinite(state.global_best_value):
            best_position = state.global_best_position.copy()
        else:
            best_position = start.copy()

        self.result = OptimizationResult(
            x=best_position,
            fun=final_value if final_value is not None else state.global_best_value,
            nit=nit,
            nfev=nfev,
            status=status,
            message=message,
            history=history,
            nonfinite_evaluations=nonfinite,
            solve_time=time.time() - start_time
        )

        logger.info(
            f"PSO optimization completed after {nit} iterations with objective "
            f"{self.result.fun:.6g} ({status.value})"
        )
        return self.result

    def _evaluate_swarm(self, evaluate: Callable, state: SwarmState, tracking: BestTracking) -> int:
        """Evaluate every particle in order and record improved personal bests."""
        nonfinite = 0

        for k in range(state.swarm_size):
            value = self._evaluate(evaluate, state.positions[k])
            state.last_value = value

            if not np.isfinite(value):
                nonfinite += 1
                logger.debug(f"Particle {k} returned non-finite objective {value}; skipped")
                continue

            slot = k if tracking == BestTracking.PER_PARTICLE else 0
            if value < state.personal_best_values[slot]:
                state.personal_best_values[slot] = value
                if tracking == BestTracking.PER_PARTICLE:
                    state.personal_best_positions[k] = state.positions[k]
                else:
                    state.personal_best_positions[...] = state.positions[k]

        return nonfinite

    @staticmethod
    def _evaluate(evaluate: Callable, point: np.ndarray) -> float:
        value = evaluate(point.copy())
        if np.ndim(value) != 0:
            raise ShapeError(
                f"Objective must return a scalar, got shape {np.shape(value)}",
                details={"point_shape": list(point.shape)}
            )
        return float(value)

    @staticmethod
    def _update_global_best(state: SwarmState, tracking: BestTracking) -> None:
        best = int(np.argmin(state.personal_best_values))
        best_value = float(state.personal_best_values[best])

        if best_value < state.global_best_value:
            state.global_best_value = best_value
            if tracking == BestTracking.PER_PARTICLE:
                state.global_best_position = state.personal_best_positions[best].copy()
            else:
                state.global_best_position = state.personal_best_positions.copy()


# Inertia-weight PSO is the default variant.
PSO = ParticleSwarmOptimizer


class ConstrictionPSO(ParticleSwarmOptimizer):
    """Particle Swarm Optimizer using the constriction-factor velocity update."""

    def __init__(
        self,
        config: Optional[PSOConfig] = None,
        velocity_update: Optional[VelocityUpdatePolicy] = None,
        random_state: RandomState = None
    ):
        if config is None:
            config = PSOConfig(
                cognitive_acceleration=CONSTRICTION_ACCELERATION,
                social_acceleration=CONSTRICTION_ACCELERATION
            )
        if velocity_update is None:
            config.velocity_update = ConstrictionFactor.name

        super().__init__(config, velocity_update, random_state)
