"""
OpenSwarm Particle Swarm Optimization

Population-based, gradient-free minimization of scalar objectives over a
continuous search space, with inertia-weight and constriction-factor velocity
update policies.

Example:
    import numpy as np
    from openswarm import PSO, Sphere

    point = np.array([[3.0], [-2.0]])
    value = PSO().optimize(Sphere(), point)  # point now holds the best position

Version: 1.0.0
"""

from .core.config import Config, PSOConfig, load_config, configure_logging
from .core.types import SwarmState, VelocityUpdateType, BestTracking, TerminationCriterion
from .models.optimization import (
    OptimizationResult,
    OptimizationStatus,
    OptimizationError,
    ConfigurationError,
    ShapeError,
)
from .optimization import (
    VelocityUpdatePolicy,
    InertiaWeight,
    ConstrictionFactor,
    create_velocity_update,
    ParticleSwarmOptimizer,
    PSO,
    ConstrictionPSO,
)
from .objectives import Objective, Sphere, Rosenbrock, Rastrigin, Ackley, get_objective

__version__ = "1.0.0"

__all__ = [
    # Optimizers
    "ParticleSwarmOptimizer",
    "PSO",
    "ConstrictionPSO",

    # Velocity update policies
    "VelocityUpdatePolicy",
    "InertiaWeight",
    "ConstrictionFactor",
    "create_velocity_update",

    # Configuration
    "Config",
    "PSOConfig",
    "load_config",
    "configure_logging",

    # Types and models
    "SwarmState",
    "VelocityUpdateType",
    "BestTracking",
    "TerminationCriterion",
    "OptimizationResult",
    "OptimizationStatus",
    "OptimizationError",
    "ConfigurationError",
    "ShapeError",

    # Objectives
    "Objective",
    "Sphere",
    "Rosenbrock",
    "Rastrigin",
    "Ackley",
    "get_objective",

    # Metadata
    "__version__",
]
