"""
Swarm optimization algorithms for OpenSwarm.
"""

from .velocity import (
    VelocityUpdatePolicy,
    InertiaWeight,
    ConstrictionFactor,
    create_velocity_update,
)
from .particle_swarm import (
    ParticleSwarmOptimizer,
    PSO,
    ConstrictionPSO,
    as_evaluator,
)

__all__ = [
    "VelocityUpdatePolicy",
    "InertiaWeight",
    "ConstrictionFactor",
    "create_velocity_update",
    "ParticleSwarmOptimizer",
    "PSO",
    "ConstrictionPSO",
    "as_evaluator",
]
