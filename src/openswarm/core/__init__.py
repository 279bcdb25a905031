"""
Core OpenSwarm components.
"""

from .config import Config, PSOConfig, load_config, configure_logging
from .types import SwarmState, VelocityUpdateType, BestTracking, TerminationCriterion

__all__ = [
    'Config', 'PSOConfig', 'load_config', 'configure_logging',
    'SwarmState', 'VelocityUpdateType', 'BestTracking', 'TerminationCriterion'
]
