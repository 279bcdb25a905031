"""
Data models for OpenSwarm.
"""

from .optimization import (
    OptimizationResult,
    OptimizationStatus,
    OptimizationError,
    ConfigurationError,
    ShapeError,
)

__all__ = [
    'OptimizationResult', 'OptimizationStatus',
    'OptimizationError', 'ConfigurationError', 'ShapeError'
]
