"""
Optimization-related data models.
"""

import time
from enum import Enum
from typing import Dict, Any, Optional, List
from dataclasses import dataclass, field

import numpy as np


class OptimizationStatus(Enum):
    """Optimization status enumeration."""
    CONVERGED = "converged"
    MAX_ITERATIONS = "max_iterations"
    ITERATION_CAP = "iteration_cap"


@dataclass
class OptimizationResult:
    """Result of a swarm optimization run."""
    x: np.ndarray
    fun: float
    nit: int
    nfev: int
    status: OptimizationStatus
    message: str = ""
    history: List[float] = field(default_factory=list)
    nonfinite_evaluations: int = 0
    solve_time: float = 0.0
    timestamp: float = field(default_factory=time.time)

    @property
    def success(self) -> bool:
        """Check if the run stopped on the tolerance criterion."""
        return self.status == OptimizationStatus.CONVERGED

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "x": np.asarray(self.x).tolist(),
            "fun": float(self.fun),
            "nit": self.nit,
            "nfev": self.nfev,
            "status": self.status.value,
            "success": self.success,
            "message": self.message,
            "history": [float(value) for value in self.history],
            "nonfinite_evaluations": self.nonfinite_evaluations,
            "solve_time": self.solve_time,
            "timestamp": self.timestamp
        }


class OptimizationError(Exception):
    """Base exception for optimization errors."""

    def __init__(
        self,
        message: str,
        error_type: str = "optimization_error",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}
        self.timestamp = time.time()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "message": self.message,
            "error_type": self.error_type,
            "details": self.details,
            "timestamp": self.timestamp
        }


class ConfigurationError(OptimizationError):
    """Raised when hyperparameters cannot produce a valid run."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_type="configuration_error", details=details)


class ShapeError(OptimizationError):
    """Raised when swarm arrays or objective values have the wrong shape."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_type="shape_error", details=details)
