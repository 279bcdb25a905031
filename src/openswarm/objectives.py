"""
Benchmark objective functions for exercising the optimizers.

Each objective exposes ``evaluate(point) -> float`` and works on points of any
shape; the point is flattened before evaluation.
"""

from typing import Dict, List, Type

import numpy as np


class Objective:
    """Base class for benchmark objectives."""

    name = "objective"
    description = ""

    def evaluate(self, point: np.ndarray) -> float:
        raise NotImplementedError("Subclasses must implement evaluate method")

    def optimum(self, shape) -> np.ndarray:
        """Location of the global minimum for points of ``shape``."""
        return np.zeros(shape)

    def __call__(self, point: np.ndarray) -> float:
        return self.evaluate(point)


class Sphere(Objective):
    name = "sphere"
    description = "Sum of squares, minimum 0 at the origin"

    def evaluate(self, point):
        x = np.asarray(point, dtype=float).ravel()
        return float(np.sum(x ** 2))


class Rosenbrock(Objective):
    name = "rosenbrock"
    description = "Curved valley, minimum 0 at (1, ..., 1)"

    def evaluate(self, point):
        x = np.asarray(point, dtype=float).ravel()
        if x.size < 2:
            return float((1.0 - x[0]) ** 2)
        return float(np.sum(100.0 * (x[1:] - x[:-1] ** 2) ** 2 + (1.0 - x[:-1]) ** 2))

    def optimum(self, shape):
        return np.ones(shape)


class Rastrigin(Objective):
    name = "rastrigin"
    description = "Highly multimodal, minimum 0 at the origin"

    def evaluate(self, point):
        x = np.asarray(point, dtype=float).ravel()
        return float(10.0 * x.size + np.sum(x ** 2 - 10.0 * np.cos(2.0 * np.pi * x)))


class Ackley(Objective):
    name = "ackley"
    description = "Nearly flat outer region with a deep hole, minimum 0 at the origin"

    def evaluate(self, point):
        x = np.asarray(point, dtype=float).ravel()
        n = x.size
        term1 = -20.0 * np.exp(-0.2 * np.sqrt(np.sum(x ** 2) / n))
        term2 = -np.exp(np.sum(np.cos(2.0 * np.pi * x)) / n)
        return float(term1 + term2 + 20.0 + np.e)


OBJECTIVES: Dict[str, Type[Objective]] = {
    cls.name: cls for cls in (Sphere, Rosenbrock, Rastrigin, Ackley)
}


def get_objective(name: str) -> Objective:
    """Instantiate a benchmark objective by name."""
    try:
        return OBJECTIVES[name.lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown objective '{name}', expected one of {list_objectives()}"
        ) from None


def list_objectives() -> List[str]:
    return sorted(OBJECTIVES)
