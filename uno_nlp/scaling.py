"""Gradient-based scaling of the objective and constraints."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

logger = logging.getLogger("uno_nlp")


def _sparse_norm_inf(vector: Mapping[int, float]) -> float:
    return max((abs(value) for value in vector.values()), default=0.0)


def _factor(gradient_threshold: float, gradient: Mapping[int, float]) -> float:
    norm = _sparse_norm_inf(gradient)
    if norm == 0.0:
        return 1.0
    return min(1.0, gradient_threshold / norm)


class Scaling:
    """Scaling factors that bring gradient infinity norms down to a threshold."""

    def __init__(self, number_constraints: int, gradient_threshold: float) -> None:
        self.gradient_threshold = gradient_threshold
        self._objective_scaling = 1.0
        self._constraint_scaling = [1.0] * number_constraints

    @property
    def objective_scaling(self) -> float:
        return self._objective_scaling

    def constraint_scaling(self, j: int) -> float:
        return self._constraint_scaling[j]

    def compute(self, objective_gradient: Mapping[int, float],
                constraint_jacobian: Sequence[Mapping[int, float]]
                ) -> tuple[dict[int, float], list[dict[int, float]]]:
        """Set the scaling factors and return the scaled gradient and Jacobian rows."""
        self._objective_scaling = _factor(self.gradient_threshold, objective_gradient)
        self._constraint_scaling = [
            _factor(self.gradient_threshold, constraint_jacobian[j])
            for j in range(len(self._constraint_scaling))
        ]
        scaled_gradient = {i: self._objective_scaling * value
                           for i, value in objective_gradient.items()}
        scaled_jacobian = [
            {i: factor * value for i, value in constraint_jacobian[j].items()}
            for j, factor in enumerate(self._constraint_scaling)
        ]
        logger.debug("Objective scaling: %s", self._objective_scaling)
        logger.debug("Constraint scaling: %s", self._constraint_scaling)
        return scaled_gradient, scaled_jacobian