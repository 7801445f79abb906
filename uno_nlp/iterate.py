"""Primal-dual iterate with lazily evaluated model functions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import ClassVar

from uno_nlp.model import INF, Model


def _resized(values: list[float], size: int) -> list[float]:
    """Truncate or zero-extend a list to the given size."""
    return values[:size] + [0.0] * max(0, size - len(values))


def _format_vector(values: Sequence[float]) -> str:
    return " ".join(f"{value:g}" for value in values)


@dataclass
class Multipliers:
    """Lagrange multipliers of the bounds, the general constraints and the objective."""

    lower_bounds: list[float]
    upper_bounds: list[float]
    constraints: list[float]
    objective: float = 1.0

    @classmethod
    def zeros(cls, number_variables: int, number_constraints: int) -> Multipliers:
        return cls([0.0] * number_variables, [0.0] * number_variables,
                   [0.0] * number_constraints)


@dataclass
class ProgressMeasures:
    infeasibility: float = INF
    optimality: float = INF


@dataclass
class Evaluations:
    """Objective, constraints and their first derivatives at an iterate."""

    objective: float = INF
    constraints: list[float] = field(default_factory=list)
    objective_gradient: dict[int, float] = field(default_factory=dict)
    constraint_jacobian: list[dict[int, float]] = field(default_factory=list)

    @classmethod
    def empty(cls, number_constraints: int) -> Evaluations:
        return cls(constraints=[0.0] * number_constraints,
                   constraint_jacobian=[{} for _ in range(number_constraints)])


class Iterate:
    """A point of the primal-dual space; model functions are evaluated at most once."""

    number_eval_objective: ClassVar[int] = 0
    number_eval_constraints: ClassVar[int] = 0
    number_eval_jacobian: ClassVar[int] = 0

    def __init__(self, max_number_variables: int, max_number_constraints: int) -> None:
        self.number_variables = max_number_variables
        self.number_constraints = max_number_constraints
        self.primals = [0.0] * max_number_variables
        self.multipliers = Multipliers.zeros(max_number_variables, max_number_constraints)
        self.original_evaluations = Evaluations.empty(max_number_constraints)
        self.is_objective_computed = False
        self.are_constraints_computed = False
        self.is_objective_gradient_computed = False
        self.is_constraint_jacobian_computed = False
        self.lagrangian_gradient = [0.0] * max_number_variables
        self.constraint_violation = INF
        self.stationarity_error = INF
        self.complementarity_error = INF
        self.nonlinear_progress = ProgressMeasures()

    def evaluate_objective(self, model: Model) -> None:
        if not self.is_objective_computed:
            self.original_evaluations.objective = model.evaluate_objective(self.primals)
            self.is_objective_computed = True
            Iterate.number_eval_objective += 1

    def evaluate_constraints(self, model: Model) -> None:
        if not self.are_constraints_computed:
            self.original_evaluations.constraints = list(model.evaluate_constraints(self.primals))
            self.are_constraints_computed = True
            Iterate.number_eval_constraints += 1

    def evaluate_objective_gradient(self, model: Model) -> None:
        if not self.is_objective_gradient_computed:
            self.original_evaluations.objective_gradient = dict(
                model.evaluate_objective_gradient(self.primals))
            self.is_objective_gradient_computed = True

    def evaluate_constraint_jacobian(self, model: Model) -> None:
        if not self.is_constraint_jacobian_computed:
            self.original_evaluations.constraint_jacobian = [
                dict(row) for row in model.evaluate_constraint_jacobian(self.primals)
            ]
            self.is_constraint_jacobian_computed = True
            Iterate.number_eval_jacobian += 1

    def evaluate_lagrangian_gradient(self, model: Model, objective_multiplier: float,
                                     constraint_multipliers: Sequence[float],
                                     lower_bounds_multipliers: Sequence[float],
                                     upper_bounds_multipliers: Sequence[float]) -> None:
        """Compute the Lagrangian gradient over the model's original variables."""
        gradient = [0.0] * len(self.lagrangian_gradient)
        number_original_variables = model.number_variables

        self.evaluate_objective_gradient(model)
        if objective_multiplier != 0.0:
            for i, derivative in self.original_evaluations.objective_gradient.items():
                # additional variables are ignored
                if i < number_original_variables:
                    gradient[i] += objective_multiplier * derivative

        for i in range(number_original_variables):
            gradient[i] -= lower_bounds_multipliers[i] + upper_bounds_multipliers[i]

        self.evaluate_constraint_jacobian(model)
        for j in range(model.number_constraints):
            multiplier = constraint_multipliers[j]
            if multiplier != 0.0:
                for i, derivative in self.original_evaluations.constraint_jacobian[j].items():
                    if i < number_original_variables:
                        gradient[i] -= multiplier * derivative
        self.lagrangian_gradient = gradient

    def set_number_variables(self, number_variables: int) -> None:
        """Resize the variable-indexed vectors."""
        self.primals = _resized(self.primals, number_variables)
        self.multipliers.lower_bounds = _resized(self.multipliers.lower_bounds, number_variables)
        self.multipliers.upper_bounds = _resized(self.multipliers.upper_bounds, number_variables)
        self.lagrangian_gradient = _resized(self.lagrangian_gradient, number_variables)

    def reset_evaluations(self) -> None:
        self.is_objective_computed = False
        self.is_objective_gradient_computed = False
        self.are_constraints_computed = False
        self.is_constraint_jacobian_computed = False

    def __str__(self) -> str:
        lines = [
            f"Primal variables: {_format_vector(self.primals)}",
            f"Lower bound multipliers: {_format_vector(self.multipliers.lower_bounds)}",
            f"Upper bound multipliers: {_format_vector(self.multipliers.upper_bounds)}",
            f"Constraint multipliers: {_format_vector(self.multipliers.constraints)}",
            f"Objective value: {self.original_evaluations.objective:g}",
            f"Constraint violation: {self.constraint_violation:g}",
            f"Stationarity (KKT/FJ) error: {self.stationarity_error:g}",
            f"Complementarity error: {self.complementarity_error:g}",
            f"Infeasibility measure: {self.nonlinear_progress.infeasibility:g}",
            f"Optimality measure: {self.nonlinear_progress.optimality:g}",
        ]
        return "\n".join(lines) + "\n"