"""Model whose objective and constraints are multiplied by scaling factors."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from uno_nlp.model import BoundType, FunctionType, Model
from uno_nlp.scaling import Scaling


class ScaledModel(Model):
    """View of another model with the objective and constraints scaled."""

    def __init__(self, original_model: Model, scaling: Scaling) -> None:
        super().__init__(original_model.name + "_scaled", original_model.number_variables,
                         original_model.number_constraints, original_model.problem_type)
        self.original_model = original_model
        self.scaling = scaling
        if scaling.objective_scaling < 0:
            raise ValueError("Objective scaling failed.")
        if any(scaling.constraint_scaling(j) < 0 for j in range(self.number_constraints)):
            raise ValueError("Constraint scaling failed.")

        # same constraint repartition, slacks and bounded variables as the original model
        self.equality_constraints = dict(original_model.equality_constraints)
        self.inequality_constraints = dict(original_model.inequality_constraints)
        self.linear_constraints = dict(original_model.linear_constraints)
        self.slacks = dict(original_model.slacks)
        self.lower_bounded_variables = list(original_model.lower_bounded_variables)
        self.upper_bounded_variables = list(original_model.upper_bounded_variables)

    def variable_lower_bound(self, i: int) -> float:
        return self.original_model.variable_lower_bound(i)

    def variable_upper_bound(self, i: int) -> float:
        return self.original_model.variable_upper_bound(i)

    def constraint_lower_bound(self, j: int) -> float:
        return self.scaling.constraint_scaling(j) * self.original_model.constraint_lower_bound(j)

    def constraint_upper_bound(self, j: int) -> float:
        return self.scaling.constraint_scaling(j) * self.original_model.constraint_upper_bound(j)

    def variable_bound_type(self, i: int) -> BoundType:
        return self.original_model.variable_bound_type(i)

    def constraint_type(self, j: int) -> FunctionType:
        return self.original_model.constraint_type(j)

    def constraint_bound_type(self, j: int) -> BoundType:
        return self.original_model.constraint_bound_type(j)

    def maximum_number_objective_gradient_nonzeros(self) -> int:
        return self.original_model.maximum_number_objective_gradient_nonzeros()

    def maximum_number_jacobian_nonzeros(self) -> int:
        return self.original_model.maximum_number_jacobian_nonzeros()

    def maximum_number_hessian_nonzeros(self) -> int:
        return self.original_model.maximum_number_hessian_nonzeros()

    def evaluate_objective(self, x: Sequence[float]) -> float:
        return self.scaling.objective_scaling * self.original_model.evaluate_objective(x)

    def evaluate_objective_gradient(self, x: Sequence[float]) -> dict[int, float]:
        factor = self.scaling.objective_scaling
        return {i: factor * value
                for i, value in self.original_model.evaluate_objective_gradient(x).items()}

    def evaluate_constraints(self, x: Sequence[float]) -> list[float]:
        constraints = self.original_model.evaluate_constraints(x)
        return [self.scaling.constraint_scaling(j) * value if j < self.number_constraints else value
                for j, value in enumerate(constraints)]

    def evaluate_constraint_gradient(self, x: Sequence[float], j: int) -> dict[int, float]:
        factor = self.scaling.constraint_scaling(j)
        return {i: factor * value
                for i, value in self.original_model.evaluate_constraint_gradient(x, j).items()}

    def evaluate_constraint_jacobian(self, x: Sequence[float]) -> list[dict[int, float]]:
        jacobian = self.original_model.evaluate_constraint_jacobian(x)
        return [
            {i: self.scaling.constraint_scaling(j) * value for i, value in row.items()}
            if j < self.number_constraints else dict(row)
            for j, row in enumerate(jacobian)
        ]

    def evaluate_lagrangian_hessian(self, x: Sequence[float], objective_multiplier: float,
                                    multipliers: Sequence[float], hessian: Any) -> None:
        scaled_objective_multiplier = objective_multiplier * self.scaling.objective_scaling
        scaled_multipliers = [self.scaling.constraint_scaling(j) * multipliers[j]
                              for j in range(self.number_constraints)]
        self.original_model.evaluate_lagrangian_hessian(x, scaled_objective_multiplier,
                                                        scaled_multipliers, hessian)

    def initial_primal_point(self) -> list[float]:
        return self.original_model.initial_primal_point()

    def initial_dual_point(self) -> list[float]:
        return self.original_model.initial_dual_point()