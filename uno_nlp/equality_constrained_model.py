"""Reformulation of a model in which every constraint reads c(x) = 0."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from uno_nlp.model import BoundType, FunctionType, Model, is_finite


class EqualityConstrainedModel(Model):
    """Wraps a model and turns each inequality constraint into an equality with a slack.

    An inequality constraint l <= c_j(x) <= u becomes c_j(x) - s = 0 with the slack s
    bounded by [l, u]. Equality constraints c_j(x) = b become c_j(x) - b = 0. The slacks
    are appended after the original variables, in the order of the inequality partition.
    """

    def __init__(self, original_model: Model) -> None:
        super().__init__(
            original_model.name + "_slacks",
            original_model.number_variables + len(original_model.inequality_constraints),
            original_model.number_constraints,
            original_model.problem_type,
        )
        self.original_model = original_model
        number_original_variables = original_model.number_variables

        # all constraints are now equality constraints
        self.equality_constraints = {j: j for j in range(self.number_constraints)}

        # bounded variables: the original ones, then the slacks with finite bounds
        self.lower_bounded_variables = list(original_model.lower_bounded_variables)
        self.upper_bounded_variables = list(original_model.upper_bounded_variables)
        for j, i in original_model.inequality_constraints.items():
            slack_index = number_original_variables + i
            if is_finite(original_model.constraint_lower_bound(j)):
                self.lower_bounded_variables.append(slack_index)
            if is_finite(original_model.constraint_upper_bound(j)):
                self.upper_bounded_variables.append(slack_index)

        # register the inequality constraint of each slack
        self.inequality_constraint_of_slack: dict[int, int] = {}
        self.slack_of_inequality_constraint: dict[int, int] = {}
        for j, i in original_model.inequality_constraints.items():
            self.inequality_constraint_of_slack[i] = j
            self.slack_of_inequality_constraint[j] = i
            self.slacks[j] = number_original_variables + i

    def _is_original_variable(self, i: int) -> bool:
        return i < self.original_model.number_variables

    def _constraint_of_slack(self, i: int) -> int:
        return self.inequality_constraint_of_slack[i - self.original_model.number_variables]

    # bounds
    def variable_lower_bound(self, i: int) -> float:
        if self._is_original_variable(i):
            return self.original_model.variable_lower_bound(i)
        return self.original_model.constraint_lower_bound(self._constraint_of_slack(i))

    def variable_upper_bound(self, i: int) -> float:
        if self._is_original_variable(i):
            return self.original_model.variable_upper_bound(i)
        return self.original_model.constraint_upper_bound(self._constraint_of_slack(i))

    def constraint_lower_bound(self, j: int) -> float:
        return 0.0

    def constraint_upper_bound(self, j: int) -> float:
        return 0.0

    def variable_bound_type(self, i: int) -> BoundType:
        if self._is_original_variable(i):
            return self.original_model.variable_bound_type(i)
        return self.original_model.constraint_bound_type(self._constraint_of_slack(i))

    def constraint_type(self, j: int) -> FunctionType:
        return self.original_model.constraint_type(j)

    def constraint_bound_type(self, j: int) -> BoundType:
        return BoundType.EQUAL_BOUNDS

    # sparsity
    def maximum_number_objective_gradient_nonzeros(self) -> int:
        return self.original_model.maximum_number_objective_gradient_nonzeros()

    def maximum_number_jacobian_nonzeros(self) -> int:
        return self.original_model.maximum_number_jacobian_nonzeros()

    def maximum_number_hessian_nonzeros(self) -> int:
        return self.original_model.maximum_number_hessian_nonzeros()

    # evaluations
    def evaluate_objective(self, x: Sequence[float]) -> float:
        return self.original_model.evaluate_objective(x)

    def evaluate_objective_gradient(self, x: Sequence[float]) -> dict[int, float]:
        return self.original_model.evaluate_objective_gradient(x)

    def evaluate_constraints(self, x: Sequence[float]) -> list[float]:
        constraints = list(self.original_model.evaluate_constraints(x))
        number_original_variables = self.original_model.number_variables
        # inequality constraints: subtract the slacks
        for j, i in self.original_model.inequality_constraints.items():
            constraints[j] -= x[number_original_variables + i]
        # equality constraints: shift to "c(x) = 0"
        for j in self.original_model.equality_constraints:
            constraints[j] -= self.original_model.constraint_lower_bound(j)
        return constraints

    def evaluate_constraint_gradient(self, x: Sequence[float], j: int) -> dict[int, float]:
        gradient = dict(self.original_model.evaluate_constraint_gradient(x, j))
        if self.original_model.constraint_bound_type(j) is not BoundType.EQUAL_BOUNDS:
            slack_index = (self.original_model.number_variables
                           + self.slack_of_inequality_constraint[j])
            gradient[slack_index] = -1.0
        return gradient

    def evaluate_constraint_jacobian(self, x: Sequence[float]) -> list[dict[int, float]]:
        jacobian = [dict(row) for row in self.original_model.evaluate_constraint_jacobian(x)]
        number_original_variables = self.original_model.number_variables
        for j, i in self.original_model.inequality_constraints.items():
            jacobian[j][number_original_variables + i] = -1.0
        return jacobian

    def evaluate_lagrangian_hessian(self, x: Sequence[float], objective_multiplier: float,
                                    multipliers: Sequence[float], hessian: Any) -> None:
        self.original_model.evaluate_lagrangian_hessian(x, objective_multiplier, multipliers,
                                                        hessian)
        # the slacks do not enter the Hessian: only extend its dimension
        for column in range(self.original_model.number_variables, self.number_variables):
            hessian.finalize_column(column)

    def initial_primal_point(self) -> list[float]:
        x = list(self.original_model.initial_primal_point())
        if len(x) < self.number_variables:
            x.extend([0.0] * (self.number_variables - len(x)))
        number_original_variables = self.original_model.number_variables
        for i in self.original_model.inequality_constraints.values():
            x[number_original_variables + i] = 0.0
        return x

    def initial_dual_point(self) -> list[float]:
        return self.original_model.initial_dual_point()