"""Abstract optimization model with bound handling and constraint-violation measures."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

INF = math.inf


def is_finite(value: float) -> bool:
    """True when the value is neither infinite nor NaN."""
    return abs(value) < INF


@dataclass(frozen=True)
class Interval:
    """Closed interval [lb, ub]; either end may be infinite."""

    lb: float
    ub: float


class FunctionType(Enum):
    LINEAR = 0
    QUADRATIC = 1
    NONLINEAR = 2


class BoundType(Enum):
    EQUAL_BOUNDS = 0
    BOUNDED_LOWER = 1
    BOUNDED_UPPER = 2
    BOUNDED_BOTH_SIDES = 3
    UNBOUNDED = 4


class Norm(Enum):
    """Vector norms; members can be looked up by name, e.g. Norm["L1"]."""

    L1 = "L1"
    L2 = "L2"
    L2_SQUARED = "L2_SQUARED"
    INF = "INF"


def compute_norm(values: Iterable[float], residual_norm: Norm) -> float:
    """Norm of a sequence of values; the empty sequence has norm 0."""
    if residual_norm is Norm.L1:
        return sum(abs(value) for value in values)
    if residual_norm is Norm.L2_SQUARED:
        return sum(value * value for value in values)
    if residual_norm is Norm.L2:
        return math.sqrt(sum(value * value for value in values))
    if residual_norm is Norm.INF:
        return max((abs(value) for value in values), default=0.0)
    raise ValueError(f"unknown norm: {residual_norm!r}")


class NumericalError(ArithmeticError):
    """A numerical error raised while evaluating a model function."""

    message: ClassVar[str] = "A numerical error was encountered"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.message)


class GradientNumericalError(NumericalError):
    message = "A numerical error was encountered while evaluating a gradient"


class FunctionNumericalError(NumericalError):
    message = "A numerical error was encountered while evaluating a function"


class Model(ABC):
    """Optimization problem: bounds, objective, constraints and their derivatives.

    Sparse vectors (gradients, Jacobian rows) are dicts mapping index to value.
    The constraint partitions map a constraint index to its position in the partition.
    """

    type_to_string: ClassVar[dict[FunctionType, str]] = {
        FunctionType.LINEAR: "linear",
        FunctionType.QUADRATIC: "quadratic",
        FunctionType.NONLINEAR: "nonlinear",
    }

    def __init__(self, name: str, number_variables: int, number_constraints: int,
                 problem_type: FunctionType) -> None:
        self.name = name
        self.number_variables = number_variables
        self.number_constraints = number_constraints
        self.problem_type = problem_type
        self.objective_sign = 1.0
        self.equality_constraints: dict[int, int] = {}
        self.inequality_constraints: dict[int, int] = {}
        self.linear_constraints: dict[int, int] = {}
        self.slacks: dict[int, int] = {}
        self.lower_bounded_variables: list[int] = []
        self.upper_bounded_variables: list[int] = []
        self.fixed_hessian_sparsity = True

    # bounds
    @abstractmethod
    def variable_lower_bound(self, i: int) -> float: ...

    @abstractmethod
    def variable_upper_bound(self, i: int) -> float: ...

    @abstractmethod
    def constraint_lower_bound(self, j: int) -> float: ...

    @abstractmethod
    def constraint_upper_bound(self, j: int) -> float: ...

    @abstractmethod
    def variable_bound_type(self, i: int) -> BoundType: ...

    @abstractmethod
    def constraint_type(self, j: int) -> FunctionType: ...

    @abstractmethod
    def constraint_bound_type(self, j: int) -> BoundType: ...

    # sparsity
    @abstractmethod
    def maximum_number_objective_gradient_nonzeros(self) -> int: ...

    @abstractmethod
    def maximum_number_jacobian_nonzeros(self) -> int: ...

    @abstractmethod
    def maximum_number_hessian_nonzeros(self) -> int: ...

    # evaluations
    @abstractmethod
    def evaluate_objective(self, x: Sequence[float]) -> float: ...

    @abstractmethod
    def evaluate_objective_gradient(self, x: Sequence[float]) -> dict[int, float]: ...

    @abstractmethod
    def evaluate_constraints(self, x: Sequence[float]) -> list[float]: ...

    @abstractmethod
    def evaluate_constraint_gradient(self, x: Sequence[float], j: int) -> dict[int, float]: ...

    @abstractmethod
    def evaluate_constraint_jacobian(self, x: Sequence[float]) -> list[dict[int, float]]: ...

    @abstractmethod
    def evaluate_lagrangian_hessian(self, x: Sequence[float], objective_multiplier: float,
                                    multipliers: Sequence[float], hessian: Any) -> None:
        """Fill the given symmetric matrix with the Lagrangian Hessian."""

    @abstractmethod
    def initial_primal_point(self) -> list[float]: ...

    @abstractmethod
    def initial_dual_point(self) -> list[float]: ...

    # auxiliary functions
    @staticmethod
    def determine_bounds_types(bounds: Iterable[Interval]) -> list[BoundType]:
        """Classify each interval by which of its ends are finite."""

        def classify(interval: Interval) -> BoundType:
            if interval.lb == interval.ub:
                return BoundType.EQUAL_BOUNDS
            if is_finite(interval.lb) and is_finite(interval.ub):
                return BoundType.BOUNDED_BOTH_SIDES
            if is_finite(interval.lb):
                return BoundType.BOUNDED_LOWER
            if is_finite(interval.ub):
                return BoundType.BOUNDED_UPPER
            return BoundType.UNBOUNDED

        return [classify(interval) for interval in bounds]

    def determine_constraints(self) -> None:
        """Partition the constraints into equality and inequality constraints."""
        for j in range(self.number_constraints):
            if self.constraint_bound_type(j) is BoundType.EQUAL_BOUNDS:
                self.equality_constraints[j] = len(self.equality_constraints)
            else:
                self.inequality_constraints[j] = len(self.inequality_constraints)

    def project_point_onto_bounds(self, x: Sequence[float]) -> list[float]:
        """Return a copy of x clipped to the variable bounds."""
        projected = []
        for i, xi in enumerate(x):
            lower = self.variable_lower_bound(i)
            upper = self.variable_upper_bound(i)
            if xi < lower:
                xi = lower
            elif upper < xi:
                xi = upper
            projected.append(xi)
        return projected

    def is_constrained(self) -> bool:
        return 0 < self.number_constraints

    def compute_constraint_lower_bound_violation(self, constraint: float, j: int) -> float:
        return max(0.0, self.constraint_lower_bound(j) - constraint)

    def compute_constraint_upper_bound_violation(self, constraint: float, j: int) -> float:
        return max(0.0, constraint - self.constraint_upper_bound(j))

    def compute_constraint_violation(self, constraint: float, j: int) -> float:
        return max(self.compute_constraint_lower_bound_violation(constraint, j),
                   self.compute_constraint_upper_bound_violation(constraint, j))

    def compute_constraints_violation(self, constraints: Sequence[float], residual_norm: Norm,
                                      constraint_set: Iterable[int] | None = None) -> float:
        """Norm of the violations of the given constraints (all of them by default)."""
        indices = range(len(constraints)) if constraint_set is None else constraint_set
        return compute_norm(
            (self.compute_constraint_violation(constraints[j], j) for j in indices), residual_norm
        )

    def compute_complementarity_error(self, x: Sequence[float], constraints: Sequence[float],
                                      constraint_multipliers: Sequence[float],
                                      lower_bounds_multipliers: Sequence[float],
                                      upper_bounds_multipliers: Sequence[float]) -> float:
        """Complementary slackness error of bounds and general constraints."""
        error = 0.0
        for i in range(self.number_variables):
            lower = self.variable_lower_bound(i)
            upper = self.variable_upper_bound(i)
            if is_finite(lower):
                error += abs(lower_bounds_multipliers[i] * (x[i] - lower))
            if is_finite(upper):
                error += abs(upper_bounds_multipliers[i] * (x[i] - upper))
        for j in range(self.number_constraints):
            multiplier = constraint_multipliers[j]
            value = constraints[j]
            lower = self.constraint_lower_bound(j)
            upper = self.constraint_upper_bound(j)
            if value < lower:
                # the optimal multiplier is 1
                error += abs((1.0 - multiplier) * (lower - value))
            elif upper < value:
                # the optimal multiplier is -1
                error += abs((1.0 + multiplier) * (value - upper))
            elif is_finite(lower) and 0.0 < multiplier:
                error += abs(multiplier * (value - lower))
            elif is_finite(upper) and multiplier < 0.0:
                error += abs(multiplier * (value - upper))
        return error