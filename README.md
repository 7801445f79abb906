# uno_nlp

Building blocks for nonlinear optimization problems of the form

    min f(x)  subject to  cl <= c(x) <= cu,  xl <= x <= xu

The package has no third-party dependencies.

## Modules

- `uno_nlp.model` — the abstract `Model` class that a problem implements,
  together with `Interval`, `BoundType`, `FunctionType`, `Norm`, `INF`,
  `is_finite` and `compute_norm`, and the exceptions `NumericalError`,
  `GradientNumericalError` and `FunctionNumericalError`. `Model` classifies
  bounds (`determine_bounds_types`), partitions constraints into equality and
  inequality constraints (`determine_constraints`), returns points clipped to
  the variable bounds (`project_point_onto_bounds`), and computes constraint
  violations (`compute_constraint_violation`, `compute_constraints_violation`)
  and the complementarity error (`compute_complementarity_error`).
- `uno_nlp.scaling` — `Scaling`: factors `min(1, threshold / ||gradient||_inf)`
  for the objective and each constraint (1 for a zero gradient).
  `compute` sets the factors and returns the scaled objective gradient and
  Jacobian rows; `objective_scaling` and `constraint_scaling(j)` read them.
- `uno_nlp.scaled_model` — `ScaledModel`, a view of a model whose objective,
  constraints, their bounds and derivatives are multiplied by the factors of a
  `Scaling`. It raises `ValueError` if a factor is negative.
- `uno_nlp.equality_constrained_model` — `EqualityConstrainedModel`, which
  appends one slack variable per inequality constraint, bounded by that
  constraint's bounds, so that every constraint reads `c(x) = 0`.
- `uno_nlp.iterate` — `Iterate`, a primal-dual point (`Multipliers`,
  `Evaluations`, `ProgressMeasures`) that evaluates the objective, the
  constraints, the objective gradient and the Jacobian at most once until
  `reset_evaluations` is called, and computes the Lagrangian gradient.
  Class counters `number_eval_objective`, `number_eval_constraints` and
  `number_eval_jacobian` count the evaluations.
- `uno_nlp.options` — `Options`, a string-keyed option store with typed
  accessors, option files (`get_default_options`), presets (`find_preset`:
  `ipopt`, `filtersqp`, `byrd`), command-line parsing
  (`get_command_line_options`) and `set_logger`, which sets the level of the
  `uno_nlp` logger from `ERROR`, `WARNING`, `INFO` or `DEBUG`.
- `uno_nlp.statistics` — `Statistics`, a box-drawn table printed on standard
  output, one line per iteration.
- `uno_nlp.timer` — `Timer`, which measures processor time and can be used as a
  context manager, and `current_date`.

Sparse vectors (gradients, Jacobian rows) are dictionaries mapping a variable
index to its value.

## Installation

    pip install .

## Options

    from uno_nlp.options import Options, find_preset, get_command_line_options

    options = Options()
    find_preset("ipopt", options)
    get_command_line_options(["solver", "-tolerance", "1e-8", "problem.nl"], options)
    options.get_string("subproblem")     # "barrier"
    options.get_double("tolerance")      # 1e-08
    options.get_bool("scale_functions")  # True

`get_command_line_options` skips the first and the last argument and reads
`-name value` pairs; `-preset name` applies a preset. A missing option raises
`KeyError`.

Option files contain one `key value` pair per line; empty lines and lines
starting with `#` are skipped. A missing file raises `ValueError`:

    from uno_nlp.options import get_default_options
    options = get_default_options("uno.options")

## Iteration statistics

    from uno_nlp.options import Options
    from uno_nlp.statistics import Statistics

    options = Options()
    options["statistics_print_header_every_iterations"] = "15"
    statistics = Statistics(options)
    statistics.add_column("iters", Statistics.int_width, 1)
    statistics.add_column("objective", Statistics.double_width, 2)
    statistics.add_statistic("iters", 0)
    statistics.add_statistic("objective", 1.5)   # printed as 1.500000e+00
    statistics.print_current_line()
    statistics.new_line()
    statistics.print_footer()

Columns are printed in increasing `order`; a column with no value on the
current line shows `-`. The header is repeated every
`statistics_print_header_every_iterations` lines.

## Defining a model

Subclass `Model` and implement the bound accessors, the bound and function
types, the maximum numbers of nonzeros, the evaluation methods and
`initial_primal_point` / `initial_dual_point`. Call `determine_constraints`
in the constructor to fill `equality_constraints` and
`inequality_constraints`. Wrap the model in an `EqualityConstrainedModel` to
reformulate its inequality constraints with slacks, or in a `ScaledModel` to
apply a `Scaling`.

`evaluate_lagrangian_hessian` receives a matrix object supplied by the caller;
`EqualityConstrainedModel` calls its `finalize_column(j)` method for each slack
column. The package itself provides no matrix class.

## What the package does not do

There is no solver here: no optimization loop, no line search or trust region,
no linear, LP or QP solver, and no command to run. The package does not read
problem files; problems are written in Python as `Model` subclasses.

## Running the tests

    pip install .[test]
    pytest