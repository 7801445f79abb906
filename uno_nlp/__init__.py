"""Building blocks for nonlinear optimization: models, reformulations, scaling, iterates, options, statistics and timing."""

__version__ = "0.1.0"
__all__ = [
    "equality_constrained_model",
    "iterate",
    "model",
    "options",
    "scaled_model",
    "scaling",
    "statistics",
    "timer",
]