"""Solver options: a string-valued key/value store, presets and command-line parsing."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Sequence

logger = logging.getLogger("uno_nlp")

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE,
)

_LOGGER_LEVELS = {
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}

_PRESETS: dict[str, dict[str, str]] = {
    "ipopt": {
        "mechanism": "LS",
        "constraint-relaxation": "feasibility-restoration",
        "strategy": "filter",
        "subproblem": "barrier",
        "filter_beta": "0.99999",
        "filter_gamma": "1e-5",
        "filter_delta": "1",
        "filter_ubd": "1e4",
        "filter_fact": "1e4",
        "filter_switching_infeasibility_exponent": "1.1",
        "armijo_decrease_fraction": "1e-4",
        "LS_backtracking_ratio": "0.5",
        "use_second_order_correction": "yes",
        "l1_constraint_violation_coefficient": "1000",
        "residual_norm": "INF",
        "scale_functions": "yes",
        "l1_use_proximal_term": "yes",
        "sparse_format": "COO",
    },
    "filtersqp": {
        "mechanism": "TR",
        "constraint-relaxation": "feasibility-restoration",
        "strategy": "filter",
        "subproblem": "QP",
        "residual_norm": "L1",
        "l1_use_proximal_term": "no",
        "sparse_format": "CSC",
    },
    "byrd": {
        "mechanism": "LS",
        "constraint-relaxation": "l1-relaxation",
        "strategy": "merit",
        "subproblem": "QP",
        "l1_relaxation_initial_parameter": "1",
        "LS_backtracking_ratio": "0.5",
        "armijo_decrease_fraction": "1e-8",
        "l1_relaxation_epsilon1": "0.1",
        "l1_relaxation_epsilon2": "0.1",
        "tolerance": "1e-6",
        "residual_norm": "L1",
        "sparse_format": "CSC",
    },
}


def _parse_prefix(pattern: re.Pattern[str], text: str, kind: str) -> str:
    match = pattern.match(text)
    if match is None:
        raise ValueError(f"invalid {kind} value: {text!r}")
    return match.group(0)


class Options:
    """Ordered mapping of option names to string values with typed accessors."""

    def __init__(self) -> None:
        self._options: dict[str, str] = {}

    def __getitem__(self, key: str) -> str:
        try:
            return self._options[key]
        except KeyError:
            raise KeyError(f"The option {key} was not found") from None

    def __setitem__(self, key: str, value: str) -> None:
        self._options[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._options

    def __len__(self) -> int:
        return len(self._options)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._options))

    def get_string(self, key: str) -> str:
        return self[key]

    def get_double(self, key: str) -> float:
        """Parse the leading floating-point number of the option value."""
        return float(_parse_prefix(_FLOAT_PREFIX, self[key], "floating-point"))

    def get_int(self, key: str) -> int:
        """Parse the leading integer of the option value."""
        return int(_parse_prefix(_INT_PREFIX, self[key], "integer"))

    def get_unsigned_int(self, key: str) -> int:
        value = self.get_int(key)
        if value < 0:
            raise ValueError(f"the option {key} is not a non-negative integer")
        return value

    def get_bool(self, key: str) -> bool:
        return self[key] == "yes"

    def print(self) -> None:
        lines = ["Options:"]
        lines.extend(f"- {key} = {self._options[key]}" for key in sorted(self._options))
        print("\n".join(lines))


def get_default_options(file_name: str) -> Options:
    """Read options from a file of "key value" lines; lines starting with '#' are comments."""
    try:
        file = open(file_name, encoding="utf-8")
    except OSError:
        raise ValueError(f"The option file {file_name} was not found") from None
    options = Options()
    key = value = ""
    with file:
        for line in file:
            line = line.rstrip("\n")
            if not line or line.startswith("#"):
                continue
            tokens = line.split()
            if not tokens:
                continue
            key = tokens[0]
            if len(tokens) > 1:
                value = tokens[1]
            options[key] = value
    return options


def find_preset(preset_name: str, options: Options) -> None:
    """Overwrite options with a named preset; unknown presets are ignored."""
    for key, value in _PRESETS.get(preset_name, {}).items():
        options[key] = value


def get_command_line_options(argv: Sequence[str], options: Options) -> None:
    """Apply "-name value" pairs from argv; argv[0] and the last argument are skipped."""
    i = 1
    while i < len(argv) - 1:
        argument = argv[i]
        if argument.startswith("-"):
            name = argument[1:]
            value = argv[i + 1]
            if name == "preset":
                find_preset(value, options)
            else:
                options[name] = value
            i += 2
        else:
            logger.warning("Argument %s was ignored", argument)
            i += 1


def set_logger(logger_level: str) -> None:
    """Set the package logger level by name; unknown names leave it unchanged."""
    level = _LOGGER_LEVELS.get(logger_level)
    if level is not None:
        logger.setLevel(level)