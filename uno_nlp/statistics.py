"""Iteration table printed as box-drawn rows on standard output."""

from __future__ import annotations

from typing import ClassVar

from uno_nlp.options import Options


class Statistics:
    """Collects per-iteration values and prints them as a table."""

    symbols: ClassVar[dict[str, str]] = {
        "top": "─",
        "top-mid": "┬",
        "top-left": "┌",
        "top-right": "┐",
        "bottom": "─",
        "bottom-mid": "┴",
        "bottom-left": "└",
        "bottom-right": "┘",
        "left": "│",
        "left-mid": "├",
        "mid": "─",
        "mid-mid": "┼",
        "right": "│",
        "right-mid": "┤",
        "middle": "│",
    }
    int_width: ClassVar[int] = 7
    double_width: ClassVar[int] = 18
    char_width: ClassVar[int] = 7

    def __init__(self, options: Options) -> None:
        self.print_header_every_iterations = options.get_unsigned_int(
            "statistics_print_header_every_iterations"
        )
        self.iteration = 0
        self._columns: dict[int, str] = {}
        self._widths: dict[str, int] = {}
        self._current_line: dict[str, str] = {}

    def _ordered_headers(self) -> list[str]:
        return [self._columns[order] for order in sorted(self._columns)]

    def _rule(self, left: str, junction: str, fill: str, right: str) -> str:
        segments = (fill * self._widths.get(header, 0) for header in self._ordered_headers())
        return self.symbols[left] + self.symbols[junction].join(segments) + self.symbols[right]

    def add_column(self, name: str, width: int, order: int) -> None:
        self._columns[order] = name
        self._widths[name] = width

    def add_statistic(self, name: str, value: str | int | float) -> None:
        """Record a value for the current line; floats use scientific notation."""
        if isinstance(value, float):
            text = f"{value:.6e}"
        else:
            text = str(value)
        self._current_line[name] = text

    def print_header(self, first_occurrence: bool) -> None:
        if first_occurrence:
            rule = self._rule("top-left", "top-mid", "top", "top-right")
        else:
            rule = self._rule("left-mid", "mid-mid", "top", "right-mid")
        cells = []
        for header in self._ordered_headers():
            padding = max(0, self._widths.get(header, 0) - len(header) - 1)
            cells.append(" " + header + " " * padding)
        row = self.symbols["left"] + self.symbols["middle"].join(cells) + self.symbols["right"]
        print(rule)
        print(row)

    def print_current_line(self) -> None:
        if self.iteration % self.print_header_every_iterations == 0:
            self.print_header(self.iteration == 0)
        rule = self._rule("left-mid", "mid-mid", "bottom", "right-mid")
        cells = []
        for header in self._ordered_headers():
            cell = " " + self._current_line.get(header, "-")
            width = self._widths.get(header, 0)
            padding = width - len(cell) if len(cell) <= width else 0
            cells.append(cell + " " * padding)
        row = self.symbols["left"] + self.symbols["middle"].join(cells) + self.symbols["right"]
        print(rule)
        print(row)
        self.iteration += 1

    def print_footer(self) -> None:
        print(self._rule("bottom-left", "bottom-mid", "bottom", "bottom-right"))

    def new_line(self) -> None:
        self._current_line.clear()