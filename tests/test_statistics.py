import pytest

from uno_nlp.options import Options
from uno_nlp.statistics import Statistics


def make_statistics(every="10"):
    options = Options()
    options["statistics_print_header_every_iterations"] = every
    statistics = Statistics(options)
    statistics.add_column("iters", Statistics.int_width, 1)
    statistics.add_column("objective", Statistics.double_width, 2)
    return statistics


def test_first_line_prints_opening_header(capsys):
    statistics = make_statistics()
    statistics.add_statistic("iters", 1)
    statistics.add_statistic("objective", 1.0)
    statistics.print_current_line()
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    assert lines[0].startswith("┌") and lines[0].endswith("┐")
    assert lines[1].startswith("│ iters")
    assert "1.000000e+00" in lines[3]


def test_missing_statistic_shows_dash(capsys):
    statistics = make_statistics()
    statistics.add_statistic("iters", 3)
    statistics.print_current_line()
    last = capsys.readouterr().out.splitlines()[-1]
    cells = last[1:-1].split("│")
    assert cells[0].strip() == "3"
    assert cells[1].strip() == "-"


def test_new_line_clears_values(capsys):
    statistics = make_statistics()
    statistics.add_statistic("iters", 7)
    statistics.new_line()
    statistics.print_current_line()
    last = capsys.readouterr().out.splitlines()[-1]
    assert "7" not in last


def test_header_repeats_with_mid_junctions(capsys):
    statistics = make_statistics(every="2")
    for _ in range(3):
        statistics.print_current_line()
    lines = capsys.readouterr().out.splitlines()
    # header (2) + row (2), row (2), header (2) + row (2)
    assert len(lines) == 10
    assert lines[0].startswith("┌")
    assert lines[6].startswith("├") and "┼" in lines[6]
    assert lines[7].startswith("│ iters")


def test_columns_ordered_by_order_key(capsys):
    options = Options()
    options["statistics_print_header_every_iterations"] = "1"
    statistics = Statistics(options)
    statistics.add_column("second", 10, 5)
    statistics.add_column("first", 10, 0)
    statistics.print_header(True)
    header_row = capsys.readouterr().out.splitlines()[1]
    assert header_row.index("first") < header_row.index("second")


def test_string_statistic_kept_verbatim(capsys):
    statistics = make_statistics()
    statistics.add_statistic("objective", "abc")
    statistics.print_current_line()
    last = capsys.readouterr().out.splitlines()[-1]
    assert last[1:-1].split("│")[1].strip() == "abc"


def test_zero_header_period_raises():
    statistics = make_statistics(every="0")
    with pytest.raises(ZeroDivisionError):
        statistics.print_current_line()