import logging

import pytest

from uno_nlp.options import (
    Options,
    find_preset,
    get_command_line_options,
    get_default_options,
    set_logger,
)


def test_set_and_get_round_trip():
    options = Options()
    options["mechanism"] = "TR"
    assert options["mechanism"] == "TR"
    assert options.get_string("mechanism") == "TR"


def test_missing_key_raises():
    options = Options()
    with pytest.raises(KeyError, match="The option tolerance was not found"):
        options.get_string("tolerance")


def test_get_double():
    options = Options()
    options["filter_gamma"] = "1e-5"
    assert options.get_double("filter_gamma") == 1e-5


def test_get_double_invalid():
    options = Options()
    options["x"] = "abc"
    with pytest.raises(ValueError):
        options.get_double("x")


def test_get_int_parses_leading_integer():
    options = Options()
    options["kmax"] = "500"
    options["filter_ubd"] = "1e4"
    assert options.get_int("kmax") == 500
    assert options.get_int("filter_ubd") == 1


def test_get_unsigned_int_rejects_negative():
    options = Options()
    options["n"] = "-3"
    with pytest.raises(ValueError):
        options.get_unsigned_int("n")


def test_get_bool():
    options = Options()
    options["a"] = "yes"
    options["b"] = "no"
    assert options.get_bool("a") is True
    assert options.get_bool("b") is False


def test_print_is_sorted(capsys):
    options = Options()
    options["b"] = "2"
    options["a"] = "1"
    options.print()
    assert capsys.readouterr().out == "Options:\n- a = 1\n- b = 2\n"


def test_get_default_options(tmp_path):
    path = tmp_path / "uno.options"
    path.write_text("# comment\n\ntolerance 1e-6\nsubproblem QP\n", encoding="utf-8")
    options = get_default_options(str(path))
    assert len(options) == 2
    assert options.get_double("tolerance") == 1e-6
    assert options["subproblem"] == "QP"


def test_get_default_options_missing_file(tmp_path):
    with pytest.raises(ValueError, match="was not found"):
        get_default_options(str(tmp_path / "absent.options"))


def test_find_preset_ipopt():
    options = Options()
    find_preset("ipopt", options)
    assert options["subproblem"] == "barrier"
    assert options["sparse_format"] == "COO"
    assert options.get_bool("use_second_order_correction")


def test_find_preset_unknown_leaves_options_unchanged():
    options = Options()
    find_preset("unknown", options)
    assert len(options) == 0


def test_command_line_options():
    options = Options()
    argv = ["uno", "-preset", "filtersqp", "-tolerance", "1e-8", "problem.nl"]
    get_command_line_options(argv, options)
    assert options["mechanism"] == "TR"
    assert options["tolerance"] == "1e-8"
    assert "problem.nl" not in options


def test_command_line_last_argument_skipped():
    options = Options()
    get_command_line_options(["uno", "-x"], options)
    assert "x" not in options


def test_command_line_ignored_argument_warns(caplog):
    options = Options()
    with caplog.at_level(logging.WARNING, logger="uno_nlp"):
        get_command_line_options(["uno", "stray", "-a", "1", "problem.nl"], options)
    assert options["a"] == "1"
    assert "Argument stray was ignored" in caplog.text


def test_set_logger_controls_emitted_warnings(caplog):
    uno_logger = logging.getLogger("uno_nlp")
    previous = uno_logger.level
    try:
        set_logger("ERROR")
        get_command_line_options(["uno", "quiet", "-a", "1", "problem.nl"], Options())
        assert "Argument quiet was ignored" not in caplog.text

        set_logger("WARNING")
        get_command_line_options(["uno", "loud", "-a", "1", "problem.nl"], Options())
        assert "Argument loud was ignored" in caplog.text

        set_logger("NOT_A_LEVEL")
        get_command_line_options(["uno", "again", "-a", "1", "problem.nl"], Options())
        assert "Argument again was ignored" in caplog.text
        assert uno_logger.level == logging.WARNING
    finally:
        uno_logger.setLevel(previous)