import pytest

from uno_nlp.scaling import Scaling


def test_initial_scaling_is_one():
    scaling = Scaling(2, 100.0)
    assert scaling.objective_scaling == 1.0
    assert scaling.constraint_scaling(0) == 1.0
    assert scaling.constraint_scaling(1) == 1.0


def test_out_of_range_constraint():
    scaling = Scaling(1, 100.0)
    with pytest.raises(IndexError):
        scaling.constraint_scaling(3)


def test_large_gradient_is_scaled_to_threshold():
    scaling = Scaling(1, 100.0)
    gradient, jacobian = scaling.compute({0: 200.0, 2: -50.0}, [{1: -400.0}])
    assert scaling.objective_scaling == 0.5
    assert max(abs(v) for v in gradient.values()) == pytest.approx(100.0)
    assert max(abs(v) for v in jacobian[0].values()) == pytest.approx(100.0)
    assert 0.0 < scaling.constraint_scaling(0) < 1.0


def test_small_gradients_unchanged():
    scaling = Scaling(1, 100.0)
    gradient, jacobian = scaling.compute({0: 3.0}, [{0: -2.0}])
    assert scaling.objective_scaling == 1.0
    assert scaling.constraint_scaling(0) == 1.0
    assert gradient == {0: 3.0}
    assert jacobian == [{0: -2.0}]


def test_empty_gradient_gives_unit_scaling():
    scaling = Scaling(1, 100.0)
    gradient, jacobian = scaling.compute({}, [{}])
    assert scaling.objective_scaling == 1.0
    assert scaling.constraint_scaling(0) == 1.0
    assert gradient == {}
    assert jacobian == [{}]


def test_inputs_not_modified():
    objective_gradient = {0: 1000.0}
    constraint_jacobian = [{0: 1000.0}]
    scaling = Scaling(1, 100.0)
    scaling.compute(objective_gradient, constraint_jacobian)
    assert objective_gradient == {0: 1000.0}
    assert constraint_jacobian == [{0: 1000.0}]


def test_scaled_values_proportional():
    scaling = Scaling(1, 10.0)
    gradient, _ = scaling.compute({0: 40.0, 1: 20.0}, [{}])
    assert gradient[1] / gradient[0] == pytest.approx(0.5)
    assert gradient[0] == pytest.approx(40.0 * scaling.objective_scaling)