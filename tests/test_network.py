import numpy as np
import pytest

from ann221 import Neuron, Parameters, evaluate, forward, sigmoid


def make_parameters() -> Parameters:
    return Parameters(
        w13=0.6,
        w14=-0.4,
        w23=1.2,
        w24=0.3,
        w35=-0.8,
        w45=0.24,
        theta3=0.15,
        theta4=-1.2,
        theta5=0.4,
    )


def test_sigmoid_range_and_midpoint() -> None:
    assert sigmoid(0.0) == np.float32(0.5)
    xs = np.linspace(-10.0, 10.0, 41)
    values = [sigmoid(x) for x in xs]
    assert all(0.0 < value < 1.0 for value in values)
    assert all(values[i] < values[i + 1] for i in range(len(values) - 1))


def test_sigmoid_handles_extreme_inputs_without_overflow() -> None:
    with np.errstate(over="raise"):
        assert sigmoid(1e4) == pytest.approx(1.0)
        assert sigmoid(-1e4) == pytest.approx(0.0)


def test_forward_matches_reference_formula() -> None:
    params = make_parameters()
    in1, in2 = 0.7, -0.2

    def logistic(x: float) -> float:
        return 1.0 / (1.0 + np.exp(-x))

    y3 = logistic(in1 * 0.6 + in2 * 1.2 - 0.15)
    y4 = logistic(in1 * -0.4 + in2 * 0.3 + 1.2)
    y5 = logistic(y3 * -0.8 + y4 * 0.24 - 0.4)

    activations = forward(in1, in2, params)
    assert activations.hidden_a == pytest.approx(y3, rel=1e-5)
    assert activations.hidden_b == pytest.approx(y4, rel=1e-5)
    assert activations.output == pytest.approx(y5, rel=1e-5)
    assert isinstance(activations.output, np.float32)


def test_evaluate_selects_each_neuron() -> None:
    params = make_parameters()
    activations = forward(1.0, 0.0, params)
    assert evaluate(1.0, 0.0, params, Neuron.HIDDEN_A) == activations.hidden_a
    assert evaluate(1.0, 0.0, params, Neuron.HIDDEN_B) == activations.hidden_b
    assert evaluate(1.0, 0.0, params, Neuron.OUTPUT) == activations.output
    assert evaluate(1.0, 0.0, params, 3) == activations.hidden_a
    assert evaluate(1.0, 0.0, params, 4) == activations.hidden_b


@pytest.mark.parametrize("selector", [0, 1, 2, 6, -5, 99])
def test_unrecognised_selector_falls_back_to_output(selector: int) -> None:
    params = make_parameters()
    assert evaluate(0.3, 0.9, params, selector) == evaluate(0.3, 0.9, params, Neuron.OUTPUT)


def test_evaluate_is_deterministic() -> None:
    params = make_parameters()
    first = evaluate(0.25, 0.75, params)
    for _ in range(5):
        assert evaluate(0.25, 0.75, params) == first
    assert evaluate(0.25, 0.75, params.snapshot()) == first


def test_forward_does_not_mutate_parameters() -> None:
    params = make_parameters()
    before = params.as_dict()
    forward(1.0, 1.0, params)
    assert params.as_dict() == before
