"""Forward pass of the fixed 2-2-1 sigmoid network."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

import numpy as np

from .params import Parameters

_ONE = np.float32(1.0)


class Neuron(IntEnum):
    """Selectors accepted by :func:`evaluate`, numbered as in the weight names."""

    HIDDEN_A = 3
    HIDDEN_B = 4
    OUTPUT = 5


@dataclass(frozen=True, slots=True)
class Activations:
    """Activations of every non-input neuron for one pair of inputs."""

    hidden_a: np.float32
    hidden_b: np.float32
    output: np.float32


def sigmoid(x: float) -> np.float32:
    """Logistic function ``1 / (1 + exp(-x))`` evaluated in float32."""

    x = np.float32(x)
    # Only ever exponentiate a non-positive value so large inputs cannot overflow.
    if x >= 0:
        return _ONE / (_ONE + np.exp(-x))
    z = np.exp(x)
    return z / (_ONE + z)


def forward(input1: float, input2: float, parameters: Parameters) -> Activations:
    """Propagate one input pair through the network."""

    in1 = np.float32(input1)
    in2 = np.float32(input2)
    p = parameters
    y3 = sigmoid(in1 * p.w13 + in2 * p.w23 - p.theta3)
    y4 = sigmoid(in1 * p.w14 + in2 * p.w24 - p.theta4)
    y5 = sigmoid(y3 * p.w35 + y4 * p.w45 - p.theta5)
    return Activations(hidden_a=y3, hidden_b=y4, output=y5)


def evaluate(
    input1: float,
    input2: float,
    parameters: Parameters,
    neuron: int = Neuron.OUTPUT,
) -> np.float32:
    """Return the activation of ``neuron`` for the given inputs.

    ``Neuron.HIDDEN_A`` and ``Neuron.HIDDEN_B`` select a hidden activation.
    Every other selector, including ids that name no neuron at all, returns
    the output activation; no error is raised.
    """

    activations = forward(input1, input2, parameters)
    if neuron == Neuron.HIDDEN_A:
        return activations.hidden_a
    if neuron == Neuron.HIDDEN_B:
        return activations.hidden_b
    return activations.output


__all__ = ["Neuron", "Activations", "sigmoid", "forward", "evaluate"]
