"""Online backpropagation for the 2-2-1 network."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, Protocol, Sequence, Union

import numpy as np

from .config import TrainingConfig
from .network import Neuron, evaluate, forward
from .params import Parameters

_ONE = np.float32(1.0)


@dataclass(frozen=True, slots=True)
class Sample:
    input1: np.float32
    input2: np.float32
    target: np.float32

    def __post_init__(self) -> None:
        for name in ("input1", "input2", "target"):
            object.__setattr__(self, name, np.float32(getattr(self, name)))


@dataclass(slots=True)
class TrainingSet:
    """Three parallel sequences holding the first input, second input and target.

    The sequences must be non-empty and of equal length; anything else raises
    ``ValueError`` here rather than surfacing later as a truncated epoch.
    """

    inputs1: Sequence[float]
    inputs2: Sequence[float]
    targets: Sequence[float]

    def __post_init__(self) -> None:
        lengths = {len(self.inputs1), len(self.inputs2), len(self.targets)}
        if len(lengths) != 1:
            msg = (
                "inputs1, inputs2 and targets must have equal length "
                f"(got {len(self.inputs1)}, {len(self.inputs2)}, {len(self.targets)})"
            )
            raise ValueError(msg)
        if len(self.targets) == 0:
            raise ValueError("training set must contain at least one sample")
        self.inputs1 = tuple(np.float32(v) for v in self.inputs1)
        self.inputs2 = tuple(np.float32(v) for v in self.inputs2)
        self.targets = tuple(np.float32(v) for v in self.targets)

    @classmethod
    def from_samples(cls, samples: Iterable[tuple[float, float, float]]) -> "TrainingSet":
        rows = list(samples)
        return cls(
            inputs1=[row[0] for row in rows],
            inputs2=[row[1] for row in rows],
            targets=[row[2] for row in rows],
        )

    def __len__(self) -> int:
        return len(self.targets)

    def __iter__(self) -> Iterator[Sample]:
        for in1, in2, target in zip(self.inputs1, self.inputs2, self.targets):
            yield Sample(in1, in2, target)


@dataclass(frozen=True, slots=True)
class EpochReport:
    """State observable after an epoch: 1-based index, error sum and parameters."""

    epoch: int
    error: float
    parameters: Parameters


@dataclass
class TrainingResult:
    """Outcome of :func:`train`. Truthy exactly when training converged."""

    converged: bool
    epochs: int
    final_error: float
    error_history: list[float] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.converged


class TrainingObserver(Protocol):
    def on_start(self, parameters: Parameters) -> None:
        ...

    def on_epoch(self, report: EpochReport) -> None:
        ...


Progress = Union[TrainingObserver, Callable[[EpochReport], None]]


class _CallbackObserver:
    def __init__(self, callback: Callable[[EpochReport], None]) -> None:
        self.callback = callback

    def on_start(self, parameters: Parameters) -> None:
        pass

    def on_epoch(self, report: EpochReport) -> None:
        self.callback(report)


def _as_observer(progress: Progress | None) -> TrainingObserver | None:
    if progress is None or hasattr(progress, "on_epoch"):
        return progress  # type: ignore[return-value]
    return _CallbackObserver(progress)


def backprop_step(
    sample: Sample,
    learning_rate: np.float32,
    parameters: Parameters,
    *,
    cache_activations: bool = False,
) -> np.float32:
    """Apply one online update for ``sample`` and return its squared error.

    All nine deltas are computed before any parameter changes, so the hidden
    deltas always see the output weights as they were before this update.
    """

    in1, in2, target = sample.input1, sample.input2, sample.target
    if cache_activations:
        activations = forward(in1, in2, parameters)
        y3, y4, y5 = activations.hidden_a, activations.hidden_b, activations.output
    else:
        y5 = evaluate(in1, in2, parameters, Neuron.OUTPUT)
        y3 = evaluate(in1, in2, parameters, Neuron.HIDDEN_A)
        y4 = evaluate(in1, in2, parameters, Neuron.HIDDEN_B)

    rate = learning_rate
    p = parameters
    error = target - y5

    delta5 = y5 * (_ONE - y5) * error
    delta_w35 = rate * y3 * delta5
    delta_w45 = rate * y4 * delta5
    delta_theta5 = -rate * delta5

    delta3 = y3 * (_ONE - y3) * delta5 * p.w35
    delta_w13 = rate * in1 * delta3
    delta_w23 = rate * in2 * delta3
    delta_theta3 = -rate * delta3

    delta4 = y4 * (_ONE - y4) * delta5 * p.w45
    delta_w14 = rate * in1 * delta4
    delta_w24 = rate * in2 * delta4
    delta_theta4 = -rate * delta4

    p.w35 += delta_w35
    p.w45 += delta_w45
    p.theta5 += delta_theta5

    p.w13 += delta_w13
    p.w23 += delta_w23
    p.theta3 += delta_theta3

    p.w14 += delta_w14
    p.w24 += delta_w24
    p.theta4 += delta_theta4

    return error * error


def train(
    training_set: TrainingSet,
    learning_rate: float,
    parameters: Parameters,
    *,
    config: TrainingConfig | None = None,
    progress: Progress | None = None,
    cache_activations: bool = False,
) -> TrainingResult:
    """Fit ``parameters`` in place to ``training_set`` by online gradient descent.

    Each epoch visits the samples in order and updates the parameters after
    every sample. Training stops as soon as an epoch's sum of squared errors
    falls below ``config.error_threshold``. Reaching ``config.max_epochs`` is
    a failure, even when the final epoch happens to meet the threshold; the
    parameters then keep whatever values they last reached.

    ``progress`` receives the initial parameters through ``on_start`` and an
    :class:`EpochReport` after every epoch. A bare callable is treated as the
    per-epoch hook. ``cache_activations`` computes each sample's activations
    in a single forward pass instead of one pass per neuron; results are
    identical either way.
    """

    config = config or TrainingConfig()
    if not math.isfinite(learning_rate):
        raise ValueError("learning_rate must be finite")
    rate = np.float32(learning_rate)
    observer = _as_observer(progress)
    if observer is not None:
        observer.on_start(parameters.snapshot())

    history: list[float] = []
    epoch = 0
    while epoch < config.max_epochs:
        error_sum = np.float32(0.0)
        for sample in training_set:
            error_sum += backprop_step(
                sample, rate, parameters, cache_activations=cache_activations
            )
        epoch += 1
        history.append(float(error_sum))
        if observer is not None:
            observer.on_epoch(EpochReport(epoch, float(error_sum), parameters.snapshot()))
        if error_sum < config.error_threshold:
            break

    return TrainingResult(
        converged=epoch < config.max_epochs,
        epochs=epoch,
        final_error=history[-1],
        error_history=history,
    )


__all__ = [
    "Sample",
    "TrainingSet",
    "EpochReport",
    "TrainingResult",
    "TrainingObserver",
    "backprop_step",
    "train",
]
