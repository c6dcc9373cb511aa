"""Configuration dataclasses for the 2-2-1 network trainer."""
from __future__ import annotations

import math
from dataclasses import dataclass

DEFAULT_LEARNING_RATE = 0.5


@dataclass(slots=True)
class TrainingConfig:
    """Configuration controlling initialisation and the training stop policy.

    Parameters
    ----------
    max_epochs:
        Epoch cap. Training that has not met ``error_threshold`` once the
        epoch counter reaches this value is reported as a failure.
    error_threshold:
        Training succeeds as soon as the sum of squared errors over one epoch
        drops strictly below this value.
    init_scale:
        Largest magnitude a freshly initialised parameter can take.
    init_choices:
        Number of evenly weighted divisors used by the initialiser. Each
        parameter gets magnitude ``init_scale / (r + 1)`` with ``r`` drawn
        uniformly from ``range(init_choices)``.
    """

    max_epochs: int = 100_000
    error_threshold: float = 0.001
    init_scale: float = 1.2
    init_choices: int = 10

    def __post_init__(self) -> None:
        if self.max_epochs <= 0:
            raise ValueError("max_epochs must be positive")
        if self.error_threshold <= 0:
            raise ValueError("error_threshold must be positive")
        if self.init_scale <= 0:
            raise ValueError("init_scale must be positive")
        if self.init_choices <= 0:
            raise ValueError("init_choices must be positive")


def resolve_learning_rate(value: float, default: float = DEFAULT_LEARNING_RATE) -> float:
    """Return ``value`` if it lies in the open interval (0, 1), else ``default``."""

    if math.isnan(value) or not 0.0 < value < 1.0:
        return default
    return float(value)
