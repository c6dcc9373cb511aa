"""The nine scalars that fully define a 2-2-1 network."""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Mapping

import numpy as np

from .config import TrainingConfig
from .rng import RandomSource, default_random_source

# Weights are named ``w<source><destination>`` and thresholds ``theta<neuron>``
# with inputs numbered 1-2, hidden neurons 3-4 and the output neuron 5.
PARAMETER_NAMES = ("w13", "w14", "w23", "w24", "w35", "w45", "theta3", "theta4", "theta5")


@dataclass(slots=True)
class Parameters:
    """Weights and thresholds of the network, stored as ``numpy.float32``.

    Parameters
    ----------
    w13, w14:
        Weights from input 1 to hidden neurons A (3) and B (4).
    w23, w24:
        Weights from input 2 to hidden neurons A and B.
    w35, w45:
        Weights from hidden neurons A and B to the output neuron (5).
    theta3, theta4, theta5:
        Thresholds subtracted from the weighted sum of each neuron.
    """

    w13: np.float32 = np.float32(0.0)
    w14: np.float32 = np.float32(0.0)
    w23: np.float32 = np.float32(0.0)
    w24: np.float32 = np.float32(0.0)
    w35: np.float32 = np.float32(0.0)
    w45: np.float32 = np.float32(0.0)
    theta3: np.float32 = np.float32(0.0)
    theta4: np.float32 = np.float32(0.0)
    theta5: np.float32 = np.float32(0.0)

    def __post_init__(self) -> None:
        for field in fields(self):
            setattr(self, field.name, np.float32(getattr(self, field.name)))

    @classmethod
    def random(
        cls,
        rng: RandomSource | None = None,
        *,
        config: TrainingConfig | None = None,
    ) -> "Parameters":
        """Create a randomly initialised parameter set."""

        params = cls()
        params.initialize(rng, config=config)
        return params

    @classmethod
    def from_dict(cls, values: Mapping[str, float]) -> "Parameters":
        missing = [name for name in PARAMETER_NAMES if name not in values]
        unknown = [name for name in values if name not in PARAMETER_NAMES]
        if missing or unknown:
            raise ValueError(f"invalid parameter names: missing={missing}, unknown={unknown}")
        return cls(**{name: values[name] for name in PARAMETER_NAMES})

    def initialize(
        self,
        rng: RandomSource | None = None,
        *,
        config: TrainingConfig | None = None,
    ) -> None:
        """Overwrite every scalar with ``sign * scale / (r + 1)``.

        ``sign`` is a fair coin flip between +1 and -1 and ``r`` is uniform over
        ``range(config.init_choices)``; with the defaults every magnitude lies
        in ``[0.12, 1.2]``. The sign is drawn before the magnitude, parameter
        by parameter in :data:`PARAMETER_NAMES` order. Without ``rng`` the
        process-wide stream from :func:`default_random_source` is used.
        """

        source = rng if rng is not None else default_random_source()
        config = config or TrainingConfig()
        for name in PARAMETER_NAMES:
            sign = 1.0 if source.coin_flip() else -1.0
            divisor = source.randint_below(config.init_choices) + 1
            setattr(self, name, np.float32(sign * config.init_scale / divisor))

    def snapshot(self) -> "Parameters":
        return Parameters(**{name: getattr(self, name) for name in PARAMETER_NAMES})

    def as_dict(self) -> dict[str, float]:
        return {name: float(getattr(self, name)) for name in PARAMETER_NAMES}

    def values(self) -> np.ndarray:
        """Return the scalars as a float32 vector in :data:`PARAMETER_NAMES` order."""

        return np.array([getattr(self, name) for name in PARAMETER_NAMES], dtype=np.float32)


def format_parameters(params: Parameters) -> str:
    return ", ".join(f"{name}: {value:g}" for name, value in params.as_dict().items())


__all__ = ["PARAMETER_NAMES", "Parameters", "format_parameters"]
