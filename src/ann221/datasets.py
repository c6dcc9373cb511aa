"""Two-input logic gates usable as training sets."""
from __future__ import annotations

from .training import TrainingSet

# Sample order shared by every gate: (0, 0), (1, 0), (0, 1), (1, 1).
GATE_INPUTS1 = (0.0, 1.0, 0.0, 1.0)
GATE_INPUTS2 = (0.0, 0.0, 1.0, 1.0)

GATE_TARGETS: dict[str, tuple[float, ...]] = {
    "and": (0.0, 0.0, 0.0, 1.0),
    "or": (0.0, 1.0, 1.0, 1.0),
    "nand": (1.0, 1.0, 1.0, 0.0),
    "nor": (1.0, 0.0, 0.0, 0.0),
    "xor": (0.0, 1.0, 1.0, 0.0),
}

DEFAULT_DATASET = "and"


class UnknownDatasetError(KeyError):
    """Raised when a gate name is not one of :data:`GATE_TARGETS`."""


def available_datasets() -> list[str]:
    return sorted(GATE_TARGETS)


def get_dataset(name: str = DEFAULT_DATASET) -> TrainingSet:
    """Return a fresh :class:`TrainingSet` for the gate called ``name``."""

    try:
        targets = GATE_TARGETS[name.lower()]
    except KeyError:
        raise UnknownDatasetError(
            f"unknown dataset {name!r}; expected one of {available_datasets()}"
        ) from None
    return TrainingSet(inputs1=GATE_INPUTS1, inputs2=GATE_INPUTS2, targets=targets)


__all__ = [
    "GATE_TARGETS",
    "DEFAULT_DATASET",
    "UnknownDatasetError",
    "available_datasets",
    "get_dataset",
]
