"""A fixed 2-2-1 sigmoid network trained by online backpropagation."""

from .config import DEFAULT_LEARNING_RATE, TrainingConfig, resolve_learning_rate
from .datasets import UnknownDatasetError, available_datasets, get_dataset
from .network import Activations, Neuron, evaluate, forward, sigmoid
from .params import PARAMETER_NAMES, Parameters, format_parameters
from .rng import PythonRandomSource, RandomSource, default_random_source, seed_default_random_source
from .training import EpochReport, Sample, TrainingObserver, TrainingResult, TrainingSet, backprop_step, train

__all__ = [
    "DEFAULT_LEARNING_RATE",
    "TrainingConfig",
    "resolve_learning_rate",
    "UnknownDatasetError",
    "available_datasets",
    "get_dataset",
    "Activations",
    "Neuron",
    "evaluate",
    "forward",
    "sigmoid",
    "PARAMETER_NAMES",
    "Parameters",
    "format_parameters",
    "PythonRandomSource",
    "RandomSource",
    "default_random_source",
    "seed_default_random_source",
    "EpochReport",
    "Sample",
    "TrainingObserver",
    "TrainingResult",
    "TrainingSet",
    "backprop_step",
    "train",
]
