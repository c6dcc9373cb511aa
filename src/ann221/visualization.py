"""Plotting utilities for training diagnostics."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt


def plot_error_history(errors: Sequence[float], path: str | Path | None = None):
    """Plot the per-epoch sum of squared errors and optionally save it."""

    fig = plt.figure()
    plt.plot(range(1, len(errors) + 1), errors)
    plt.yscale("log")
    plt.xlabel("Epoch")
    plt.ylabel("Sum of squared errors")
    plt.title("Training Error")
    plt.tight_layout()
    if path is not None:
        fig.savefig(path)
        plt.close(fig)
    return fig
