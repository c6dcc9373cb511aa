import os
import subprocess
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = REPO_ROOT / "src"


def _env_with_src() -> dict[str, str]:
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_PATH)
    return env


def _run(args: list[str], stdin: str = "") -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "scripts/train_ann.py", *args],
        cwd=REPO_ROOT,
        env=_env_with_src(),
        input=stdin,
        capture_output=True,
        text=True,
    )


def test_train_then_query_interactively() -> None:
    result = _run(
        ["--learning-rate", "0.5", "--seed", "0", "--retries", "4"],
        stdin="1\n1\nabc\n0\n1\n",
    )
    assert result.returncode == 0, result.stderr
    assert "Parameters before training:" in result.stdout
    assert "Trained parameters:" in result.stdout
    assert "Please enter a number." in result.stdout
    outputs = [
        float(line.split("Output:")[1])
        for line in result.stdout.splitlines()
        if "Output:" in line
    ]
    assert len(outputs) == 2
    assert outputs[0] > 0.8
    assert outputs[1] < 0.2


def test_learning_rate_is_prompted_and_defaults_when_out_of_range() -> None:
    result = _run(["--seed", "1", "--max-epochs", "2", "--cached"], stdin="3.5\n")
    assert "learning rate 0.5" in result.stdout


def test_failure_exits_with_status_one() -> None:
    result = _run(["--learning-rate", "0.5", "--seed", "3", "--max-epochs", "3"])
    assert result.returncode == 1
    assert "Training failed." in result.stdout
    assert "Output:" not in result.stdout


def test_retries_reinitialise_after_failure() -> None:
    result = _run(["--learning-rate", "0.5", "--seed", "3", "--max-epochs", "2", "--retries", "2"])
    assert result.returncode == 1
    assert result.stdout.count("Parameters before training:") == 3
    assert "Attempt 3:" in result.stdout


def test_verbose_run_saves_error_curve(tmp_path) -> None:
    pytest.importorskip("matplotlib")
    plot_path = tmp_path / "errors.png"
    result = _run(
        [
            "--learning-rate",
            "0.9",
            "--dataset",
            "or",
            "--seed",
            "2",
            "--max-epochs",
            "4",
            "--verbose",
            "--plot-path",
            str(plot_path),
            "--no-interactive",
        ]
    )
    assert plot_path.exists()
    assert "Epoch 4: e:" in result.stdout or "Epoch 4: e:" in result.stderr
