"""Train the 2-2-1 network on a logic gate and query it interactively."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, Tuple

from tqdm.auto import tqdm

from ann221 import (
    EpochReport,
    Parameters,
    TrainingConfig,
    TrainingResult,
    TrainingSet,
    available_datasets,
    evaluate,
    format_parameters,
    get_dataset,
    resolve_learning_rate,
    seed_default_random_source,
    train,
)


class ConsoleProgress:
    """Report training progress on a ``tqdm`` bar."""

    def __init__(self, total: int, *, verbose: bool = False) -> None:
        self.total = total
        self.verbose = verbose
        self.bar: Optional[tqdm] = None

    def on_start(self, parameters: Parameters) -> None:
        print("Parameters before training:")
        print(format_parameters(parameters))
        self.bar = tqdm(total=self.total, desc="Training", unit="epoch")

    def on_epoch(self, report: EpochReport) -> None:
        assert self.bar is not None
        self.bar.update(1)
        self.bar.set_postfix(error=f"{report.error:.6g}", refresh=False)
        if self.verbose:
            self.bar.write(f"Epoch {report.epoch}: e: {report.error:g}")
            self.bar.write(format_parameters(report.parameters))

    def close(self) -> None:
        if self.bar is not None:
            self.bar.close()
            self.bar = None


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Train a 2-2-1 sigmoid network")
    parser.add_argument(
        "--learning-rate",
        type=float,
        default=None,
        help="Step size in (0, 1); prompted for when omitted, 0.5 when out of range",
    )
    parser.add_argument("--dataset", type=str, default="and", choices=available_datasets())
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--max-epochs", type=int, default=100_000)
    parser.add_argument("--error-threshold", type=float, default=0.001)
    parser.add_argument(
        "--retries",
        type=int,
        default=0,
        help="Re-initialise and train again this many times after a failure",
    )
    parser.add_argument("--cached", action="store_true", help="Compute each sample's activations once")
    parser.add_argument("--verbose", action="store_true", help="Print parameters after every epoch")
    parser.add_argument("--plot-path", type=str, default=None, help="Save the error curve here")
    parser.add_argument("--no-interactive", action="store_true", help="Skip the inference loop")
    return parser.parse_args(argv)


def read_float(prompt: str) -> Optional[float]:
    """Prompt until a number is entered; ``None`` once input is exhausted."""

    while True:
        try:
            line = input(prompt)
        except EOFError:
            return None
        try:
            return float(line)
        except ValueError:
            print("Please enter a number.")


def train_with_retries(
    training_set: TrainingSet,
    learning_rate: float,
    args: argparse.Namespace,
) -> Tuple[Parameters, TrainingResult]:
    config = TrainingConfig(max_epochs=args.max_epochs, error_threshold=args.error_threshold)
    attempts = max(0, args.retries) + 1
    for attempt in range(1, attempts + 1):
        parameters = Parameters.random(config=config)
        progress = ConsoleProgress(config.max_epochs, verbose=args.verbose)
        try:
            result = train(
                training_set,
                learning_rate,
                parameters,
                config=config,
                progress=progress,
                cache_activations=args.cached,
            )
        finally:
            progress.close()
        print(f"Attempt {attempt}: {result.epochs} epochs, e: {result.final_error:g}")
        if result:
            break
    return parameters, result


def inference_loop(parameters: Parameters) -> None:
    while True:
        in1 = read_float("\nin1: ")
        if in1 is None:
            return
        in2 = read_float("in2: ")
        if in2 is None:
            return
        print(f"Output: {evaluate(in1, in2, parameters):g}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    if args.seed is not None:
        seed_default_random_source(args.seed)

    raw_rate = args.learning_rate
    if raw_rate is None:
        raw_rate = read_float("Learning rate: ")
    learning_rate = resolve_learning_rate(raw_rate if raw_rate is not None else float("nan"))
    print(f"Training on '{args.dataset}' with learning rate {learning_rate:g}")

    parameters, result = train_with_retries(get_dataset(args.dataset), learning_rate, args)

    if args.plot_path:
        from ann221.visualization import plot_error_history

        plot_error_history(result.error_history, args.plot_path)
        print(f"Saved error curve to {args.plot_path}")

    if not result:
        print("Training failed.")
        return 1

    print("Trained parameters:")
    print(format_parameters(parameters))
    if not args.no_interactive:
        inference_loop(parameters)
    return 0


if __name__ == "__main__":
    sys.exit(main())
