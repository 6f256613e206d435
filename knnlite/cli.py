"""Command line: load a labelled CSV, preview it, train and score a classifier."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .dataset import DatasetError, load_csv
from .knn import KNN, train_test_split


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="knnlite",
        description="Classify a CSV whose first column is the label.",
    )
    parser.add_argument("path", nargs="?", default="mnist.csv", help="CSV file to load")
    parser.add_argument("-k", "--k", type=int, default=5, help="number of neighbours")
    parser.add_argument(
        "--test-size", type=float, default=0.2, help="fraction of rows held out"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    try:
        dataset = load_csv(args.path)
    except OSError as exc:
        print(f"knnlite: cannot read {args.path}: {exc.strerror or exc}", file=sys.stderr)
        return 1

    try:
        print(dataset.head())
        print(dataset.tail())
        rows, cols = dataset.shape()
        print(f"Shape: {rows}x{cols}")

        features = dataset.extract(0, -1, 1, -1)
        labels = dataset.extract(0, -1, 0, 0)
        x_train, x_test, y_train, y_test = train_test_split(
            features, labels, args.test_size
        )
        model = KNN(args.k)
        model.fit(x_train, y_train)
        predicted = model.predict(x_test)
        accuracy = model.score(y_test, predicted)
    except (DatasetError, ValueError) as exc:
        print(f"knnlite: {exc}", file=sys.stderr)
        return 1
    print(f"Accuracy: {accuracy:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())