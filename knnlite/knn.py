"""k-nearest-neighbours classification and train/test splitting."""

from __future__ import annotations

import copy
import math
from collections import Counter

from .dataset import Dataset, DatasetError, euclidean_distance

_TOLERANCE = 1.0e-15


def predict_labels(x_test: Dataset, x_train: Dataset, y_train: Dataset, k: int) -> Dataset:
    """Predict one label per row of ``x_test`` by majority vote of ``k`` neighbours.

    Ties in the vote go to the smallest label. Returns an empty dataset when
    any input is empty or ``k`` is not positive.
    """
    if not x_train.rows or not y_train.rows or not x_test.rows or k <= 0:
        return Dataset()
    columns = y_train.columns[:1]
    count = min(len(x_train.rows), len(y_train.rows))
    if k > count:
        raise DatasetError(f"k={k} exceeds the {count} training rows")
    labels = [row[0] for row in y_train.rows[:count]]
    training = x_train.rows[:count]

    predictions: list[list[int]] = []
    for sample in x_test.rows:
        ranked = sorted(
            zip((euclidean_distance(sample, row) for row in training), labels),
            key=lambda pair: pair[0],
        )
        votes = Counter(label for _, label in ranked[:k])
        best = max(votes.values())
        predictions.append([min(label for label, n in votes.items() if n == best)])
    return Dataset(columns, predictions)


class KNN:
    """A k-nearest-neighbours classifier over integer features."""

    def __init__(self, k: int = 5) -> None:
        self.k = k
        self.x_train = Dataset()
        self.y_train = Dataset()

    def fit(self, x_train: Dataset, y_train: Dataset) -> None:
        self.x_train = copy.deepcopy(x_train)
        self.y_train = copy.deepcopy(y_train)

    def predict(self, x_test: Dataset) -> Dataset:
        return predict_labels(x_test, self.x_train, self.y_train, self.k)

    def score(self, y_test: Dataset, y_pred: Dataset) -> float:
        return y_test.score(y_pred)


def train_test_split(
    x: Dataset, y: Dataset, test_size: float
) -> tuple[Dataset, Dataset, Dataset, Dataset]:
    """Split into (x_train, x_test, y_train, y_test), the test part taken from the end."""
    if len(x) != len(y):
        raise ValueError("features and labels differ in length")
    if not 0 < test_size < 1:
        raise ValueError("test_size must lie strictly between 0 and 1")
    rows = len(x)
    cut = rows * (1 - test_size)
    if abs(round(cut) - cut) < _TOLERANCE * rows:
        cut = float(round(cut))
    train_end = math.trunc(cut - 1)
    test_start = math.trunc(cut)
    return (
        x.extract(0, train_end, 0, -1),
        x.extract(test_start, -1, 0, -1),
        y.extract(0, train_end, 0, -1),
        y.extract(test_start, -1, 0, -1),
    )