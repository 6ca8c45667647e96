from __future__ import annotations

from typing import List, Tuple

import numpy as np

from arowcv.dataloader.dataset import Dataset
from arowcv.utils.errors import ConfigurationError


class FoldSplitEngine:
    """
    FoldSplitEngine

    Responsibility:
    - Own ALL fold construction semantics:
        - one dataset-level shuffle (new working copy)
        - contiguous partition into exactly n_folds folds
        - train/test assembly for a held-out index

    Partition (n instances, k folds, size = n // k):
        fold i   = [i * size, (i + 1) * size)      for i < k - 1
        fold k-1 = [(k - 1) * size, n)             absorbs the remainder

    Contract:
    - 2 <= n_folds <= len(dataset), otherwise ConfigurationError
    """

    def __init__(self, n_folds: int):
        if n_folds < 2:
            raise ConfigurationError(f"fold must be >= 2, got {n_folds}")
        self.n_folds = n_folds

    # ======================================================================
    # Public API
    # ======================================================================
    def validate(self, dataset: Dataset) -> None:
        if len(dataset) == 0:
            raise ConfigurationError("dataset is empty")

        if len(dataset) < self.n_folds:
            raise ConfigurationError(
                f"dataset has {len(dataset)} instances, fewer than fold={self.n_folds}"
            )

    def shuffle(self, dataset: Dataset, rng: np.random.Generator) -> Dataset:
        return dataset.shuffled(rng)

    def split(self, dataset: Dataset) -> List[Dataset]:
        self.validate(dataset)

        n = len(dataset)
        size = n // self.n_folds

        folds: List[Dataset] = []
        for i in range(self.n_folds):
            start = i * size
            stop = n if i == self.n_folds - 1 else start + size
            folds.append(dataset.slice(start, stop))

        return folds

    @staticmethod
    def build_train_test(
        folds: List[Dataset],
        testing_index: int,
    ) -> Tuple[Dataset, Dataset]:
        """
        Training set = every other fold, concatenated in fold order.
        """
        if not 0 <= testing_index < len(folds):
            raise IndexError(
                f"testing_index={testing_index} out of range for {len(folds)} folds"
            )

        train = Dataset.concat(
            fold for index, fold in enumerate(folds) if index != testing_index
        )
        return train, folds[testing_index]
