# arowcv/dataloader/dataset.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

from arowcv.utils.errors import DimensionMismatchError


@dataclass(frozen=True)
class Dataset:
    """
    Dataset (immutable)

    Layout:
    - records: float64 matrix, one instance per row
    - labeled   : [features..., label]
    - no_label  : [features...], label == default_label for every row
    - bias feature (when enabled by the reader) is column 0

    Reordering never mutates: take() / concat() return new Datasets.
    """

    records: np.ndarray
    no_label: bool = False
    default_label: float = 1.0

    def __post_init__(self):
        records = np.array(self.records, dtype=np.float64)
        if records.ndim != 2:
            raise DimensionMismatchError(
                f"records must be 2-D, got shape {records.shape}"
            )
        records.setflags(write=False)
        object.__setattr__(self, "records", records)

    def __len__(self) -> int:
        return self.records.shape[0]

    @property
    def width(self) -> int:
        return self.records.shape[1]

    @property
    def feature_dimension(self) -> int:
        if self.no_label:
            return self.width
        return self.width - 1

    # ------------------------------------------------------------------
    # Column views
    # ------------------------------------------------------------------
    def features(self, feature_dimension: int | None = None) -> np.ndarray:
        d = self.feature_dimension if feature_dimension is None else feature_dimension
        self.check_feature_dimension(d)
        return self.records[:, :d]

    def labels(self) -> np.ndarray:
        if self.no_label:
            return np.full(len(self), self.default_label, dtype=np.float64)
        return self.records[:, -1]

    def label_of(self, record: np.ndarray) -> float:
        if self.no_label:
            return self.default_label
        return float(record[-1])

    def check_feature_dimension(self, feature_dimension: int) -> None:
        if feature_dimension != self.feature_dimension:
            raise DimensionMismatchError(
                f"feature_dimension={feature_dimension} but dataset carries "
                f"{self.feature_dimension} features (width={self.width}, "
                f"no_label={self.no_label})"
            )

    # ------------------------------------------------------------------
    # Reordering
    # ------------------------------------------------------------------
    def take(self, indices: Sequence[int] | np.ndarray) -> "Dataset":
        return Dataset(
            records=self.records[np.asarray(indices, dtype=np.intp)],
            no_label=self.no_label,
            default_label=self.default_label,
        )

    def slice(self, start: int, stop: int) -> "Dataset":
        return Dataset(
            records=self.records[start:stop],
            no_label=self.no_label,
            default_label=self.default_label,
        )

    def shuffled(self, rng: np.random.Generator) -> "Dataset":
        return self.take(rng.permutation(len(self)))

    @staticmethod
    def concat(datasets: Iterable["Dataset"]) -> "Dataset":
        parts = list(datasets)
        if not parts:
            raise ValueError("concat() needs at least one dataset")

        first = parts[0]
        for part in parts[1:]:
            if part.width != first.width or part.no_label != first.no_label:
                raise DimensionMismatchError(
                    f"cannot concat datasets of width {first.width} and {part.width}"
                )

        return Dataset(
            records=np.concatenate([p.records for p in parts], axis=0),
            no_label=first.no_label,
            default_label=first.default_label,
        )
