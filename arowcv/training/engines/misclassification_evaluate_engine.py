# arowcv/training/engines/misclassification_evaluate_engine.py
from __future__ import annotations

from typing import Tuple

import numpy as np

from arowcv import logs
from arowcv.dataloader.dataset import Dataset
from arowcv.training import linalg


class MisclassificationEvaluateEngine:
    """
    MisclassificationEvaluateEngine

    Responsibility:
    - Sign-based evaluation of a linear weight vector
    - prediction * label <= 0 counts as an error (zero is an error)

    Contract:
    - testing set MUST be non-empty
    - feature_dimension MUST match the testing set
    """

    def evaluate(
        self,
        weight: np.ndarray,
        testing_set: Dataset,
        feature_dimension: int,
    ) -> float:
        """
        Returns:
            misclassified / |testing_set|, in [0, 1]
        """
        return self.score(weight, testing_set, feature_dimension)[1]

    def score(
        self,
        weight: np.ndarray,
        testing_set: Dataset,
        feature_dimension: int,
    ) -> Tuple[int, float]:
        """
        (misclassified, error rate) for one testing set
        """
        errors = self.count_errors(weight, testing_set, feature_dimension)
        return errors, errors / len(testing_set)

    def count_errors(
        self,
        weight: np.ndarray,
        testing_set: Dataset,
        feature_dimension: int,
    ) -> int:
        if len(testing_set) == 0:
            raise ValueError("testing set is empty")

        testing_set.check_feature_dimension(feature_dimension)

        logs.info(
            f"[MisclassificationEvaluateEngine] the learned weight is : "
            f"{linalg.format_vector(weight)}"
        )

        features = testing_set.features(feature_dimension)
        labels = testing_set.labels()

        errors = 0
        for feature, label in zip(features, labels):
            prediction = linalg.dot(weight, feature)
            if prediction * label <= 0:
                errors += 1

        logs.info(
            f"[MisclassificationEvaluateEngine] the number of misclassification : {errors}"
        )
        return errors
