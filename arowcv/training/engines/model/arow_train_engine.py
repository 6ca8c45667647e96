# arowcv/training/engines/model/arow_train_engine.py
"""
AROW online train engine.

Implements Figure 1 of "Adaptive Regularization of Weight Vectors"
(Crammer, Kulesza, Dredze): a confidence-weighted hinge update on a
weight vector w and covariance Σ, both fresh per train() call.
"""
from __future__ import annotations

from enum import Enum
from typing import Tuple

import numpy as np

from arowcv import logs
from arowcv.dataloader.dataset import Dataset
from arowcv.training import linalg
from arowcv.training.context import ArowState
from arowcv.training.engines.model_train_engine import ModelTrainEngine


class UpdateOutcome(Enum):
    CONFIDENT = "confident"   # margin * label >= 1, nothing to do
    APPLIED = "applied"       # w and Σ updated
    ZERO_STEP = "zero_step"   # hinge violated but delta == 0 exactly


class AROWTrainEngine(ModelTrainEngine):
    """
    AROW Train Engine

    Contract:
    - training_set non-empty
    - feature_dimension == training_set.feature_dimension
    - epoch passes, each over a fresh permutation drawn from self.rng
    - returns ArowState; w zero-initialized, Σ identity-initialized
    """

    def train_state(
        self,
        training_set: Dataset,
        feature_dimension: int,
    ) -> ArowState:
        if len(training_set) == 0:
            raise ValueError("training set is empty")

        training_set.check_feature_dimension(feature_dimension)

        r = float(self.cfg.hyper_parameter)
        weight = np.zeros(feature_dimension, dtype=np.float64)
        covariance = linalg.identity(feature_dimension)

        features = training_set.features(feature_dimension)
        labels = training_set.labels()

        updates = 0
        skipped = 0

        for epoch in range(self.cfg.epoch):
            # new order every epoch, independent of the fold shuffle
            order = self.rng.permutation(len(training_set))

            epoch_updates = 0
            for i in order:
                weight, covariance, outcome = self.update(
                    weight, covariance, features[i], float(labels[i]), r
                )
                if outcome is UpdateOutcome.APPLIED:
                    epoch_updates += 1
                elif outcome is UpdateOutcome.ZERO_STEP:
                    skipped += 1

            updates += epoch_updates
            logs.debug(
                f"[AROWTrainEngine] epoch={epoch} updates={epoch_updates}/{len(order)}"
            )

        return ArowState(
            weight=weight,
            covariance=covariance,
            updates=updates,
            skipped=skipped,
        )

    @staticmethod
    def update(
        weight: np.ndarray,
        covariance: np.ndarray,
        feature: np.ndarray,
        label: float,
        r: float,
    ) -> Tuple[np.ndarray, np.ndarray, UpdateOutcome]:
        """
        One AROW step on (feature, label).

        Returns new (weight, covariance) arrays; inputs are not modified.
        """
        margin = linalg.dot(weight, feature)

        if margin * label >= 1:
            return weight, covariance, UpdateOutcome.CONFIDENT

        beta = 1.0 / (linalg.quadratic_form(feature, covariance) + r)
        alpha = max(0.0, beta * (1.0 - label * margin))

        sigma_x = linalg.matrix_vector(covariance, feature)
        delta = linalg.scale(sigma_x, alpha * label)

        # exact zero, not a tolerance
        if linalg.is_zero_vector(delta):
            return weight, covariance, UpdateOutcome.ZERO_STEP

        weight = linalg.add_vectors(weight, delta)

        # Σ - β (Σx xᵀ) Σ
        beta_sum_xx = linalg.scale(linalg.outer(sigma_x, feature), beta)
        covariance = linalg.subtract_matrices(
            covariance, linalg.matrix_matrix(beta_sum_xx, covariance)
        )

        return weight, covariance, UpdateOutcome.APPLIED
