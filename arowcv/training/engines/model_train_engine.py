from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from arowcv.dataloader.dataset import Dataset
from arowcv.training.context import ArowState


class ModelTrainEngine(ABC):
    """
    Abstract ModelTrainEngine

    A train engine owns:
    - the update rule
    - its model state for the duration of one train() call

    It does NOT own data splitting or evaluation.
    """

    def __init__(self, cfg, rng: np.random.Generator | None = None):
        self.cfg = cfg
        self.rng = rng if rng is not None else np.random.default_rng()

    @abstractmethod
    def train_state(
        self,
        training_set: Dataset,
        feature_dimension: int,
    ) -> ArowState:
        """
        Returns the trained model state
        """
        raise NotImplementedError

    def train(self, training_set: Dataset, feature_dimension: int) -> np.ndarray:
        """
        Returns the trained weight vector
        """
        return self.train_state(training_set, feature_dimension).weight
