# arowcv/config/training_config.py
from __future__ import annotations

from pydantic import BaseModel, Field


class TrainingConfig(BaseModel):
    """
    TrainingConfig (AROW)

    epoch            passes over the training set
    hyper_parameter  r, regularization strength, strictly positive
    """

    epoch: int = Field(default=10, ge=0)
    hyper_parameter: float = Field(default=1.0, gt=0)
