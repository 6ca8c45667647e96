# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
from loguru import logger

from arowcv.config.app_config import AppConfig
from arowcv.config.cross_validation_config import CrossValidationConfig
from arowcv.config.data_config import DataConfig
from arowcv.config.training_config import TrainingConfig
from arowcv.dataloader.dataset import Dataset


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(7)


def _clusters(n_per_class: int, seed: int = 0, gap: float = 3.0) -> Dataset:
    """
    Two linearly separable 2-D clusters, bias feature prepended.

    rows: [1.0, x, y, label]   label in {+1, -1}
    """
    gen = np.random.default_rng(seed)
    pos = gen.normal(loc=(gap, gap), scale=0.5, size=(n_per_class, 2))
    neg = gen.normal(loc=(-gap, -gap), scale=0.5, size=(n_per_class, 2))

    points = np.vstack([pos, neg])
    labels = np.concatenate([np.ones(n_per_class), -np.ones(n_per_class)])
    bias = np.ones((2 * n_per_class, 1))

    return Dataset(records=np.column_stack([bias, points, labels]))


@pytest.fixture
def separable_dataset() -> Dataset:
    return _clusters(50, seed=1)


@pytest.fixture
def app_config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        data=DataConfig(path=str(tmp_path / "data.csv")),
        training=TrainingConfig(epoch=5, hyper_parameter=1.0),
        cross_validation=CrossValidationConfig(fold=5, seed=42),
    )


@pytest.fixture
def iris_like_csv(tmp_path: Path) -> Path:
    """
    label-first CSV (reverse=True layout), two separable classes
    """
    ds = _clusters(20, seed=3)
    lines = [
        ",".join([f"{row[-1]:g}"] + [f"{v:.6f}" for v in row[1:-1]])
        for row in ds.records
    ]
    path = tmp_path / "two-class.csv"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def make_clusters():
    return _clusters
