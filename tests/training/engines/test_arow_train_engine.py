# tests/training/engines/test_arow_train_engine.py
from __future__ import annotations

import numpy as np
import pytest

from arowcv.config.training_config import TrainingConfig
from arowcv.dataloader.dataset import Dataset
from arowcv.training import linalg
from arowcv.training.engines.model.arow_train_engine import (
    AROWTrainEngine,
    UpdateOutcome,
)
from arowcv.utils.errors import DimensionMismatchError


def _engine(epoch: int = 5, r: float = 1.0, seed: int = 0) -> AROWTrainEngine:
    return AROWTrainEngine(
        TrainingConfig(epoch=epoch, hyper_parameter=r),
        rng=np.random.default_rng(seed),
    )


def test_weight_has_feature_dimension(separable_dataset):
    weight = _engine().train(separable_dataset, separable_dataset.feature_dimension)

    assert weight.shape == (separable_dataset.feature_dimension,)
    assert np.all(np.isfinite(weight))


def test_zero_epochs_returns_zero_vector(separable_dataset):
    engine = _engine(epoch=0)
    d = separable_dataset.feature_dimension

    first = engine.train(separable_dataset, d)
    second = engine.train(separable_dataset, d)

    assert np.array_equal(first, np.zeros(d))
    assert np.array_equal(second, np.zeros(d))


def test_zero_epochs_keeps_identity_covariance(separable_dataset):
    state = _engine(epoch=0).train_state(separable_dataset, 3)

    assert np.array_equal(state.covariance, np.eye(3))
    assert state.updates == 0


def test_learns_separable_clusters(separable_dataset):
    weight = _engine(epoch=5).train(separable_dataset, 3)

    margins = separable_dataset.features(3) @ weight * separable_dataset.labels()
    assert np.all(margins > 0)


def test_training_set_is_not_reordered(separable_dataset):
    before = separable_dataset.records.copy()
    _engine(epoch=3).train(separable_dataset, 3)

    assert np.array_equal(separable_dataset.records, before)


def test_dimension_mismatch_fails_fast(separable_dataset):
    with pytest.raises(DimensionMismatchError):
        _engine().train(separable_dataset, 2)


def test_empty_training_set():
    empty = Dataset(records=np.empty((0, 3)))
    with pytest.raises(ValueError):
        _engine().train(empty, 2)


def test_same_seed_same_weight(separable_dataset):
    a = _engine(seed=11).train(separable_dataset, 3)
    b = _engine(seed=11).train(separable_dataset, 3)

    assert np.array_equal(a, b)


# ----------------------------------------------------------------------
# single step
# ----------------------------------------------------------------------
def test_first_step_matches_closed_form():
    """
    w = 0, Σ = I, x = [1, 2], y = +1, r = 1:
        v = 5, β = 1/6, α = 1/6, δ = x / 6
        Σ' = I - (1/6) x xᵀ
    """
    x = np.array([1.0, 2.0])
    weight, cov, outcome = AROWTrainEngine.update(
        np.zeros(2), np.eye(2), x, 1.0, 1.0
    )

    assert outcome is UpdateOutcome.APPLIED
    assert np.allclose(weight, x / 6.0)
    assert np.allclose(cov, np.eye(2) - np.outer(x, x) / 6.0)


def test_confident_instance_is_left_alone():
    weight = np.array([2.0, 0.0])
    cov = np.eye(2)

    new_w, new_cov, outcome = AROWTrainEngine.update(
        weight, cov, np.array([1.0, 0.0]), 1.0, 1.0
    )

    assert outcome is UpdateOutcome.CONFIDENT
    assert new_w is weight
    assert new_cov is cov


def test_margin_exactly_one_is_confident():
    _, _, outcome = AROWTrainEngine.update(
        np.array([1.0]), np.eye(1), np.array([1.0]), 1.0, 1.0
    )
    assert outcome is UpdateOutcome.CONFIDENT


def test_zero_feature_is_a_zero_step():
    weight, cov, outcome = AROWTrainEngine.update(
        np.zeros(3), np.eye(3), np.zeros(3), 1.0, 1.0
    )

    assert outcome is UpdateOutcome.ZERO_STEP
    assert np.array_equal(weight, np.zeros(3))
    assert np.array_equal(cov, np.eye(3))


def test_all_zero_features_never_update():
    ds = Dataset(records=np.column_stack([np.zeros((6, 2)), np.ones(6)]))

    state = _engine(epoch=3).train_state(ds, 2)

    assert np.array_equal(state.weight, np.zeros(2))
    assert state.updates == 0
    assert state.skipped == 18


def test_update_does_not_mutate_inputs():
    weight = np.zeros(2)
    cov = np.eye(2)

    AROWTrainEngine.update(weight, cov, np.array([1.0, -1.0]), -1.0, 0.5)

    assert np.array_equal(weight, np.zeros(2))
    assert np.array_equal(cov, np.eye(2))


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_covariance_stays_symmetric_after_every_update(seed):
    gen = np.random.default_rng(seed)
    d = 4
    weight = np.zeros(d)
    cov = linalg.identity(d)

    applied = 0
    for _ in range(200):
        x = gen.normal(size=d)
        y = 1.0 if gen.random() < 0.5 else -1.0
        weight, cov, outcome = AROWTrainEngine.update(weight, cov, x, y, 0.1)
        if outcome is UpdateOutcome.APPLIED:
            applied += 1
            assert np.allclose(cov, cov.T, atol=1e-9)

    assert applied > 0
