# arowcv/training/context.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np

from arowcv.dataloader.dataset import Dataset


@dataclass
class ArowState:
    """
    Result of one AROW training run.

    covariance is kept for inspection only; it never outlives the fold.
    """

    weight: np.ndarray
    covariance: np.ndarray
    updates: int = 0
    skipped: int = 0


@dataclass(frozen=True)
class FoldResult:
    fold_index: int
    train_size: int
    test_size: int
    misclassified: int
    error: float
    weight: np.ndarray
    elapsed: float = 0.0


@dataclass
class CrossValidationContext:
    """
    CrossValidationContext

    Semantics:
    - One context == one cross-validation run
    - run_id is immutable and mandatory
    - The context owns the shuffled working copy and its folds;
      the dataset handed in by the caller is never reordered
    """

    # -------------------------
    # Identity
    # -------------------------
    run_id: str

    # -------------------------
    # Static bindings
    # -------------------------
    cfg: Any
    inst: Any
    rng: np.random.Generator
    feature_dimension: int = 0

    # -------------------------
    # Run-level state
    # -------------------------
    dataset: Optional[Dataset] = None
    folds: List[Dataset] = field(default_factory=list)

    # -------------------------
    # Rolling (per fold) state
    # -------------------------
    fold_index: int = -1
    train_set: Optional[Dataset] = None
    test_set: Optional[Dataset] = None
    model_state: Optional[ArowState] = None

    fold_results: List[FoldResult] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)
