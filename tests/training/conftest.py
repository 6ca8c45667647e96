# tests/training/conftest.py
from __future__ import annotations

import numpy as np
import pytest

from arowcv.training.context import CrossValidationContext
from arowcv.observability.instrumentation import Instrumentation


@pytest.fixture
def cv_ctx(app_config, separable_dataset) -> CrossValidationContext:
    """
    Minimal CrossValidationContext for step-level tests.
    """
    return CrossValidationContext(
        run_id="test-run",
        cfg=app_config,
        inst=Instrumentation(enabled=False),
        rng=np.random.default_rng(0),
        feature_dimension=separable_dataset.feature_dimension,
        dataset=separable_dataset,
    )
