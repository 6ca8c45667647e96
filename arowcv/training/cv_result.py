from dataclasses import dataclass, field
from typing import List

import pandas as pd

from arowcv.training.context import FoldResult
from arowcv.training.engines.cv_report_engine import CrossValidationReportEngine


@dataclass(frozen=True)
class CrossValidationResult:
    """
    CrossValidationResult

    Semantics:
    - In-memory outcome of one complete cross-validation run
    - No I/O; average_error is the plain mean over folds
    """

    run_id: str
    average_error: float
    folds: List[FoldResult] = field(default_factory=list)

    def to_frame(self) -> pd.DataFrame:
        return CrossValidationReportEngine().build(self.folds)
