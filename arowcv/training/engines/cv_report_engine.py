from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import pandas as pd

from arowcv import logs
from arowcv.training.context import FoldResult


class CrossValidationReportEngine:
    """
    Fold results -> tabular report (pure; CSV only when asked).

    Columns: fold, train_size, test_size, misclassified, error, elapsed_s
    """

    COLUMNS = ["fold", "train_size", "test_size", "misclassified", "error", "elapsed_s"]

    def build(self, fold_results: List[FoldResult]) -> pd.DataFrame:
        rows = [
            {
                "fold": r.fold_index,
                "train_size": r.train_size,
                "test_size": r.test_size,
                "misclassified": r.misclassified,
                "error": r.error,
                "elapsed_s": r.elapsed,
            }
            for r in fold_results
        ]
        return pd.DataFrame(rows, columns=self.COLUMNS)

    def write(self, frame: pd.DataFrame, path: Optional[str | Path]) -> Optional[Path]:
        if path is None:
            return None

        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        frame.to_csv(out, index=False)
        logs.info(f"[CrossValidationReportEngine] report written to {out}")
        return out
