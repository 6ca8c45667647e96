#!filepath: arowcv/observability/timeline_reporter.py
import re
from collections import OrderedDict
from typing import Dict

from arowcv import logs

_FOLD_SUFFIX = re.compile(r"@fold(\d+)$")


class TimelineReporter:
    """
    Run timeline: leaf timer name -> seconds.

    Leaves named phase@fold{i} (train / evaluate) are also rolled up per
    fold, so the slowest fold stands out in the log.
    """

    def __init__(self, timeline: Dict[str, float], run_id: str):
        self.timeline = timeline
        self.run_id = run_id

    def by_fold(self) -> Dict[int, float]:
        folds: Dict[int, float] = OrderedDict()
        for name, sec in self.timeline.items():
            m = _FOLD_SUFFIX.search(str(name))
            if m:
                fold = int(m.group(1))
                folds[fold] = folds.get(fold, 0.0) + sec
        return folds

    def total(self) -> float:
        # fold{i} wall times already contain their train/evaluate leaves
        return sum(
            sec for name, sec in self.timeline.items()
            if not _FOLD_SUFFIX.search(str(name))
        )

    def print(self):
        logs.info(f"[Timeline] ===== timeline for run {self.run_id} =====")

        for name, sec in self.timeline.items():
            logs.info(f"[Timeline] {str(name):<30} {sec:>8.3f}s")

        folds = self.by_fold()
        if folds:
            slowest = max(folds, key=folds.get)
            logs.info(
                f"[Timeline] slowest fold {slowest}: {folds[slowest]:.3f}s "
                f"(train + evaluate)"
            )

        logs.info(f"[Timeline] Total{'':<27} {self.total():>8.3f}s")
        logs.info("[Timeline] ===========================================")
