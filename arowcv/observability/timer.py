#!filepath: arowcv/observability/timer.py
import time
from collections import defaultdict
from typing import Dict


class Timer:
    """
    Named wall-clock laps.

    end(name) returns the lap just closed; totals[name] accumulates every
    lap under that name, so a timer reopened per epoch or per fold sums up.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._open: Dict[str, float] = {}
        self.totals: Dict[str, float] = defaultdict(float)
        self.laps: Dict[str, int] = defaultdict(int)

    def start(self, name: str):
        if not self.enabled:
            return
        self._open[name] = time.perf_counter()

    def end(self, name: str) -> float:
        if not self.enabled or name not in self._open:
            return 0.0

        elapsed = time.perf_counter() - self._open.pop(name)
        self.totals[name] += elapsed
        self.laps[name] += 1
        return elapsed
