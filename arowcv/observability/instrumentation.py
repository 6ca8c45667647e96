#!filepath: arowcv/observability/instrumentation.py
from __future__ import annotations

from dataclasses import dataclass
from contextlib import contextmanager
from collections import OrderedDict
from typing import Dict

from arowcv.observability.progress import ProgressReporter
from arowcv.observability.timer import Timer
from arowcv.observability.metrics import MetricRecorder
from arowcv.observability.timeline_reporter import TimelineReporter


@dataclass
class Instrumentation:
    """
    Instrumentation (leaf-only accounting + parent scope).

    Rules:
    1. The timeline records leaf timers only (record=True)
    2. Step / parent timers only bound wall time (record=False)
    3. record=False timers have no side effects
    4. No logging on the hot path
    """

    enabled: bool = True

    def __post_init__(self):
        self.progress = ProgressReporter(enabled=self.enabled)
        self._timer = Timer(enabled=self.enabled)
        self.metrics = MetricRecorder(enabled=self.enabled)

        # timeline: OrderedDict[leaf_name, elapsed_seconds]
        self.timeline: Dict[str, float] = OrderedDict()

    def timer(self, name: str, *, record: bool = True):
        """
        Context-manager timer.

        record=True  : leaf, written to the timeline
        record=False : parent scope, wall time only
        """
        inst = self

        @contextmanager
        def _ctx():
            if not inst.enabled:
                yield
                return

            inst._timer.start(name)
            try:
                yield
            finally:
                elapsed = inst._timer.end(name)
                if record:
                    inst.timeline[name] = inst.timeline.get(name, 0.0) + elapsed

        return _ctx()

    def generate_timeline_report(self, run_id: str):
        TimelineReporter(self.timeline, run_id).print()


class NoOpInstrumentation:
    """Used when observability is disabled."""

    def timer(self, name: str, *, record: bool = True):
        return _NoOpTimer()


class _NoOpTimer:
    def __enter__(self):
        pass

    def __exit__(self, exc_type, exc, tb):
        pass
