#!filepath: arowcv/observability/metrics.py
import re
from dataclasses import dataclass, field
from typing import Any, Dict

from arowcv import logs

_FOLD_KEY = re.compile(r"^(?P<name>.+)@fold(?P<fold>\d+)$")


@dataclass
class MetricRecorder:
    """Run-level metrics. Per-fold values use the key form name@fold{i}."""

    enabled: bool = True
    metrics: Dict[str, Any] = field(default_factory=dict)

    def record(self, name: str, value: Any):
        if not self.enabled:
            return
        self.metrics[name] = value
        logs.debug(f"[Metric] {name} = {value}")

    def per_fold(self, name: str) -> Dict[int, Any]:
        """
        {fold_index: value} for every name@fold{i} recorded, by fold index.
        """
        out = {}
        for key, value in self.metrics.items():
            m = _FOLD_KEY.match(key)
            if m and m.group("name") == name:
                out[int(m.group("fold"))] = value
        return dict(sorted(out.items()))
