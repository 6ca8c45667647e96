#!filepath: arowcv/observability/progress.py
from arowcv import logs


class ProgressReporter:
    """
    Log-only progress (no tty widgets, safe under pytest / CI).

    update() takes an optional detail, e.g. the fold just finished and
    its error, appended to the counter line.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def start(self, task: str, total: int, unit: str = ""):
        if not self.enabled:
            return
        logs.info(f"[Progress] {task} started total={total} {unit}".rstrip())

    def update(self, task: str, current: int, total: int, unit: str = "", detail: str = ""):
        if not self.enabled:
            return
        pct = 100.0 * current / total if total else 100.0
        line = f"[Progress] {task}: {current}/{total} {unit}".rstrip()
        line += f" ({pct:.0f}%)"
        if detail:
            line += f" {detail}"
        logs.info(line)

    def done(self, task: str):
        if not self.enabled:
            return
        logs.info(f"[Progress] {task} done")
