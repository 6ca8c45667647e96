from __future__ import annotations

from arowcv.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)


class PipelineStep:
    """
    Pipeline Step base class

    Responsibilities:
      1. orchestration only: move data between the context and one engine
      2. step-level time boundary (parent scope)

    Rules:
      - a Step never enters the timeline itself
      - observability happens inside the Step (leaf timers)
      - Instrumentation is optional; Step behavior never depends on it
    """

    def __init__(self, inst: Instrumentation | None = None):
        self.inst: Instrumentation | NoOpInstrumentation = (
            inst if inst is not None else NoOpInstrumentation()
        )

    @property
    def step_name(self) -> str:
        """Class name by default."""
        return self.__class__.__name__

    def timed(self):
        """
        Step-level wall-time scope (record=False, never in the timeline).
        """
        return self.inst.timer(self.step_name, record=False)

    def run(self, ctx):
        raise NotImplementedError("Subclasses must implement this method.")
