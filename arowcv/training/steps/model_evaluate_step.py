# arowcv/training/steps/model_evaluate_step.py
from __future__ import annotations

from arowcv.pipeline.step import PipelineStep
from arowcv.training.context import CrossValidationContext
from arowcv.training.engines.misclassification_evaluate_engine import (
    MisclassificationEvaluateEngine,
)


class ModelEvaluateStep(PipelineStep):
    """
    Held-out misclassification rate for the current fold.

    Writes ctx.metrics["misclassified@fold{i}"] and ctx.metrics["error@fold{i}"].
    """

    def __init__(self, engine: MisclassificationEvaluateEngine | None = None, inst=None):
        super().__init__(inst)
        self.engine = engine or MisclassificationEvaluateEngine()

    def run(self, ctx: CrossValidationContext) -> CrossValidationContext:
        i = ctx.fold_index

        with self.inst.timer(f"evaluate@fold{i}"):
            errors, error = self.engine.score(
                ctx.model_state.weight, ctx.test_set, ctx.feature_dimension
            )

        ctx.metrics[f"misclassified@fold{i}"] = errors
        ctx.metrics[f"error@fold{i}"] = error
        return ctx
