# arowcv/training/steps/model_train_step.py
from __future__ import annotations

from arowcv import logs
from arowcv.pipeline.step import PipelineStep
from arowcv.training.context import CrossValidationContext
from arowcv.training.engines.model_train_engine import ModelTrainEngine


class ModelTrainStep(PipelineStep):
    """
    ModelTrainStep

    Contract:
    - consumes ctx.train_set / ctx.feature_dimension
    - produces ctx.model_state (fresh per fold, never carried over)
    """

    def __init__(self, engine: ModelTrainEngine, inst=None):
        super().__init__(inst)
        self.engine = engine

    def run(self, ctx: CrossValidationContext) -> CrossValidationContext:
        with self.inst.timer(f"train@fold{ctx.fold_index}"):
            state = self.engine.train_state(ctx.train_set, ctx.feature_dimension)

        logs.info(
            f"[Fold {ctx.fold_index}] trained updates={state.updates} "
            f"zero_steps={state.skipped}"
        )

        ctx.model_state = state
        return ctx
