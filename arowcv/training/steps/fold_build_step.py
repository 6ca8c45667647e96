# arowcv/training/steps/fold_build_step.py
from __future__ import annotations

from arowcv import logs
from arowcv.pipeline.step import PipelineStep
from arowcv.training.context import CrossValidationContext
from arowcv.training.engines.fold_split_engine import FoldSplitEngine


class FoldBuildStep(PipelineStep):
    """
    FoldBuildStep

    Contract:
    - consumes ctx.folds / ctx.fold_index
    - produces ctx.train_set / ctx.test_set
    """

    def __init__(self, engine: FoldSplitEngine, inst=None):
        super().__init__(inst)
        self.engine = engine

    def run(self, ctx: CrossValidationContext) -> CrossValidationContext:
        train, test = self.engine.build_train_test(ctx.folds, ctx.fold_index)

        logs.info(f"[Fold {ctx.fold_index}] no of training data instances : {len(train)}")
        logs.info(f"[Fold {ctx.fold_index}] no of testing data instances : {len(test)}")

        ctx.train_set = train
        ctx.test_set = test
        return ctx
