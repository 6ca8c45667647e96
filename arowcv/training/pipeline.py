# arowcv/training/pipeline.py
from __future__ import annotations

import uuid
from typing import List, Optional

import numpy as np

from arowcv import logs
from arowcv.config.app_config import AppConfig
from arowcv.dataloader.dataset import Dataset
from arowcv.observability.instrumentation import Instrumentation
from arowcv.pipeline.step import PipelineStep
from arowcv.training.context import CrossValidationContext, FoldResult
from arowcv.training.cv_result import CrossValidationResult
from arowcv.training.engines.fold_split_engine import FoldSplitEngine


class CrossValidationPipeline:
    """
    CrossValidationPipeline

    Semantics:
    - Pipeline owns the dataset-level shuffle and the fold iteration
    - Held-out index runs fold-1 .. 0
    - Fold steps execute semantics (build / train / evaluate)
    - Pipeline collects per-fold errors and returns their mean
    """

    def __init__(
            self,
            *,
            fold_steps: List[PipelineStep],
            final_steps: List[PipelineStep],
            split_engine: FoldSplitEngine,
            inst: Instrumentation,
            cfg: AppConfig,
            rng: np.random.Generator,
    ):
        self.fold_steps = fold_steps
        self.final_steps = final_steps
        self.split_engine = split_engine
        self.inst = inst
        self.cfg = cfg
        self.rng = rng

    @logs.catch(msg="cross validation failed", log_time=False)
    def run(self, dataset: Dataset, run_id: Optional[str] = None) -> CrossValidationResult:
        run_id = run_id or uuid.uuid4().hex[:12]
        n_folds = self.split_engine.n_folds

        logs.info(
            f"[CrossValidationPipeline] START run_id={run_id} "
            f"instances={len(dataset)} fold={n_folds} "
            f"epoch={self.cfg.training.epoch} r={self.cfg.training.hyper_parameter}"
        )

        self.split_engine.validate(dataset)

        ctx = CrossValidationContext(
            run_id=run_id,
            cfg=self.cfg,
            inst=self.inst,
            rng=self.rng,
            feature_dimension=dataset.feature_dimension,
        )

        # working copy; the caller's dataset keeps its order
        ctx.dataset = self.split_engine.shuffle(dataset, self.rng)
        ctx.folds = self.split_engine.split(ctx.dataset)

        self.inst.progress.start("cross-validation", n_folds, "folds")

        total_error = 0.0
        for index in range(n_folds):
            ctx.fold_index = n_folds - 1 - index

            with self.inst.timer(f"fold{ctx.fold_index}"):
                for step in self.fold_steps:
                    ctx = step.run(ctx)

            result = self._collect(ctx)
            ctx.fold_results.append(result)
            total_error += result.error

            logs.info(
                f"[Fold {result.fold_index}] the {index}th validation "
                f"error={result.error:.6f} ({result.misclassified}/{result.test_size})"
            )
            self.inst.progress.update(
                "cross-validation", index + 1, n_folds, "folds",
                detail=f"fold{result.fold_index} error={result.error:.4f}",
            )

        average_error = total_error / n_folds
        ctx.metrics["avg_error"] = average_error
        self.inst.metrics.record("avg_error", average_error)

        fold_errors = self.inst.metrics.per_fold("error")
        if fold_errors:
            logs.info(
                f"[CrossValidationPipeline] fold error "
                f"min={min(fold_errors.values()):.6f} max={max(fold_errors.values()):.6f}"
            )

        for step in self.final_steps:
            ctx = step.run(ctx)

        self.inst.progress.done("cross-validation")
        logs.info(
            f"[CrossValidationPipeline] DONE run_id={run_id} "
            f"the error of the algorithm : {average_error:.6f}"
        )

        return CrossValidationResult(
            run_id=run_id,
            average_error=average_error,
            folds=list(ctx.fold_results),
        )

    def _collect(self, ctx: CrossValidationContext) -> FoldResult:
        i = ctx.fold_index
        error = ctx.metrics[f"error@fold{i}"]

        self.inst.metrics.record(f"error@fold{i}", error)

        return FoldResult(
            fold_index=i,
            train_size=len(ctx.train_set),
            test_size=len(ctx.test_set),
            misclassified=int(ctx.metrics[f"misclassified@fold{i}"]),
            error=float(error),
            weight=ctx.model_state.weight,
            elapsed=self.inst.timeline.get(f"fold{i}", 0.0),
        )
