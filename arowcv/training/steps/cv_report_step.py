# arowcv/training/steps/cv_report_step.py
from __future__ import annotations

from arowcv import logs
from arowcv.pipeline.step import PipelineStep
from arowcv.training.context import CrossValidationContext
from arowcv.training.engines.cv_report_engine import CrossValidationReportEngine


class CrossValidationReportStep(PipelineStep):
    """
    Final step: per-fold table into ctx.metrics["report"], CSV if configured.
    """

    def __init__(self, engine: CrossValidationReportEngine | None = None, inst=None):
        super().__init__(inst)
        self.engine = engine or CrossValidationReportEngine()

    def run(self, ctx: CrossValidationContext) -> CrossValidationContext:
        frame = self.engine.build(ctx.fold_results)

        logs.info(f"[CrossValidationReport] run_id={ctx.run_id}\n{frame.to_string(index=False)}")

        self.engine.write(frame, ctx.cfg.cross_validation.report_path)

        ctx.metrics["report"] = frame
        return ctx
