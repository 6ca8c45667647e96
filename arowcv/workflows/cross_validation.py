# arowcv/workflows/cross_validation.py
from __future__ import annotations

from typing import Optional

import numpy as np

from arowcv import logs
from arowcv.config.app_config import AppConfig
from arowcv.dataloader.dataset import Dataset
from arowcv.dataloader.dataset_reader import DatasetReader
from arowcv.observability.instrumentation import Instrumentation
from arowcv.training.cv_result import CrossValidationResult
from arowcv.training.engines.cv_report_engine import CrossValidationReportEngine
from arowcv.training.engines.fold_split_engine import FoldSplitEngine
from arowcv.training.engines.misclassification_evaluate_engine import (
    MisclassificationEvaluateEngine,
)
from arowcv.training.engines.model.arow_train_engine import AROWTrainEngine
from arowcv.training.pipeline import CrossValidationPipeline
from arowcv.training.steps.cv_report_step import CrossValidationReportStep
from arowcv.training.steps.fold_build_step import FoldBuildStep
from arowcv.training.steps.model_evaluate_step import ModelEvaluateStep
from arowcv.training.steps.model_train_step import ModelTrainStep


def build_cross_validation_pipeline(
    cfg: AppConfig,
    *,
    inst: Optional[Instrumentation] = None,
    rng: Optional[np.random.Generator] = None,
) -> CrossValidationPipeline:
    """
    Wire engines and steps for one AROW cross-validation run.

    The same Generator drives the dataset shuffle and every epoch shuffle.
    """
    inst = inst or Instrumentation(enabled=True)
    rng = rng if rng is not None else np.random.default_rng(cfg.cross_validation.seed)

    split_engine = FoldSplitEngine(cfg.cross_validation.fold)

    fold_steps = [
        FoldBuildStep(split_engine, inst=inst),
        ModelTrainStep(AROWTrainEngine(cfg.training, rng=rng), inst=inst),
        ModelEvaluateStep(MisclassificationEvaluateEngine(), inst=inst),
    ]
    final_steps = [
        CrossValidationReportStep(CrossValidationReportEngine(), inst=inst),
    ]

    return CrossValidationPipeline(
        fold_steps=fold_steps,
        final_steps=final_steps,
        split_engine=split_engine,
        inst=inst,
        cfg=cfg,
        rng=rng,
    )


def load_dataset(cfg: AppConfig) -> Dataset:
    data = cfg.data
    return DatasetReader(data.path).read(
        separator=data.separator,
        reverse=data.reverse,
        no_label=data.no_label,
        bias_feature=data.bias_feature,
        default_label=data.default_label,
        skip_malformed=data.skip_malformed,
    )


def run_cross_validation(
    cfg: AppConfig,
    dataset: Optional[Dataset] = None,
    *,
    run_id: Optional[str] = None,
    inst: Optional[Instrumentation] = None,
) -> CrossValidationResult:
    if dataset is None:
        dataset = load_dataset(cfg)

    inst = inst or Instrumentation(enabled=True)
    pipeline = build_cross_validation_pipeline(cfg, inst=inst)
    result = pipeline.run(dataset, run_id=run_id)

    inst.generate_timeline_report(result.run_id)
    return result


def cross_validation(cfg: AppConfig, dataset: Optional[Dataset] = None) -> float:
    """
    Average held-out error rate in [0, 1].
    """
    result = run_cross_validation(cfg, dataset)
    logs.info(f"the error of the algorithm : {result.average_error}")
    return result.average_error
