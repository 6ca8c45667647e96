#!filepath: tests/observability/test_progress.py

from loguru import logger

from arowcv.observability.progress import ProgressReporter


def test_progress_logs_each_stage():
    captured = []
    sink_id = logger.add(lambda msg: captured.append(str(msg)))

    p = ProgressReporter(enabled=True)
    p.start("cross-validation", 5, "folds")
    p.update("cross-validation", 2, 5, "folds")
    p.done("cross-validation")

    logger.remove(sink_id)
    output = "\n".join(captured)

    assert "cross-validation started total=5 folds" in output
    assert "cross-validation: 2/5 folds (40%)" in output
    assert "cross-validation done" in output


def test_progress_disabled():
    captured = []
    sink_id = logger.add(lambda msg: captured.append(str(msg)))

    p = ProgressReporter(enabled=False)
    p.start("Task", 10)
    p.update("Task", 3, 10)
    p.done("Task")

    logger.remove(sink_id)
    assert captured == []


def test_progress_detail_is_appended():
    captured = []
    sink_id = logger.add(lambda msg: captured.append(str(msg)))

    ProgressReporter(enabled=True).update(
        "cross-validation", 1, 4, "folds", detail="fold3 error=0.0500"
    )

    logger.remove(sink_id)
    assert "1/4 folds (25%) fold3 error=0.0500" in "\n".join(captured)
