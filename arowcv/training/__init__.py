"""
Training Doctrine

One paradigm only: offline k-fold cross-validation of an ONLINE learner.

------------------------------------------------------------
Semantics
------------------------------------------------------------
- TrainingUnit = Fold
- Model        = AROW (per-instance update, fixed epoch count)
- State        = weight vector + covariance, born and discarded per fold

- Each fold trains from scratch: w = 0, Σ = I.
- Nothing is carried between folds and nothing is persisted.
- All randomness (dataset shuffle, per-epoch shuffle) flows from ONE
  numpy Generator owned by the run, used strictly sequentially.

------------------------------------------------------------
Non-goals
------------------------------------------------------------
- Model persistence / serving
- Multi-class classification
- Parallel or distributed training
"""
