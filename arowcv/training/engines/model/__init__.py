#!filepath: arowcv/training/engines/model/__init__.py
"""
Concrete ModelTrainEngine implementations.
"""

from .arow_train_engine import AROWTrainEngine, UpdateOutcome

__all__ = [
    "AROWTrainEngine",
    "UpdateOutcome",
]
