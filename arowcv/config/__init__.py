from .app_config import AppConfig
from .log_config import LogConfig
from .data_config import DataConfig
from .training_config import TrainingConfig
from .cross_validation_config import CrossValidationConfig

__all__ = [
    "AppConfig",
    "LogConfig",
    "DataConfig",
    "TrainingConfig",
    "CrossValidationConfig",
]
