#!filepath: arowcv/config/app_config.py
import yaml
from pydantic import BaseModel, Field
from dotenv import load_dotenv
import os

from .log_config import LogConfig
from .data_config import DataConfig
from .training_config import TrainingConfig
from .cross_validation_config import CrossValidationConfig
from arowcv import logs


def project_root() -> str:
    """
    Project root, derived from this file's location:
    arowcv/config/app_config.py -> arowcv/config -> arowcv -> project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    data: DataConfig = Field(default_factory=DataConfig)
    training: TrainingConfig = Field(default_factory=TrainingConfig)
    cross_validation: CrossValidationConfig = Field(
        default_factory=CrossValidationConfig
    )

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        Load YAML config + .env
        - defaults to <project_root>/arowcv/config/base.yml
        - AROWCV_DATA_PATH overrides data.path
        - a relative data.path is resolved against the project root
        """
        root = project_root()

        # 1) .env at the project root
        load_dotenv(os.path.join(root, ".env"))

        # 2) config file
        if path is None:
            path = os.path.join(root, "arowcv/config/base.yml")

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        raw["data"] = raw.get("data") or {}

        env_path = os.getenv("AROWCV_DATA_PATH")
        if env_path:
            logs.debug(f"[AppConfig] data.path overridden by env: {env_path}")
            raw["data"]["path"] = env_path

        cfg = cls(**raw)

        # 4) relative data path -> project root
        if not os.path.isabs(cfg.data.path):
            cfg.data.path = os.path.join(root, cfg.data.path)

        return cfg
