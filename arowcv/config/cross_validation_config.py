# arowcv/config/cross_validation_config.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class CrossValidationConfig(BaseModel):
    fold: int = Field(default=10, ge=2)
    seed: Optional[int] = None
    report_path: Optional[str] = None
