# arowcv/utils/errors.py
from __future__ import annotations


class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided config (paths, fold counts, etc).
    Should NOT print traceback.
    """


class ConfigurationError(UserInputError):
    """
    Degenerate run configuration, e.g. more folds than instances.
    """


class DatasetReadError(UserInputError):
    """
    A data file could not be turned into a Dataset.

    Carries the offending location when a specific record is at fault.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        line_no: int | None = None,
        line: str | None = None,
    ):
        super().__init__(message)
        self.path = path
        self.line_no = line_no
        self.line = line


class DimensionMismatchError(ValueError):
    """
    Operands of inconsistent shape. A programming-contract violation,
    never recovered from.
    """
