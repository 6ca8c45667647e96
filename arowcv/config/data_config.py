#!filepath: arowcv/config/data_config.py
from pydantic import BaseModel


class DataConfig(BaseModel):
    """
    Layout of the delimited-text dataset.

    reverse      label in the first column (True) or the last (False)
    no_label     every column is a feature; default_label is used
    bias_feature prepend a constant 1.0 feature
    """

    path: str = "data/iris-twoclass.csv"
    separator: str = ","
    reverse: bool = True
    no_label: bool = False
    bias_feature: bool = True
    default_label: float = 1.0
    skip_malformed: bool = False
