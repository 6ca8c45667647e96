from .dataset import Dataset
from .dataset_reader import DatasetReader

__all__ = ["Dataset", "DatasetReader"]
