import numpy as np
import pytest

from arowcv.dataloader.dataset import Dataset
from arowcv.utils.errors import DimensionMismatchError


@pytest.fixture
def labeled() -> Dataset:
    return Dataset(records=[[1.0, 0.2, 0.3, 1.0], [1.0, -0.2, -0.3, -1.0]])


def test_labeled_views(labeled):
    assert len(labeled) == 2
    assert labeled.feature_dimension == 3
    assert np.array_equal(labeled.features(3)[0], [1.0, 0.2, 0.3])
    assert np.array_equal(labeled.labels(), [1.0, -1.0])


def test_unlabeled_uses_default_label():
    ds = Dataset(records=[[0.5, 0.5], [1.0, 2.0]], no_label=True, default_label=-1.0)

    assert ds.feature_dimension == 2
    assert np.array_equal(ds.labels(), [-1.0, -1.0])
    assert ds.label_of(ds.records[0]) == -1.0


def test_records_are_read_only(labeled):
    with pytest.raises(ValueError):
        labeled.records[0, 0] = 9.0


def test_take_returns_new_order_without_touching_source(labeled):
    swapped = labeled.take([1, 0])

    assert np.array_equal(swapped.labels(), [-1.0, 1.0])
    assert np.array_equal(labeled.labels(), [1.0, -1.0])


def test_caller_array_is_not_aliased():
    raw = np.array([[1.0, 1.0], [2.0, -1.0]])
    ds = Dataset(records=raw)
    raw[0, 0] = 99.0

    assert ds.records[0, 0] == 1.0
    assert raw.flags.writeable


def test_concat_preserves_order(labeled):
    joined = Dataset.concat([labeled, labeled.take([1])])
    assert np.array_equal(joined.labels(), [1.0, -1.0, -1.0])


def test_concat_rejects_width_mismatch(labeled):
    other = Dataset(records=[[1.0, 1.0]])
    with pytest.raises(DimensionMismatchError):
        Dataset.concat([labeled, other])


def test_feature_dimension_mismatch(labeled):
    with pytest.raises(DimensionMismatchError):
        labeled.features(4)


def test_records_must_be_2d():
    with pytest.raises(DimensionMismatchError):
        Dataset(records=[1.0, 2.0])
