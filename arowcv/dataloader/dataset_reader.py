#!filepath: arowcv/dataloader/dataset_reader.py
from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd

from arowcv import logs
from arowcv.dataloader.dataset import Dataset
from arowcv.utils.errors import DatasetReadError


class DatasetReader:
    """
    Delimited text -> Dataset

    Record layout after reading (one row per non-blank line):
        [1.0 (bias, optional), features..., label (unless no_label)]

    - reverse=True  : label is the FIRST field of a line, moved to the end
    - reverse=False : label is the LAST field of a line
    - no_label=True : every field is a feature, reverse is ignored

    Malformed lines (non-numeric / non-finite fields, or a field count
    different from the most common one, ties going to the earliest line)
    are logged with their line number. Trailing empty fields are dropped
    first, so "1,0.2,0.3," is a three-field record.
    By default the whole load then fails with DatasetReadError; with
    skip_malformed=True they are dropped instead.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    @logs.catch(msg="dataset load failed", log_time=False)
    def read(
        self,
        separator: str = ",",
        reverse: bool = False,
        no_label: bool = False,
        bias_feature: bool = False,
        default_label: float = 1.0,
        skip_malformed: bool = False,
    ) -> Dataset:
        if not self.path.is_file():
            raise FileNotFoundError(f"Data file not found: {self.path}")

        values = self._parse(separator, skip_malformed)

        if no_label or not reverse:
            records = values
        else:
            # label first -> label last
            records = np.hstack([values[:, 1:], values[:, :1]])

        if bias_feature:
            bias = np.ones((records.shape[0], 1), dtype=np.float64)
            records = np.hstack([bias, records])

        dataset = Dataset(
            records=records,
            no_label=no_label,
            default_label=default_label,
        )

        logs.info(
            f"[DatasetReader] the number of records : {len(dataset)} "
            f"(feature_dimension={dataset.feature_dimension}, file={self.path.name})"
        )
        return dataset

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _parse(self, separator: str, skip_malformed: bool) -> np.ndarray:
        lines = pd.Series(
            self.path.read_text(encoding="utf-8").splitlines(), dtype="string"
        )
        # 1-based line numbers survive filtering
        lines.index = lines.index + 1
        lines = lines.str.strip()
        lines = lines[lines != ""]

        if lines.empty:
            raise DatasetReadError(
                f"No records in data file: {self.path}", path=str(self.path)
            )

        fields = lines.str.split(separator, regex=len(separator) > 1).apply(_clean_fields)
        counts = fields.apply(len)

        # the dominant width wins; a ragged first line must not define it
        nonempty = counts[counts > 0]
        if nonempty.empty:
            raise DatasetReadError(
                f"No valid records in data file: {self.path}", path=str(self.path)
            )
        modes = nonempty.mode()
        expected = int(nonempty[nonempty.isin(modes)].iloc[0])

        frame = pd.DataFrame(fields.tolist(), index=fields.index, dtype=object)
        numeric = frame.reindex(columns=range(expected)).apply(
            lambda col: pd.to_numeric(col, errors="coerce")
        )

        finite = np.isfinite(numeric.to_numpy(dtype=np.float64)).all(axis=1)
        malformed = (~finite) | (counts.to_numpy() != expected)

        if malformed.any():
            bad_index = lines.index[malformed]
            for line_no in bad_index:
                level = logs.warning if skip_malformed else logs.error
                level(
                    f"[DatasetReader] malformed record at {self.path.name}:{line_no}: "
                    f"{lines.loc[line_no]!r}"
                )

            if not skip_malformed:
                first = int(bad_index[0])
                raise DatasetReadError(
                    f"Malformed record at {self.path}:{first}: {lines.loc[first]!r}",
                    path=str(self.path),
                    line_no=first,
                    line=str(lines.loc[first]),
                )

            logs.warning(
                f"[DatasetReader] skipped {int(malformed.sum())} malformed records"
            )

        good = numeric.loc[~malformed]
        if good.empty:
            raise DatasetReadError(
                f"No valid records in data file: {self.path}", path=str(self.path)
            )

        return good.to_numpy(dtype=np.float64)


def _clean_fields(parts) -> list:
    """Strip each field and drop trailing empty ones ("1,0.2,0.3," has 3 fields)."""
    fields = [p.strip() for p in parts]
    while fields and fields[-1] == "":
        fields.pop()
    return fields
