import math
from typing import Optional, Sequence

import numpy as np
import pandas as pd

from . import schema
from .encoder import one_hot
from .exceptions import ParseError
from .utils.logger import get_logger


class FeatureBuilder:
    """Turns raw bank marketing records into feature vectors and labels.

    Layout: six numerics, three yes/no flags, then the one-hot blocks for
    job, marital, education, contact, month and poutcome (see `schema`).
    """

    DELIMITER = ";"

    def __init__(self, verbose: bool = True):
        self.verbose = verbose
        self.logger = get_logger(self.__class__.__name__)

    @classmethod
    def parse_line(cls, line: Optional[str]) -> Optional[list[str]]:
        """Split a raw line into unquoted fields; None for blank or short lines."""
        if line is None or not line.strip():
            return None
        fields = [f.replace('"', "") for f in line.rstrip("\r\n").split(cls.DELIMITER)]
        if len(fields) < schema.RECORD_WIDTH:
            return None
        return fields

    @staticmethod
    def _parse_number(fields: Sequence[str], name: str, pos: int) -> float:
        raw = fields[pos]
        try:
            value = float(raw)
        except (TypeError, ValueError) as exc:
            raise ParseError(f"column '{name}' (field {pos}) is not numeric: {raw!r}") from exc
        if not math.isfinite(value):
            raise ParseError(f"column '{name}' (field {pos}) is not finite: {raw!r}")
        return value

    def build(self, fields: Sequence[str]) -> tuple[np.ndarray, float]:
        """Encode one record; raises ParseError on a non-numeric numeric field."""
        numerics = [self._parse_number(fields, name, pos) for name, pos in schema.NUMERIC_FIELDS]
        flags = [1.0 if fields[pos] == "yes" else 0.0 for _, pos in schema.BOOLEAN_FIELDS]

        blocks = [np.array(numerics + flags, dtype=float)]
        for _, pos, categories, lower in schema.CATEGORICAL_FIELDS:
            value = fields[pos].lower() if lower else fields[pos]
            blocks.append(one_hot(value, categories))

        label = 1.0 if fields[schema.TARGET] == schema.POSITIVE_VALUE else 0.0
        return np.concatenate(blocks), label

    def build_line(self, line: Optional[str]) -> Optional[tuple[np.ndarray, float]]:
        fields = self.parse_line(line)
        if fields is None:
            return None
        return self.build(fields)

    def transform(self, df: pd.DataFrame) -> tuple[np.ndarray, np.ndarray]:
        """Build the (n, 47) feature matrix and (n, 1) label matrix.

        Rows with an unparsable numeric field are logged and skipped.
        """
        features: list[np.ndarray] = []
        labels: list[float] = []
        skipped = 0

        for idx, row in enumerate(df.itertuples(index=False, name=None)):
            try:
                x, y = self.build([str(v) for v in row])
            except ParseError as exc:
                skipped += 1
                self.logger.warning(f"Skipping record {idx}: {exc}")
                continue
            features.append(x)
            labels.append(y)

        if skipped and self.verbose:
            self.logger.info(f"Skipped {skipped:,} unparsable records")

        X = np.vstack(features) if features else np.empty((0, schema.N_FEATURES))
        Y = np.array(labels, dtype=float).reshape(-1, 1)
        return X, Y
