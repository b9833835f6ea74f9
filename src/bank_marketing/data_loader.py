import warnings
from typing import Optional

import numpy as np
import pandas as pd

from . import schema
from .feature_builder import FeatureBuilder
from .utils.logger import get_logger


class DataLoader:
    """Loads a semicolon-delimited bank marketing file and optionally samples rows.

    The header line is discarded; columns are addressed by position and every
    value is kept as a string until the FeatureBuilder parses it. Fields past
    the 17th (e.g. a trailing `;`) are ignored and the affected rows are
    counted in a warning; rows with missing fields are dropped.
    """

    def __init__(self, path: str, sample_size: Optional[int] = None):
        self.path = path
        self.sample_size = sample_size
        self.logger = get_logger(self.__class__.__name__)

    def load(self) -> pd.DataFrame:
        # one spare column shows which rows carried extra fields
        with warnings.catch_warnings():
            warnings.filterwarnings("ignore", category=pd.errors.ParserWarning)
            df = pd.read_csv(
                self.path,
                sep=FeatureBuilder.DELIMITER,
                header=None,
                skiprows=1,
                names=list(range(schema.RECORD_WIDTH + 1)),
                index_col=False,
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
                on_bad_lines="skip",
            )

        extra = df[schema.RECORD_WIDTH].notna()
        if extra.any():
            self.logger.warning(
                f"Ignoring fields past column {schema.RECORD_WIDTH} in "
                f"{int(extra.sum()):,} rows from {self.path}"
            )
        df = df.drop(columns=[schema.RECORD_WIDTH]).replace('"', "", regex=True)

        malformed = df.isna().any(axis=1)
        if malformed.any():
            self.logger.warning(f"Dropping {int(malformed.sum()):,} malformed rows from {self.path}")
            df = df.loc[~malformed].reset_index(drop=True)

        if self.sample_size:
            df = df.sample(min(self.sample_size, len(df)), random_state=42)
        return df

    def load_xy(self, builder: Optional[FeatureBuilder] = None) -> tuple[np.ndarray, np.ndarray]:
        """Load the file and return its (features, labels) matrices."""
        builder = builder or FeatureBuilder()
        X, Y = builder.transform(self.load())
        self.logger.info(f"Loaded {self.path}: {X.shape[0]:,} rows x {X.shape[1]} features")
        return X, Y
