from dataclasses import dataclass
from typing import Optional

import numpy as np

from .exceptions import DimensionError
from .utils.logger import get_logger

EPS = 1e-9


@dataclass(frozen=True)
class NormalizationStats:
    """Per-column mean and standard deviation fitted on the training matrix."""
    means: np.ndarray
    stds: np.ndarray

    def __post_init__(self):
        for arr in (self.means, self.stds):
            arr.setflags(write=False)


class Normalizer:
    """Z-score scaling fitted on training data and reapplied elsewhere.

    `fit` computes the statistics and rescales the training matrix in place.
    Any other matrix (validation, production) must go through `transform` or
    `apply` with those same statistics; they are never recomputed from it.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.logger = get_logger(self.__class__.__name__)
        self.stats: Optional[NormalizationStats] = None

    @staticmethod
    def _check_matrix(X: np.ndarray) -> None:
        if not isinstance(X, np.ndarray) or X.ndim != 2:
            raise DimensionError("Expected a 2-D numpy array")
        if not np.issubdtype(X.dtype, np.floating):
            raise TypeError(f"In-place scaling needs a float array, got {X.dtype}")

    def fit(self, X: np.ndarray) -> NormalizationStats:
        """Fit mean/std (sample std, n-1, plus EPS) and scale X in place."""
        self._check_matrix(X)
        n = X.shape[0]
        if n < 2:
            raise ValueError(f"Need at least two rows to fit a sample std, got {n}")

        means = X.mean(axis=0)
        stds = np.sqrt(((X - means) ** 2).sum(axis=0) / (n - 1)) + EPS

        self.stats = NormalizationStats(means=means, stds=stds)
        self.apply(X, self.stats.means, self.stats.stds)

        if self.verbose:
            self.logger.info(f"Fitted normalization on {n:,} rows x {X.shape[1]} columns")
        return self.stats

    def transform(self, X: np.ndarray) -> np.ndarray:
        if self.stats is None:
            raise RuntimeError("Call fit() before transform().")
        return self.apply(X, self.stats.means, self.stats.stds)

    @staticmethod
    def apply(X: np.ndarray, means: np.ndarray, stds: np.ndarray) -> np.ndarray:
        """Scale X in place with previously fitted statistics and return it."""
        Normalizer._check_matrix(X)
        if X.shape[1] != len(means) or len(means) != len(stds):
            raise DimensionError(
                f"Matrix has {X.shape[1]} columns but statistics cover "
                f"{len(means)} means / {len(stds)} stds"
            )
        X -= means
        X /= stds
        return X
