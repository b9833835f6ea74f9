from typing import Sequence

import numpy as np


def one_hot(value: str, categories: Sequence[str]) -> np.ndarray:
    """Encode `value` as an indicator vector over `categories`.

    Unknown values yield an all-zero vector of the same length, so records
    carrying categories unseen at training time still encode.
    """
    vec = np.zeros(len(categories), dtype=float)
    if value in categories:
        vec[list(categories).index(value)] = 1.0
    return vec
