from typing import Literal, Tuple

import numpy as np

from .utils.logger import get_logger


class Balancer:
    """
    Handles class imbalance by replicating every positive row `factor` times.

    Only the training set is balanced; evaluation sets keep their class prior.

    Example:
        balancer = Balancer(strategy="replicate", factor=5)
        Xb, Yb = balancer.balance(X, Y)
    """

    def __init__(
        self,
        strategy: Literal["none", "replicate"] = "replicate",
        factor: int = 5,
    ):
        if strategy not in ("none", "replicate"):
            raise ValueError(f"Unknown balancing strategy: {strategy}")
        if factor < 0:
            raise ValueError(f"Oversampling factor must be non-negative, got {factor}")
        self.strategy = strategy
        self.factor = int(factor)
        self.logger = get_logger(self.__class__.__name__)

    def balance(self, X: np.ndarray, Y: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        if self.strategy == "none" or self.factor == 0:
            return X, Y

        X = np.asarray(X, dtype=float)
        Y = np.asarray(Y, dtype=float).reshape(-1, 1)

        pos_mask = Y[:, 0] == 1.0
        n_pos = int(pos_mask.sum())
        n_neg = len(Y) - n_pos

        if n_pos == 0 or n_neg == 0:
            self.logger.info("Only one class present. Skipping balancing.")
            return X, Y

        # fancy indexing + tile always allocate, so copies never alias X
        X_pos_up = np.tile(X[pos_mask], (self.factor, 1))
        Y_pos_up = np.ones((n_pos * self.factor, 1))

        X_bal = np.vstack((X, X_pos_up))
        Y_bal = np.vstack((Y, Y_pos_up))

        self.logger.info(
            f"Replicated {n_pos:,} positive rows x{self.factor}: "
            f"{len(Y):,} -> {len(Y_bal):,} rows"
        )
        return X_bal, Y_bal
