from dataclasses import dataclass, field
from typing import List

import numpy as np

from .rprop import ResilientBackpropagation
from .utils.logger import get_logger


@dataclass
class TrainingResult:
    """Outcome of a training run."""
    epochs: int
    final_error: float
    converged: bool
    history: List[float] = field(default_factory=list)


class ModelTrainer:
    """
    Runs full-batch epochs until the mean error reaches `target_error`
    or `max_epochs` epochs have run, whichever comes first.

    There is no validation-based early stopping: if the cap is hit the
    network is kept at whatever error it reached.
    """

    def __init__(
        self,
        learning: ResilientBackpropagation,
        target_error: float = 0.01,
        max_epochs: int = 4000,
        log_every: int = 50,
    ):
        if max_epochs < 1:
            raise ValueError(f"max_epochs must be at least 1, got {max_epochs}")
        self.learning = learning
        self.target_error = target_error
        self.max_epochs = max_epochs
        self.log_every = log_every
        self.logger = get_logger(self.__class__.__name__)

    def train(self, X: np.ndarray, Y: np.ndarray) -> TrainingResult:
        history: List[float] = []
        epoch = 0

        while True:
            error = self.learning.run_epoch(X, Y)
            history.append(error)

            if self.log_every and epoch % self.log_every == 0:
                self.logger.info(f"Epoch {epoch}, error: {error:.4f}")

            epoch += 1
            if error <= self.target_error or epoch >= self.max_epochs:
                break

        converged = error <= self.target_error
        if converged:
            self.logger.info(f"Converged after {epoch} epochs (error {error:.4f})")
        else:
            self.logger.info(f"Stopped at epoch cap {epoch} (error {error:.4f})")

        return TrainingResult(epochs=epoch, final_error=error, converged=converged, history=history)
