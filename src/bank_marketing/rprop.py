"""
Resilient backpropagation (RProp) for `Network`.

Each parameter keeps its own update step. Only the sign of the gradient is
used: the step grows while consecutive gradients agree, shrinks when the
sign flips, and the parameter moves by -sign(gradient) * step.

On a sign flip the move is skipped for that epoch and the stored gradient
is reset to zero, so the following epoch updates with the shrunken step
without adapting it again.
"""

from typing import List, Sequence

import numpy as np

from .network import Network


class ResilientBackpropagation:
    """Full-batch RProp learning rule.

    Args:
        network: Network whose parameters are updated in place.
        initial_step: Starting step for every parameter.
        eta_plus: Step growth factor when the gradient keeps its sign.
        eta_minus: Step shrink factor when the gradient flips sign.
        delta_max: Upper bound for a step.
        delta_min: Lower bound for a step.
    """
    def __init__(
        self,
        network: Network,
        initial_step: float = 0.1,
        eta_plus: float = 1.2,
        eta_minus: float = 0.5,
        delta_max: float = 50.0,
        delta_min: float = 1e-6,
    ) -> None:
        self.network = network
        self.initial_step = initial_step
        self.eta_plus = eta_plus
        self.eta_minus = eta_minus
        self.delta_max = delta_max
        self.delta_min = delta_min

        params = network.parameters()
        self.steps: List[np.ndarray] = [np.full_like(p, initial_step) for p in params]
        self.previous_gradients: List[np.ndarray] = [np.zeros_like(p) for p in params]

    def apply_gradients(self, gradients: Sequence[np.ndarray]) -> None:
        """Update steps and parameters from one epoch's gradients."""
        params = self.network.parameters()
        if len(gradients) != len(params):
            raise ValueError(f"Expected {len(params)} gradient arrays, got {len(gradients)}")

        for param, grad, step, prev in zip(params, gradients, self.steps, self.previous_gradients):
            agreement = prev * grad
            same = agreement > 0
            flipped = agreement < 0

            step[same] = np.minimum(step[same] * self.eta_plus, self.delta_max)
            step[flipped] = np.maximum(step[flipped] * self.eta_minus, self.delta_min)

            effective = np.where(flipped, 0.0, grad)
            param -= np.sign(effective) * step
            prev[...] = effective

    def run_epoch(self, X: np.ndarray, Y: np.ndarray) -> float:
        """One pass over the whole training set; returns the mean error."""
        error, gradients = self.network.gradients(X, Y)
        self.apply_gradients(gradients)
        return error
