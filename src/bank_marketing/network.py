"""
Feed-forward sigmoid network with Nguyen-Widrow initialization.

Architecture (fixed):
    [Input] -> Dense(16) -> Sigmoid
            -> Dense(8)  -> Sigmoid
            -> Dense(1)  -> Sigmoid

The single output is read as the probability of the positive class
(the client subscribes). Parameters are owned by the network and only
mutated in place by the learning rule in `rprop`.
"""

from typing import List, Optional, Tuple

import numpy as np

HIDDEN_LAYERS = (16, 8)
OUTPUT_SIZE = 1


def sigmoid(x: np.ndarray) -> np.ndarray:
    """Logistic function 1 / (1 + exp(-x))."""
    # clip to keep exp() finite for very large pre-activations
    return 1.0 / (1.0 + np.exp(-np.clip(x, -500.0, 500.0)))


class DenseLayer:
    """Fully-connected layer with a sigmoid activation.

    Attributes:
        W: weights, shape (input_dim, output_dim)
        b: biases, shape (1, output_dim)
        out: activations cached by the last `forward` call
    """
    def __init__(self, input_dim: int, output_dim: int, rng: np.random.Generator) -> None:
        self.W = np.zeros((input_dim, output_dim))
        self.b = np.zeros((1, output_dim))
        self.out: Optional[np.ndarray] = None
        self.nguyen_widrow(rng)

    @property
    def beta(self) -> float:
        """Target norm 0.7 * width^(1/fan_in) of each neuron's incoming vector."""
        fan_in, width = self.W.shape
        return 0.7 * width ** (1.0 / fan_in)

    def nguyen_widrow(self, rng: np.random.Generator) -> None:
        """Draw U(-0.5, 0.5) weights and rescale every neuron's
        (weights, bias) vector to norm `beta`."""
        W = rng.uniform(-0.5, 0.5, self.W.shape)
        b = rng.uniform(-0.5, 0.5, self.b.shape)
        norms = np.sqrt((W ** 2).sum(axis=0, keepdims=True) + b ** 2)
        self.W[...] = self.beta * W / norms
        self.b[...] = self.beta * b / norms

    def forward(self, x: np.ndarray) -> np.ndarray:
        self.out = sigmoid(x @ self.W + self.b)
        return self.out

    def backward(self, x: np.ndarray, grad_output: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Backprop through sigmoid(x @ W + b).

        Args:
            x: layer input from the forward pass.
            grad_output: dE/d(out) summed over the batch.

        Returns:
            (dW, db, dE/dx)
        """
        delta = grad_output * self.out * (1.0 - self.out)
        dW = x.T @ delta
        db = delta.sum(axis=0, keepdims=True)
        return dW, db, delta @ self.W.T


class Network:
    """Multi-layer perceptron `input_size -> 16 -> 8 -> 1`."""

    def __init__(self, input_size: int, seed: Optional[int] = None) -> None:
        rng = np.random.default_rng(seed)
        sizes = (input_size,) + HIDDEN_LAYERS + (OUTPUT_SIZE,)
        self.layers = [DenseLayer(n_in, n_out, rng) for n_in, n_out in zip(sizes[:-1], sizes[1:])]

    @property
    def layer_sizes(self) -> Tuple[int, ...]:
        return (self.layers[0].W.shape[0],) + tuple(layer.W.shape[1] for layer in self.layers)

    @property
    def input_size(self) -> int:
        return self.layers[0].W.shape[0]

    def forward(self, X: np.ndarray) -> np.ndarray:
        """Return output probabilities, shape (n, 1)."""
        out = np.atleast_2d(np.asarray(X, dtype=float))
        for layer in self.layers:
            out = layer.forward(out)
        return out

    def compute(self, x: np.ndarray) -> np.ndarray:
        """Output vector for a single feature vector."""
        return self.forward(np.asarray(x, dtype=float).reshape(1, -1))[0]

    def parameters(self) -> List[np.ndarray]:
        """Parameter arrays in a fixed order: W1, b1, W2, b2, W3, b3."""
        params: List[np.ndarray] = []
        for layer in self.layers:
            params.extend((layer.W, layer.b))
        return params

    def gradients(self, X: np.ndarray, Y: np.ndarray) -> Tuple[float, List[np.ndarray]]:
        """Full-batch squared-error gradients.

        The error of one sample is 0.5 * sum((output - target)^2). Gradients
        are of the error summed over all samples, aligned with `parameters()`;
        the returned error is the per-sample mean.
        """
        X = np.atleast_2d(np.asarray(X, dtype=float))
        Y = np.asarray(Y, dtype=float).reshape(len(X), -1)

        pred = self.forward(X)
        diff = pred - Y
        error = float(0.5 * np.sum(diff ** 2) / max(len(X), 1))

        grads: List[np.ndarray] = []
        grad_out = diff
        for i in reversed(range(len(self.layers))):
            layer_input = X if i == 0 else self.layers[i - 1].out
            dW, db, grad_out = self.layers[i].backward(layer_input, grad_out)
            grads[:0] = [dW, db]
        return error, grads
