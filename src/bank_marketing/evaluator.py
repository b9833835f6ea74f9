from dataclasses import dataclass

import numpy as np
from sklearn.metrics import confusion_matrix

from .network import Network
from .utils.logger import get_logger

EPS = 1e-9


@dataclass(frozen=True)
class ClassificationMetrics:
    accuracy: float
    precision: float
    recall: float
    f1: float

    @classmethod
    def from_confusion_matrix(cls, cm: np.ndarray) -> "ClassificationMetrics":
        """Derive metrics from a 2x2 matrix indexed [expected][predicted].

        Denominators carry EPS so an absent class gives 0.0, not NaN.
        """
        tn, fp, fn, tp = (float(v) for v in np.asarray(cm).ravel())
        total = tn + fp + fn + tp

        accuracy = (tn + tp) / total if total else 0.0
        precision = tp / (tp + fp + EPS)
        recall = tp / (tp + fn + EPS)
        f1 = 2 * precision * recall / (precision + recall + EPS)
        return cls(accuracy=accuracy, precision=precision, recall=recall, f1=f1)


@dataclass(frozen=True)
class EvaluationReport:
    matrix: np.ndarray
    metrics: ClassificationMetrics
    threshold: float

    def format(self) -> str:
        m = self.matrix
        return "\n".join(
            [
                "Confusion matrix:",
                "          Pred 0  Pred 1",
                f"Exp 0  {m[0][0]:7d} {m[0][1]:7d}",
                f"Exp 1  {m[1][0]:7d} {m[1][1]:7d}",
                "",
                f"Accuracy : {self.metrics.accuracy:.4f}",
                f"Precision: {self.metrics.precision:.4f}",
                f"Recall   : {self.metrics.recall:.4f}",
                f"F1 Score : {self.metrics.f1:.4f}",
            ]
        )


class Evaluator:
    """Evaluate a trained network at a fixed decision threshold.

    The default threshold of 0.30 sits below 0.5 on purpose: it labels more
    clients as likely subscribers, trading precision for recall.
    """

    def __init__(self, threshold: float = 0.30, verbose: bool = True):
        self.threshold = threshold
        self.verbose = verbose
        self.logger = get_logger(self.__class__.__name__)

    def predict(self, network: Network, X: np.ndarray) -> np.ndarray:
        """Positive (1) when the network output is strictly above the threshold."""
        proba = network.forward(X).ravel()
        return (proba > self.threshold).astype(int)

    def confusion_matrix(self, network: Network, X: np.ndarray, Y: np.ndarray) -> np.ndarray:
        y_true = np.asarray(Y).ravel().astype(int)
        y_pred = self.predict(network, X)
        return confusion_matrix(y_true, y_pred, labels=[0, 1])

    def evaluate(self, network: Network, X: np.ndarray, Y: np.ndarray) -> EvaluationReport:
        if len(X) == 0:
            raise ValueError("Cannot evaluate on an empty dataset")

        cm = self.confusion_matrix(network, X, Y)
        report = EvaluationReport(
            matrix=cm,
            metrics=ClassificationMetrics.from_confusion_matrix(cm),
            threshold=self.threshold,
        )

        if self.verbose:
            self.logger.info(f"Metrics at threshold {self.threshold:.2f}:\n{report.format()}")

        return report
