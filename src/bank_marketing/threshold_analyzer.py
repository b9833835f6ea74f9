import numpy as np
from sklearn.metrics import confusion_matrix

from .evaluator import ClassificationMetrics
from .utils.logger import get_logger


class ThresholdAnalyzer:
    """Sweep probability thresholds and report precision/recall/F1 trade-offs.

    Diagnostic only: the configured decision threshold is left unchanged.
    """

    def __init__(self, step: float = 0.05, verbose: bool = True):
        self.step = step
        self.verbose = verbose
        self.logger = get_logger(self.__class__.__name__)

    def sweep(self, y_true, y_proba) -> list[tuple[float, ClassificationMetrics]]:
        y_true = np.asarray(y_true).ravel().astype(int)
        y_proba = np.asarray(y_proba).ravel().astype(float)

        rows = []
        for thr in np.arange(0.05, 0.95, self.step):
            y_pred = (y_proba > thr).astype(int)
            cm = confusion_matrix(y_true, y_pred, labels=[0, 1])
            rows.append((float(thr), ClassificationMetrics.from_confusion_matrix(cm)))
        return rows

    def run(self, y_true, y_proba) -> float:
        rows = self.sweep(y_true, y_proba)
        best_thr, best = max(rows, key=lambda row: row[1].f1)

        if self.verbose:
            lines = [
                f"  thr={thr:.2f}  P={m.precision:.3f}  R={m.recall:.3f}  F1={m.f1:.3f}"
                for thr, m in rows
            ]
            self.logger.info("Threshold sweep:\n" + "\n".join(lines))
            self.logger.info(f"Best F1 threshold: {best_thr:.3f} (F1={best.f1:.3f})")

        return best_thr
