"""
Bank Marketing Subscription — Resilient Backpropagation Classifier

This package trains a small feed-forward sigmoid network on the
semicolon-delimited bank marketing dataset to predict whether a client
subscribes, and evaluates it on a held-out file at a tunable threshold.

Modules:
    schema              — Fixed category tables and record layout.
    encoder             — One-hot encoding over a fixed category list.
    feature_builder     — Parse records into feature vectors and labels.
    data_loader         — Read the delimited file with pandas.
    balancer            — Replicate positive rows in the training set.
    normalizer          — Z-score statistics fitted on training data only.
    network             — 16-8-1 sigmoid MLP with Nguyen-Widrow init.
    rprop               — Resilient backpropagation learning rule.
    model_trainer       — Epoch loop with error target and epoch cap.
    evaluator           — Confusion matrix and accuracy/precision/recall/F1.
    threshold_analyzer  — Sweep thresholds for precision/recall trade-offs.
    config              — Load YAML configuration safely.
    pipeline            — Orchestrates all components.
    utils.logger        — Unified timestamped console logger.
"""

from .config import Config
from .encoder import one_hot
from .exceptions import DimensionError, ParseError
from .feature_builder import FeatureBuilder
from .data_loader import DataLoader
from .balancer import Balancer
from .normalizer import NormalizationStats, Normalizer
from .network import Network
from .rprop import ResilientBackpropagation
from .model_trainer import ModelTrainer, TrainingResult
from .evaluator import ClassificationMetrics, EvaluationReport, Evaluator
from .threshold_analyzer import ThresholdAnalyzer
from .pipeline import PipelineRunner

__all__ = [
    "Config",
    "one_hot",
    "ParseError",
    "DimensionError",
    "FeatureBuilder",
    "DataLoader",
    "Balancer",
    "Normalizer",
    "NormalizationStats",
    "Network",
    "ResilientBackpropagation",
    "ModelTrainer",
    "TrainingResult",
    "Evaluator",
    "ClassificationMetrics",
    "EvaluationReport",
    "ThresholdAnalyzer",
    "PipelineRunner",
]
