from .balancer import Balancer
from .config import Config
from .data_loader import DataLoader
from .evaluator import EvaluationReport, Evaluator
from .feature_builder import FeatureBuilder
from .model_trainer import ModelTrainer
from .network import Network
from .normalizer import Normalizer
from .rprop import ResilientBackpropagation
from .threshold_analyzer import ThresholdAnalyzer
from .utils.logger import get_logger


class PipelineRunner:
    """End-to-end bank marketing subscription pipeline.

    Steps:
      1. Load the training file and build feature vectors
      2. Replicate positive rows (training set only)
      3. Fit z-score normalization on the training matrix
      4. Load the validation file and apply the training statistics
      5. Train the 16-8-1 sigmoid network with RProp
      6. Evaluate on the validation set at the decision threshold
      7. Optionally sweep thresholds for precision/recall trade-offs"""

    def __init__(self, config_path: str):
        self.config = Config.from_yaml(config_path)
        self.logger = get_logger(self.__class__.__name__)

    def run(self) -> EvaluationReport:
        cfg = self.config
        self.logger.info("Starting bank marketing training pipeline")

        builder = FeatureBuilder()
        # only the training file is sampled; the held-out set is always scored in full
        train_X, train_Y = DataLoader(cfg.data["path_train"], cfg.data.get("sample_size")).load_xy(builder)

        balancer = Balancer(
            strategy=cfg.preprocessing.get("balance_strategy", "replicate"),
            factor=cfg.preprocessing.get("oversample_factor", 5),
        )
        train_X, train_Y = balancer.balance(train_X, train_Y)

        normalizer = Normalizer(verbose=True)
        normalizer.fit(train_X)

        valid_X, valid_Y = DataLoader(cfg.data["path_valid"]).load_xy(builder)
        normalizer.transform(valid_X)

        network = Network(train_X.shape[1], seed=cfg.model.get("seed", 42))
        self.logger.info(f"Network layers: {network.layer_sizes}")

        tcfg = cfg.training
        learning = ResilientBackpropagation(
            network,
            initial_step=tcfg.get("initial_step", 0.1),
            eta_plus=tcfg.get("eta_plus", 1.2),
            eta_minus=tcfg.get("eta_minus", 0.5),
            delta_max=tcfg.get("delta_max", 50.0),
            delta_min=tcfg.get("delta_min", 1e-6),
        )
        trainer = ModelTrainer(
            learning,
            target_error=tcfg.get("target_error", 0.01),
            max_epochs=tcfg.get("max_epochs", 4000),
            log_every=tcfg.get("log_every", 50),
        )
        trainer.train(train_X, train_Y)

        self.logger.info("Metrics on validation set (held out)")
        evaluator = Evaluator(threshold=cfg.evaluation.get("threshold", 0.30))
        report = evaluator.evaluate(network, valid_X, valid_Y)

        if cfg.evaluation.get("analyze_thresholds", False):
            ThresholdAnalyzer().run(valid_Y, network.forward(valid_X))

        self.logger.info("Pipeline finished")
        return report
