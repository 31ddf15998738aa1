"""
Fluent builder for EstimatorConfig.

The builder provides a readable API for constructing calculation requests.
It produces the same EstimatorConfig structure as YAML/JSON loading would.
"""

from typing import Any, Dict, Optional, Union

from ..core.config import EstimatorConfig
from ..core.types import OperationMode, PrecisionMode
from ..formulas.constants import DEFAULT_BATCH_SIZE, DEFAULT_SEQUENCE_LENGTH
from .validator import validate_config


class EstimatorConfigBuilder:
    """
    Fluent builder for EstimatorConfig.

    Example:
        config = (EstimatorConfigBuilder()
            .for_model("meta-llama/Llama-2-7b-hf")
            .with_precision("bf16")
            .for_training()
            .with_workload(batch=4, seq_len=4096)
            .build())
    """

    def __init__(self):
        """Initialize builder with default config"""
        self._model: Optional[str] = None
        self._precision: Union[PrecisionMode, str] = PrecisionMode.FP16
        self._operation: Union[OperationMode, str] = OperationMode.INFERENCE
        self._batch_size: int = DEFAULT_BATCH_SIZE
        self._seq_len: int = DEFAULT_SEQUENCE_LENGTH
        self._offline: bool = False
        self._architecture: Optional[Dict[str, Any]] = None

    def for_model(self, model: str) -> "EstimatorConfigBuilder":
        """
        Set model identifier.

        Args:
            model: HuggingFace model ID or any model name

        Returns:
            Self for chaining
        """
        self._model = model
        return self

    def with_precision(self, precision: Union[PrecisionMode, str]) -> "EstimatorConfigBuilder":
        self._precision = precision
        return self

    def with_operation(self, operation: Union[OperationMode, str]) -> "EstimatorConfigBuilder":
        self._operation = operation
        return self

    def for_inference(self) -> "EstimatorConfigBuilder":
        return self.with_operation(OperationMode.INFERENCE)

    def for_training(self) -> "EstimatorConfigBuilder":
        return self.with_operation(OperationMode.TRAINING)

    def for_fine_tuning(self) -> "EstimatorConfigBuilder":
        return self.with_operation(OperationMode.FINE_TUNING)

    def with_workload(self, batch: int, seq_len: int) -> "EstimatorConfigBuilder":
        """
        Set workload shape.

        Args:
            batch: Batch size
            seq_len: Sequence length

        Returns:
            Self for chaining
        """
        self._batch_size = batch
        self._seq_len = seq_len
        return self

    def offline(self, enabled: bool = True) -> "EstimatorConfigBuilder":
        """Skip the remote config fetch and rely on known models or heuristics."""
        self._offline = enabled
        return self

    def with_architecture(self, document: Dict[str, Any]) -> "EstimatorConfigBuilder":
        """
        Supply a raw config document (e.g. a local config.json) instead of fetching.

        Args:
            document: Mapping with hidden_size, num_hidden_layers, etc.

        Returns:
            Self for chaining
        """
        self._architecture = dict(document)
        return self

    def build(self) -> EstimatorConfig:
        """
        Build and validate the configuration.

        Raises:
            ValueError: If model not set or config invalid
        """
        if not self._model:
            raise ValueError("Model must be set with for_model()")

        config = EstimatorConfig(
            model=self._model,
            precision=self._precision,
            operation=self._operation,
            batch_size=self._batch_size,
            seq_len=self._seq_len,
            offline=self._offline,
            architecture=self._architecture,
        )
        validate_config(config)
        return config
