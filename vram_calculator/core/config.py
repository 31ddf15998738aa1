"""
Configuration dataclass for a single VRAM calculation request.

EstimatorConfig is designed to be produced by:
1. Direct construction or EstimatorConfigBuilder (programmatic API)
2. load_yaml_config() / load_json_config() (file-based)
3. The CLI and the Gradio form

They must produce identical structures to avoid divergence.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from .types import OperationMode, PrecisionMode
from ..formulas.constants import DEFAULT_BATCH_SIZE, DEFAULT_SEQUENCE_LENGTH


def clamp_positive_int(value: Any, default: int) -> int:
    """
    Return value as a positive int, or default when it is not one.

    Integral floats and numeric strings are accepted; booleans are not.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return default
    elif isinstance(value, float):
        if not value.is_integer():
            return default
        value = int(value)
    elif not isinstance(value, int):
        return default
    return value if value > 0 else default


@dataclass
class EstimatorConfig:
    """
    Configuration for one VRAM calculation.

    Attributes:
        model: Model identifier (HuggingFace id or any name)
        precision: Numeric precision (enum or string such as "bf16")
        operation: Workload type (enum or string such as "training")
        batch_size: Batch size; non-positive values fall back to 1
        seq_len: Sequence length; non-positive values fall back to 2048
        offline: Skip fetching the remote config document
        architecture: Optional raw config document used instead of a fetch
    """

    # Model
    model: str

    # Precision & workload
    precision: Union[PrecisionMode, str] = PrecisionMode.FP16
    operation: Union[OperationMode, str] = OperationMode.INFERENCE

    # Shape
    batch_size: int = DEFAULT_BATCH_SIZE
    seq_len: int = DEFAULT_SEQUENCE_LENGTH

    # Config source
    offline: bool = False
    architecture: Optional[Dict[str, Any]] = None

    def __post_init__(self):
        """Normalization after initialization"""
        if self.model is None:
            self.model = ""
        if not isinstance(self.model, str):
            raise ValueError(f"model must be a string, got {type(self.model).__name__}")
        self.model = self.model.strip()
        self.precision = PrecisionMode.parse(self.precision)
        self.operation = OperationMode.parse(self.operation)
        self.batch_size = clamp_positive_int(self.batch_size, DEFAULT_BATCH_SIZE)
        self.seq_len = clamp_positive_int(self.seq_len, DEFAULT_SEQUENCE_LENGTH)

    @property
    def tokens_per_step(self) -> int:
        return self.batch_size * self.seq_len
