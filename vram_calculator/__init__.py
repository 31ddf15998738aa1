"""
VRAM Calculator - GPU Memory Estimation for Transformer Models

This package estimates the GPU memory needed to run or train a
transformer model from its architecture, precision, workload type,
batch size and sequence length, and recommends hardware for it.
"""

__version__ = "0.1.0"

# Core exports
from .core.config import EstimatorConfig
from .core.estimator import MemoryEstimator, calculate_vram
from .core.hardware import recommend_gpu
from .core.model_config import ModelConfig
from .core.resolver import (
    estimate_from_name,
    lookup_known,
    resolve_from_document,
    resolve_model_config,
)
from .core.results import MemoryEstimate, VRAMBreakdown
from .core.types import (
    Confidence,
    ConfigSource,
    MemoryComponentKind,
    OperationMode,
    PrecisionMode,
)

__all__ = [
    "MemoryEstimator",
    "EstimatorConfig",
    "ModelConfig",
    "MemoryEstimate",
    "VRAMBreakdown",
    "PrecisionMode",
    "OperationMode",
    "Confidence",
    "ConfigSource",
    "MemoryComponentKind",
    "calculate_vram",
    "recommend_gpu",
    "lookup_known",
    "resolve_from_document",
    "estimate_from_name",
    "resolve_model_config",
    "__version__",
]
