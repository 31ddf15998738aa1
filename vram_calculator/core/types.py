"""
Core type definitions used across multiple modules.

This module contains only cross-cutting enums to avoid circular imports.
"""

from enum import Enum

from ..formulas.constants import PRECISION_ALIASES, PRECISION_BYTES


class PrecisionMode(Enum):
    """Numeric format used for weights and activations."""
    FP32 = "fp32"
    FP16 = "fp16"
    BF16 = "bf16"
    INT8 = "int8"
    INT4 = "int4"

    @property
    def bytes_per_param(self) -> float:
        return PRECISION_BYTES[self.value]

    @property
    def is_quantized(self) -> bool:
        return self in (PrecisionMode.INT8, PrecisionMode.INT4)

    @classmethod
    def parse(cls, value) -> "PrecisionMode":
        """
        Parse a precision from a string or enum.

        Raises:
            ValueError: If the precision is unknown
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        key = PRECISION_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            valid = ", ".join(m.value for m in cls)
            raise ValueError(
                f"Invalid precision '{value}'. Must be one of: {valid}"
            ) from None


class OperationMode(Enum):
    """Workload type being sized."""
    INFERENCE = "inference"
    TRAINING = "training"
    FINE_TUNING = "fine_tuning"

    @property
    def is_training(self) -> bool:
        """Training and fine-tuning both keep optimizer state and gradients."""
        return self is not OperationMode.INFERENCE

    @classmethod
    def parse(cls, value) -> "OperationMode":
        """
        Parse an operation from a string or enum.

        Raises:
            ValueError: If the operation is unknown
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace("-", "_").replace(" ", "_")
        if key == "finetuning":
            key = "fine_tuning"
        try:
            return cls(key)
        except ValueError:
            valid = ", ".join(m.value for m in cls)
            raise ValueError(
                f"Invalid operation '{value}'. Must be one of: {valid}"
            ) from None


class Confidence(Enum):
    """Qualitative reliability tag, assigned per formula."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class MemoryComponentKind(Enum):
    """
    Memory components of a breakdown, in report order.
    Values match the VRAMBreakdown field names.
    """
    PARAMETERS = "parameters"
    OPTIMIZER = "optimizer"
    GRADIENTS = "gradients"
    ACTIVATIONS = "activations"
    KV_CACHE = "kv_cache"
    FRAMEWORK_OVERHEAD = "framework_overhead"


class ConfigSource(Enum):
    """Where a resolved ModelConfig came from."""
    KNOWN = "known"
    DOCUMENT = "document"
    NAME_HEURISTIC = "name_heuristic"
