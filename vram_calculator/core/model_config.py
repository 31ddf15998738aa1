"""
Model architecture description.
"""

from dataclasses import dataclass
from typing import Optional

from .types import ConfigSource

_OPTIONAL_INT_FIELDS = (
    "hidden_size",
    "num_hidden_layers",
    "num_attention_heads",
    "num_key_value_heads",
    "intermediate_size",
    "vocab_size",
)


@dataclass(frozen=True)
class ModelConfig:
    """
    Architectural description of a model.

    Attributes:
        model_id: Model identifier (used only for heuristic lookups)
        total_params: Trainable parameter count, always known or estimated
        hidden_size: Model hidden dimension
        num_hidden_layers: Number of transformer layers
        num_attention_heads: Number of query heads
        num_key_value_heads: Number of key/value heads
        intermediate_size: MLP intermediate dimension
        vocab_size: Vocabulary size
        model_type: Family tag (informational only)
        source: Where this config was resolved from

    Optional integer fields are None when unknown, never zero.
    """
    model_id: str
    total_params: int
    hidden_size: Optional[int] = None
    num_hidden_layers: Optional[int] = None
    num_attention_heads: Optional[int] = None
    num_key_value_heads: Optional[int] = None
    intermediate_size: Optional[int] = None
    vocab_size: Optional[int] = None
    model_type: Optional[str] = None
    source: ConfigSource = ConfigSource.NAME_HEURISTIC

    def __post_init__(self):
        """Validate invariants"""
        if self.total_params <= 0:
            raise ValueError(f"total_params must be positive, got {self.total_params}")
        for name in _OPTIONAL_INT_FIELDS:
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise ValueError(f"{name} must be positive when set, got {value}")

    @property
    def is_estimated(self) -> bool:
        """True when every field came from name heuristics alone."""
        return self.source is ConfigSource.NAME_HEURISTIC

    @property
    def params_billions(self) -> float:
        return self.total_params / 1e9
