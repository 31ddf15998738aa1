"""
Base types for memory component system.

This module defines the MemoryComponent protocol and the shared helpers
that turn a typical value into a bounded MemoryEstimate, so every
calculator applies its factors the same way.
"""

from typing import Iterable, Protocol, TYPE_CHECKING

from ..core.results import MemoryEstimate
from ..core.types import Confidence, MemoryComponentKind, OperationMode
from ..formulas.constants import clamp_nonneg

if TYPE_CHECKING:
    from ..core.config import EstimatorConfig
    from ..core.model_config import ModelConfig


class MemoryComponent(Protocol):
    """
    Protocol for memory component calculators.

    Each calculator is responsible for estimating one aspect of memory usage
    (e.g., weights, optimizer state, KV cache). Whether a component applies
    to an operation is decided by the estimator, which substitutes
    zero_estimate() for inapplicable components.
    """

    kind: MemoryComponentKind
    inapplicable_note: str

    def applies_to(self, operation: OperationMode) -> bool:
        """Whether this component uses memory for the given operation."""
        ...

    def calculate(self) -> MemoryEstimate:
        """
        Calculate memory for this component.

        Returns:
            MemoryEstimate in GB
        """
        ...


class ComponentBase:
    """Shared constructor and defaults for the concrete calculators."""

    kind: MemoryComponentKind
    inapplicable_note: str = "Not used for this operation"

    def __init__(self, config: 'EstimatorConfig', model_config: 'ModelConfig'):
        self.config = config
        self.model_config = model_config

    def applies_to(self, operation: OperationMode) -> bool:
        return True


def bounded_estimate(
    typical_gb: float,
    min_factor: float,
    max_factor: float,
    buffer_factor: float,
    confidence: Confidence,
    notes: Iterable[str]
) -> MemoryEstimate:
    """
    Build a MemoryEstimate from a typical value and relative factors.

    Args:
        typical_gb: Expected usage in GB
        min_factor: Lower bound as a fraction of typical (<= 1)
        max_factor: Upper bound as a fraction of typical (>= 1)
        buffer_factor: Safety buffer as a fraction of typical
        confidence: Qualitative confidence for this formula
        notes: Annotations explaining the estimate

    Example:
        bounded_estimate(10.0, 0.9, 1.1, 0.15, Confidence.HIGH, ["weights"])
        # -> 9.0 / 10.0 / 11.0 GB, buffer 1.5 GB
    """
    typical_gb = clamp_nonneg(typical_gb)
    return MemoryEstimate(
        minimum_gb=typical_gb * min_factor,
        typical_gb=typical_gb,
        maximum_gb=typical_gb * max_factor,
        safety_buffer_gb=typical_gb * buffer_factor,
        confidence=confidence,
        notes=tuple(notes),
    )


def zero_estimate(note: str) -> MemoryEstimate:
    """Estimate for a component that uses no memory in this configuration."""
    return MemoryEstimate(
        minimum_gb=0.0,
        typical_gb=0.0,
        maximum_gb=0.0,
        safety_buffer_gb=0.0,
        confidence=Confidence.HIGH,
        notes=(note,),
    )
