"""
Trainable state memory: optimizer states and gradients.

Both exist only when weights are being updated (training or fine-tuning).
"""

from .base import ComponentBase, bounded_estimate
from ..core.results import MemoryEstimate
from ..core.types import Confidence, MemoryComponentKind, OperationMode
from ..formulas.constants import GB, GradientFactors, OptimizerFactors


class OptimizerComponent(ComponentBase):
    """
    Calculator for optimizer state memory.

    Models AdamW: two moment tensors kept in fp32 (8 bytes/param),
    independent of the compute precision.
    """

    kind = MemoryComponentKind.OPTIMIZER
    inapplicable_note = "No optimizer for inference"

    def applies_to(self, operation: OperationMode) -> bool:
        return operation.is_training

    def calculate(self) -> MemoryEstimate:
        total_bytes = self.model_config.total_params * OptimizerFactors.BYTES_PER_PARAM

        return bounded_estimate(
            total_bytes / GB,
            OptimizerFactors.MIN,
            OptimizerFactors.MAX,
            OptimizerFactors.BUFFER,
            Confidence.MEDIUM,
            ["AdamW optimizer", "First/second moments kept at fp32 (8 bytes/param)"],
        )


class GradientsComponent(ComponentBase):
    """Calculator for gradient memory (one value per parameter at compute precision)."""

    kind = MemoryComponentKind.GRADIENTS
    inapplicable_note = "No gradients for inference"

    def applies_to(self, operation: OperationMode) -> bool:
        return operation.is_training

    def calculate(self) -> MemoryEstimate:
        precision = self.config.precision
        total_bytes = self.model_config.total_params * precision.bytes_per_param

        return bounded_estimate(
            total_bytes / GB,
            GradientFactors.MIN,
            GradientFactors.MAX,
            GradientFactors.BUFFER,
            Confidence.MEDIUM,
            [f"Gradient memory at {precision.value}"],
        )
