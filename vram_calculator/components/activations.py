"""
Activation memory component calculator.
"""

from .base import ComponentBase, bounded_estimate
from ..core.results import MemoryEstimate
from ..core.types import Confidence, MemoryComponentKind
from ..formulas.constants import ActivationFactors


class ActivationsComponent(ComponentBase):
    """
    Calculator for activation memory.

    Scales linearly with batch x sequence tokens. Training keeps activations
    for the backward pass, so its per-token factor is far larger. This is
    the least certain component: real usage depends on kernels, attention
    implementation and checkpointing, none of which are modeled.
    """

    kind = MemoryComponentKind.ACTIVATIONS

    def calculate(self) -> MemoryEstimate:
        if self.config.operation.is_training:
            per_1k_tokens = ActivationFactors.TRAINING_GB_PER_1K_TOKENS
        else:
            per_1k_tokens = ActivationFactors.INFERENCE_GB_PER_1K_TOKENS

        base_gb = per_1k_tokens * self.config.tokens_per_step / 1024.0

        return bounded_estimate(
            base_gb,
            ActivationFactors.MIN,
            ActivationFactors.MAX,
            ActivationFactors.BUFFER,
            Confidence.LOW,
            [
                "Activation memory",
                f"{per_1k_tokens:g} GB per 1K tokens "
                f"(batch={self.config.batch_size}, seq_len={self.config.seq_len})",
            ],
        )
