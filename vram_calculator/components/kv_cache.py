"""
KV cache memory component calculator.
"""

from .base import ComponentBase, bounded_estimate
from ..core.results import MemoryEstimate
from ..core.types import Confidence, MemoryComponentKind, OperationMode
from ..formulas.constants import GB, KVCacheFactors


class KVCacheComponent(ComponentBase):
    """
    Calculator for the KV cache kept during autoregressive generation.

    KV cache: 2 (K and V) x batch x seq_len x hidden x bytes x layers,
    divided by 8 to approximate grouped-query attention.
    """

    kind = MemoryComponentKind.KV_CACHE
    inapplicable_note = "KV cache not used"

    def applies_to(self, operation: OperationMode) -> bool:
        return operation is OperationMode.INFERENCE

    def calculate(self) -> MemoryEstimate:
        B = self.config.batch_size
        L = self.config.seq_len
        H = self.model_config.hidden_size or KVCacheFactors.DEFAULT_HIDDEN_SIZE
        layers = self.model_config.num_hidden_layers or KVCacheFactors.DEFAULT_NUM_LAYERS

        if self.config.precision.is_quantized:
            entry_bytes = KVCacheFactors.QUANTIZED_ENTRY_BYTES
        else:
            entry_bytes = KVCacheFactors.DEFAULT_ENTRY_BYTES

        total_bytes = (
            KVCacheFactors.KV_TENSORS * B * L * H * entry_bytes * layers
            / KVCacheFactors.GQA_REDUCTION
        )

        return bounded_estimate(
            total_bytes / GB,
            KVCacheFactors.MIN,
            KVCacheFactors.MAX,
            KVCacheFactors.BUFFER,
            Confidence.MEDIUM,
            [
                "KV cache memory",
                f"hidden={H}, layers={layers}, {entry_bytes:g} bytes/entry",
            ],
        )
