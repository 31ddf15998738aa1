"""
Framework overhead component.
"""

from .base import ComponentBase, bounded_estimate
from ..core.results import MemoryEstimate
from ..core.types import Confidence, MemoryComponentKind
from ..formulas.constants import OverheadDefaults


class FrameworkOverheadComponent(ComponentBase):
    """
    Calculator for framework overhead (CUDA context, allocator pools, runtime).

    A flat amount per operation, independent of model size.
    """

    kind = MemoryComponentKind.FRAMEWORK_OVERHEAD

    def calculate(self) -> MemoryEstimate:
        if self.config.operation.is_training:
            base_gb = OverheadDefaults.TRAINING
        else:
            base_gb = OverheadDefaults.INFERENCE

        return bounded_estimate(
            base_gb,
            OverheadDefaults.MIN,
            OverheadDefaults.MAX,
            OverheadDefaults.BUFFER,
            Confidence.LOW,
            ["Framework overhead"],
        )
