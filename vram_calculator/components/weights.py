"""
Model weights memory component calculator.
"""

from .base import ComponentBase, bounded_estimate
from ..core.results import MemoryEstimate
from ..core.types import Confidence, MemoryComponentKind
from ..formulas.constants import GB, ParameterFactors


class ParametersComponent(ComponentBase):
    """
    Calculator for model weights memory.

    Weights are stored at the compute precision, plus a flat 20% for
    non-weight tensors. Needed for every operation.
    """

    kind = MemoryComponentKind.PARAMETERS

    def calculate(self) -> MemoryEstimate:
        precision = self.config.precision
        total_bytes = (
            self.model_config.total_params
            * precision.bytes_per_param
            * ParameterFactors.STRUCTURAL_OVERHEAD
        )

        return bounded_estimate(
            total_bytes / GB,
            ParameterFactors.MIN,
            ParameterFactors.MAX,
            ParameterFactors.BUFFER,
            Confidence.HIGH,
            [
                f"{self.model_config.params_billions:.2f}B params at "
                f"{precision.bytes_per_param:g} bytes/param ({precision.value})",
                "Includes 20% overhead",
            ],
        )
