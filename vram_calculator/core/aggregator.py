"""
Memory aggregator for combining component results into final estimation.
"""

from typing import Dict

from .results import MemoryEstimate, VRAMBreakdown
from .types import Confidence, MemoryComponentKind
from ..formulas.constants import TOTAL_UNCERTAINTY_MARGIN


class MemoryAggregator:
    """
    Aggregates memory component results into a VRAMBreakdown.

    The total is the element-wise sum of the components. On top of the summed
    per-component buffers, the total's safety buffer gets a global margin of
    20% of the typical total for compounding uncertainty.
    """

    def aggregate(self, components: Dict[MemoryComponentKind, MemoryEstimate]) -> VRAMBreakdown:
        """
        Aggregate component estimates into the final result.

        Args:
            components: One estimate per MemoryComponentKind

        Returns:
            VRAMBreakdown with the total attached

        Raises:
            ValueError: If a component kind is missing
        """
        missing = [kind.value for kind in MemoryComponentKind if kind not in components]
        if missing:
            raise ValueError(f"Missing memory components: {', '.join(missing)}")

        ordered = [components[kind] for kind in MemoryComponentKind]

        return VRAMBreakdown(
            total=self._total(ordered),
            **{kind.value: components[kind] for kind in MemoryComponentKind}
        )

    @staticmethod
    def _total(estimates) -> MemoryEstimate:
        typical_total = sum(e.typical_gb for e in estimates)
        safety_buffer = (
            sum(e.safety_buffer_gb for e in estimates)
            + typical_total * TOTAL_UNCERTAINTY_MARGIN
        )

        return MemoryEstimate(
            minimum_gb=sum(e.minimum_gb for e in estimates),
            typical_gb=typical_total,
            maximum_gb=sum(e.maximum_gb for e in estimates),
            safety_buffer_gb=safety_buffer,
            confidence=Confidence.MEDIUM,
            notes=("Total VRAM requirement",),
        )
