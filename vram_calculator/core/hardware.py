"""
Hardware recommendation from a total memory estimate.
"""

from typing import TYPE_CHECKING

from ..formulas.constants import GPU_TIERS, MULTI_GPU_RECOMMENDATION

if TYPE_CHECKING:
    from .results import MemoryEstimate


def recommend_gpu(total: 'MemoryEstimate') -> str:
    """
    Map a total estimate to a GPU recommendation.

    Uses the safe requirement (maximum + safety buffer) against half-open
    tiers: a requirement of exactly 8.0 GB lands in the 16 GB tier.

    Args:
        total: Total memory estimate of a breakdown

    Returns:
        Human-readable recommendation
    """
    safe_requirement = total.maximum_gb + total.safety_buffer_gb
    for upper_bound, recommendation in GPU_TIERS:
        if safe_requirement < upper_bound:
            return recommendation
    return MULTI_GPU_RECOMMENDATION
