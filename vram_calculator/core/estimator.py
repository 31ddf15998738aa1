"""
Main VRAM estimation orchestrator.

The MemoryEstimator coordinates:
- Model config resolution (when not supplied by the caller)
- Component calculation via factory
- The "zero when inapplicable" rule for every component
- Result aggregation
"""

import logging
from typing import Dict, Optional, Union

from .aggregator import MemoryAggregator
from .config import EstimatorConfig
from .model_config import ModelConfig
from .results import MemoryEstimate, VRAMBreakdown
from .types import MemoryComponentKind, OperationMode, PrecisionMode
from ..components.base import zero_estimate
from ..formulas.constants import DEFAULT_BATCH_SIZE, DEFAULT_SEQUENCE_LENGTH

logger = logging.getLogger(__name__)


class MemoryEstimator:
    """
    Main orchestrator for VRAM estimation.

    Holds no state beyond its inputs: estimate() is a pure function of
    config and model_config, so repeated calls return equal results.

    Attributes:
        config: Request configuration
        model_config: Model architecture details
    """

    def __init__(self, config: EstimatorConfig, model_config: Optional[ModelConfig] = None):
        """
        Initialize estimator.

        Args:
            config: Request configuration
            model_config: Already-resolved model config. When omitted it is
                resolved from config.model (fetching the remote document
                unless config.offline is set).
        """
        self.config = config
        if model_config is None:
            from ..sources.huggingface import get_model_config
            model_config = get_model_config(
                config.model,
                offline=config.offline,
                document=config.architecture,
            )
        self.model_config = model_config

    def estimate_components(self) -> Dict[MemoryComponentKind, MemoryEstimate]:
        """
        Calculate every component, substituting zero for inapplicable ones.

        Returns:
            One MemoryEstimate per MemoryComponentKind
        """
        # Import here to avoid circular dependency
        from ..utils.factory import ComponentFactory

        operation = self.config.operation
        results = {}
        for component in ComponentFactory.create_all_components(self.config, self.model_config):
            if component.applies_to(operation):
                results[component.kind] = component.calculate()
            else:
                results[component.kind] = zero_estimate(component.inapplicable_note)
        return results

    def estimate(self) -> VRAMBreakdown:
        """
        Run VRAM estimation.

        Returns:
            VRAMBreakdown with six components and the total
        """
        breakdown = MemoryAggregator().aggregate(self.estimate_components())
        logger.debug(
            "Estimated %s (%s, %s, batch=%d, seq_len=%d): typical %.2f GB, safe target %.2f GB",
            self.model_config.model_id,
            self.config.precision.value,
            self.config.operation.value,
            self.config.batch_size,
            self.config.seq_len,
            breakdown.total.typical_gb,
            breakdown.total.safe_target_gb,
        )
        return breakdown


def calculate_vram(
    model_config: ModelConfig,
    precision: Union[PrecisionMode, str],
    operation: Union[OperationMode, str],
    batch_size: int = DEFAULT_BATCH_SIZE,
    sequence_length: int = DEFAULT_SEQUENCE_LENGTH
) -> VRAMBreakdown:
    """
    Compute the VRAM breakdown for a resolved model config.

    Args:
        model_config: Resolved model architecture
        precision: Precision mode (enum or string)
        operation: Operation mode (enum or string)
        batch_size: Batch size; non-positive values fall back to 1
        sequence_length: Sequence length; non-positive values fall back to 2048

    Returns:
        VRAMBreakdown
    """
    config = EstimatorConfig(
        model=model_config.model_id,
        precision=precision,
        operation=operation,
        batch_size=batch_size,
        seq_len=sequence_length,
        offline=True,
    )
    return MemoryEstimator(config, model_config).estimate()
