"""
Component factory for creating memory component calculators.

This module provides the ComponentFactory class that instantiates
the memory component calculators in a fixed, report-ordered list.
"""

from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.config import EstimatorConfig
    from ..core.model_config import ModelConfig
    from ..components.base import MemoryComponent


class ComponentFactory:
    """
    Factory for creating memory component calculators.

    All six calculators are always created; applicability to the current
    operation is decided by the estimator.
    """

    @staticmethod
    def create_all_components(
        config: 'EstimatorConfig',
        model_config: 'ModelConfig'
    ) -> List['MemoryComponent']:
        """
        Create all memory component calculators.

        Args:
            config: Request configuration
            model_config: Resolved model architecture

        Returns:
            Calculators in MemoryComponentKind order
        """
        from ..components.weights import ParametersComponent
        from ..components.trainable_state import OptimizerComponent, GradientsComponent
        from ..components.activations import ActivationsComponent
        from ..components.kv_cache import KVCacheComponent
        from ..components.overheads import FrameworkOverheadComponent

        return [
            ParametersComponent(config, model_config),
            OptimizerComponent(config, model_config),
            GradientsComponent(config, model_config),
            ActivationsComponent(config, model_config),
            KVCacheComponent(config, model_config),
            FrameworkOverheadComponent(config, model_config),
        ]
