"""
Configuration validation.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.config import EstimatorConfig

from ..core.types import OperationMode, PrecisionMode


def validate_config(config: 'EstimatorConfig') -> None:
    """
    Validate a request configuration.

    Batch size and sequence length are clamped by EstimatorConfig itself,
    so they are not checked here.

    Args:
        config: Configuration to validate

    Raises:
        ValueError: If configuration is invalid
    """
    # Model
    if not config.model or not isinstance(config.model, str):
        raise ValueError("model must be a non-empty string")

    # Enums (normally parsed already in __post_init__)
    PrecisionMode.parse(config.precision)
    OperationMode.parse(config.operation)

    # Inline architecture document
    if config.architecture is not None and not isinstance(config.architecture, dict):
        raise ValueError(
            f"architecture must be a mapping of config fields, got {type(config.architecture).__name__}"
        )
