"""
Request configuration: file loading, fluent builder and validation.
"""

from .builder import EstimatorConfigBuilder
from .loader import load_config, load_json_config, load_yaml_config, dict_to_config
from .validator import validate_config

__all__ = [
    "EstimatorConfigBuilder",
    "load_config",
    "load_json_config",
    "load_yaml_config",
    "dict_to_config",
    "validate_config",
]
