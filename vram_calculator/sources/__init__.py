"""
Config sources that supply raw model config documents.
"""

from .huggingface import fetch_raw_config, get_model_config

__all__ = [
    "fetch_raw_config",
    "get_model_config",
]
