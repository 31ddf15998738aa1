"""
Configuration file loading (YAML/JSON).
"""

import json
from pathlib import Path
from typing import Union, Any, Dict

from ..core.config import EstimatorConfig
from ..formulas.constants import DEFAULT_BATCH_SIZE, DEFAULT_SEQUENCE_LENGTH
from .validator import validate_config


def load_config(path: Union[str, Path]) -> EstimatorConfig:
    """
    Load configuration from YAML or JSON file.

    Args:
        path: Path to config file (.yaml, .yml, or .json)

    Returns:
        EstimatorConfig instance

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file format unsupported or config invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        return load_yaml_config(path)
    elif suffix == ".json":
        return load_json_config(path)
    else:
        raise ValueError(
            f"Unsupported config file format: {suffix}. "
            "Supported: .yaml, .yml, .json"
        )


def load_yaml_config(path: Path) -> EstimatorConfig:
    """
    Load configuration from YAML file.

    Args:
        path: Path to YAML file

    Returns:
        EstimatorConfig instance

    Raises:
        ValueError: If YAML invalid
    """
    import yaml

    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}

    return dict_to_config(data)


def load_json_config(path: Path) -> EstimatorConfig:
    """
    Load configuration from JSON file.

    Args:
        path: Path to JSON file

    Returns:
        EstimatorConfig instance
    """
    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    return dict_to_config(data)


def dict_to_config(data: Dict[str, Any]) -> EstimatorConfig:
    """
    Convert dictionary to EstimatorConfig.

    Handles the nested workload section (workload.batch_size, workload.seq_len)
    as well as flat top-level keys.

    Args:
        data: Configuration dictionary

    Returns:
        EstimatorConfig instance

    Raises:
        ValueError: If the data is not a mapping or the config is invalid
    """
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a mapping, got {type(data).__name__}")

    flat_data = {}

    # Top-level fields
    flat_data["model"] = data.get("model") or ""
    flat_data["precision"] = data.get("precision", data.get("dtype", "fp16"))
    flat_data["operation"] = data.get("operation", "inference")
    flat_data["offline"] = bool(data.get("offline", False))

    # Workload section
    workload = data.get("workload")
    if workload is None:
        workload = {}
    elif not isinstance(workload, dict):
        raise ValueError(f"'workload' must be a mapping, got {type(workload).__name__}")
    flat_data["batch_size"] = workload.get("batch_size", data.get("batch_size", DEFAULT_BATCH_SIZE))
    flat_data["seq_len"] = workload.get("seq_len", data.get("seq_len", DEFAULT_SEQUENCE_LENGTH))

    # Architecture section doubles as the raw config document
    architecture = data.get("architecture")
    if architecture is not None:
        flat_data["architecture"] = architecture

    # Create config
    config = EstimatorConfig(**flat_data)

    # Validate
    validate_config(config)

    return config
