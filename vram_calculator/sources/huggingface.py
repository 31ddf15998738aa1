"""
HuggingFace config source.

Fetches a model's config.json through transformers.AutoConfig and hands the
raw document to the resolver. This is the only module that touches the
network; every failure is absorbed and reported as None.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional

from ..core.model_config import ModelConfig
from ..core.resolver import lookup_known, resolve_model_config

logger = logging.getLogger(__name__)

RawConfigFetcher = Callable[[str], Optional[Dict[str, Any]]]


def fetch_raw_config(model_id: str) -> Optional[Dict[str, Any]]:
    """
    Fetch the raw config document for a HuggingFace model.

    Args:
        model_id: HF model ID or local path

    Returns:
        Config as a plain dict, or None if it could not be fetched or parsed
    """
    try:
        from transformers import AutoConfig
    except ImportError:
        logger.warning(
            "transformers is required to fetch model configs. "
            "Install with: pip install transformers"
        )
        return None

    try:
        hf_config = AutoConfig.from_pretrained(model_id)
        document = hf_config.to_dict()
    except Exception as e:
        # Network errors, missing repos, gated models and unknown
        # architectures all degrade to name-based estimation.
        logger.warning("Could not fetch config for %s: %s", model_id, e)
        return None

    # Multimodal configs nest the language model under text_config
    text_config = document.get("text_config")
    if "hidden_size" not in document and isinstance(text_config, dict):
        document = {**text_config, "model_type": document.get("model_type")}

    logger.info("Fetched config for %s", model_id)
    return document


def get_model_config(
    model_id: str,
    offline: bool = False,
    document: Optional[Mapping[str, Any]] = None,
    fetcher: Optional[RawConfigFetcher] = None
) -> ModelConfig:
    """
    Resolve a ModelConfig, fetching the remote document when needed.

    Order: known-model table, supplied document, remote fetch (unless
    offline), name heuristics. Never raises.

    Args:
        model_id: Model identifier
        offline: Skip the remote fetch
        document: Raw config document supplied by the caller
        fetcher: Fetch function, defaults to fetch_raw_config

    Returns:
        Resolved ModelConfig
    """
    if lookup_known(model_id) is None and document is None and not offline:
        fetch = fetcher or fetch_raw_config
        try:
            document = fetch(model_id)
        except Exception as e:
            logger.warning("Config fetch for %s failed: %s", model_id, e)
            document = None
    return resolve_model_config(model_id, document)
