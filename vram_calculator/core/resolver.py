"""
Model config resolution.

This module handles:
- Exact lookup of well-known model identifiers
- Reading architecture fields from a raw config document (e.g. HF config.json)
- Name-based heuristic estimation when nothing better is available

Resolution never fails: any lookup miss or unusable document degrades to
the name-based estimate, and the result's `source` records which path won.
"""

import logging
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .model_config import ModelConfig
from .types import ConfigSource
from ..formulas.heuristics import (
    detect_model_type,
    estimate_hidden_size,
    estimate_intermediate_size,
    estimate_num_heads,
    estimate_num_kv_heads,
    estimate_num_layers,
    estimate_params_from_name,
)

logger = logging.getLogger(__name__)


def _known(model_id: str, **fields) -> ModelConfig:
    return ModelConfig(model_id=model_id, source=ConfigSource.KNOWN, **fields)


KNOWN_MODELS: Mapping[str, ModelConfig] = MappingProxyType({
    "mistralai/Mistral-7B-v0.1": _known(
        "mistralai/Mistral-7B-v0.1",
        total_params=7_000_000_000,
        hidden_size=4096,
        num_hidden_layers=32,
        num_attention_heads=32,
        num_key_value_heads=8,
        intermediate_size=14336,
        vocab_size=32000,
        model_type="mistral",
    ),
    "google/flan-t5-large": _known(
        "google/flan-t5-large",
        total_params=770_000_000,
        hidden_size=1024,
        num_hidden_layers=24,
        num_attention_heads=16,
        num_key_value_heads=16,
        intermediate_size=2816,
        vocab_size=32128,
        model_type="t5",
    ),
    "bert-base-uncased": _known(
        "bert-base-uncased",
        total_params=110_000_000,
        hidden_size=768,
        num_hidden_layers=12,
        num_attention_heads=12,
        num_key_value_heads=12,
        intermediate_size=3072,
        vocab_size=30522,
        model_type="bert",
    ),
})


def lookup_known(model_id: str) -> Optional[ModelConfig]:
    """Exact, case-sensitive lookup in the table of well-known models."""
    return KNOWN_MODELS.get(model_id)


def _read_positive_int(document: Mapping[str, Any], key: str) -> Optional[int]:
    """
    Read a positive integer field; None means "not present".

    Missing, null, zero, negative, boolean and non-numeric values are all
    treated as absent. Integral floats and numeric strings are coerced.
    """
    value = document.get(key)
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return None
    elif isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    elif not isinstance(value, int):
        return None
    return value if value > 0 else None


def _read_string(document: Mapping[str, Any], key: str) -> Optional[str]:
    value = document.get(key)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def resolve_from_document(model_id: str, document: Mapping[str, Any]) -> ModelConfig:
    """
    Build a ModelConfig from a raw config document.

    Recognized fields: hidden_size, num_hidden_layers, num_attention_heads,
    num_key_value_heads, intermediate_size, vocab_size, model_type. Absent
    fields fall back to the same heuristics estimate_from_name uses, keyed
    on the name-derived parameter count.

    total_params is always estimated from the identifier, even when the
    document carries a parameter count.

    Args:
        model_id: Model identifier
        document: Key-value mapping mirroring a transformer config

    Returns:
        ModelConfig with source=DOCUMENT
    """
    total_params = estimate_params_from_name(model_id)
    logger.debug(
        "Parameter count for %s taken from name heuristic (%d), not from the document",
        model_id, total_params,
    )

    # Fallbacks come from the parameter tier, not from document values
    tier_hidden_size = estimate_hidden_size(total_params)
    tier_num_heads = estimate_num_heads(tier_hidden_size)

    hidden_size = _read_positive_int(document, "hidden_size") or tier_hidden_size
    num_layers = _read_positive_int(document, "num_hidden_layers") or estimate_num_layers(total_params)
    num_heads = _read_positive_int(document, "num_attention_heads") or tier_num_heads
    num_kv_heads = (
        _read_positive_int(document, "num_key_value_heads") or estimate_num_kv_heads(tier_num_heads)
    )
    intermediate_size = (
        _read_positive_int(document, "intermediate_size")
        or estimate_intermediate_size(tier_hidden_size)
    )

    return ModelConfig(
        model_id=model_id,
        total_params=total_params,
        hidden_size=hidden_size,
        num_hidden_layers=num_layers,
        num_attention_heads=num_heads,
        num_key_value_heads=num_kv_heads,
        intermediate_size=intermediate_size,
        vocab_size=_read_positive_int(document, "vocab_size"),
        model_type=_read_string(document, "model_type") or detect_model_type(model_id),
        source=ConfigSource.DOCUMENT,
    )


def estimate_from_name(model_id: str) -> ModelConfig:
    """
    Estimate a full ModelConfig from the identifier string alone.

    Args:
        model_id: Model identifier (e.g. "meta-llama/Llama-2-13b-hf")

    Returns:
        ModelConfig with source=NAME_HEURISTIC
    """
    total_params = estimate_params_from_name(model_id)
    hidden_size = estimate_hidden_size(total_params)
    num_heads = estimate_num_heads(hidden_size)

    return ModelConfig(
        model_id=model_id,
        total_params=total_params,
        hidden_size=hidden_size,
        num_hidden_layers=estimate_num_layers(total_params),
        num_attention_heads=num_heads,
        num_key_value_heads=estimate_num_kv_heads(num_heads),
        intermediate_size=estimate_intermediate_size(hidden_size),
        model_type=detect_model_type(model_id),
        source=ConfigSource.NAME_HEURISTIC,
    )


def resolve_model_config(
    model_id: str,
    raw_document: Optional[Mapping[str, Any]] = None
) -> ModelConfig:
    """
    Produce a best-effort ModelConfig for any identifier.

    Order: known-model table, then the raw document (if it is a mapping),
    then name heuristics. Never raises for a string identifier.

    Args:
        model_id: Model identifier
        raw_document: Already-fetched config document, or None on fetch failure

    Returns:
        Resolved ModelConfig; check `source` to detect degradation
    """
    known = lookup_known(model_id)
    if known is not None:
        return known

    if raw_document is not None and not isinstance(raw_document, Mapping):
        logger.warning(
            "Ignoring malformed config document for %s (got %s)",
            model_id, type(raw_document).__name__,
        )
        raw_document = None

    if raw_document is not None:
        try:
            return resolve_from_document(model_id, raw_document)
        except (TypeError, ValueError) as e:
            logger.warning("Could not read config document for %s: %s", model_id, e)

    logger.warning("No config available for %s, using name-based estimate", model_id)
    return estimate_from_name(model_id)
