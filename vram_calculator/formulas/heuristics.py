"""
Architecture heuristics for models whose config is only partially known.

Everything here is keyed off the identifier string or the total parameter
count. The rules are deterministic and checked in priority order (first
match wins).
"""

# Substring -> parameter count. "1.3b" contains "3b", so an id such as
# "opt-1.3b" resolves to 3e9 before the "1.3b" entry is reached.
PARAM_COUNT_PATTERNS = (
    ("70b", 70_000_000_000),
    ("13b", 13_000_000_000),
    ("7b", 7_000_000_000),
    ("3b", 3_000_000_000),
    ("1.3b", 1_300_000_000),
    ("large", 350_000_000),
    ("base", 110_000_000),
)
DEFAULT_PARAM_COUNT = 125_000_000

MODEL_FAMILIES = ("llama", "mistral", "qwen", "t5", "bert", "gpt")
DEFAULT_MODEL_FAMILY = "transformer"

# (exclusive lower bound on total params, hidden_size, num_layers), descending
SIZE_TIERS = (
    (50_000_000_000, 8192, 80),
    (10_000_000_000, 5120, 48),
    (1_000_000_000, 4096, 32),
    (500_000_000, 2048, 24),
    (100_000_000, 1024, 12),
)
DEFAULT_HIDDEN_SIZE = 768
DEFAULT_NUM_LAYERS = 6

DEFAULT_NUM_HEADS = 12
KV_GROUP_SIZE = 8
FFN_MULTIPLIER = 4


def estimate_params_from_name(model_id: str) -> int:
    """Estimate the total parameter count from naming conventions (e.g. '-7b-')."""
    lower_id = model_id.lower()
    for pattern, params in PARAM_COUNT_PATTERNS:
        if pattern in lower_id:
            return params
    return DEFAULT_PARAM_COUNT


def detect_model_type(model_id: str) -> str:
    """Detect the model family tag from the identifier."""
    lower_id = model_id.lower()
    for family in MODEL_FAMILIES:
        if family in lower_id:
            return family
    return DEFAULT_MODEL_FAMILY


def estimate_hidden_size(total_params: int) -> int:
    for threshold, hidden_size, _ in SIZE_TIERS:
        if total_params > threshold:
            return hidden_size
    return DEFAULT_HIDDEN_SIZE


def estimate_num_layers(total_params: int) -> int:
    for threshold, _, num_layers in SIZE_TIERS:
        if total_params > threshold:
            return num_layers
    return DEFAULT_NUM_LAYERS


def estimate_num_heads(hidden_size: int) -> int:
    """
    Derive the attention head count from the hidden size.

    Prefers 128-dim heads, then 64-dim heads, else a fixed default.
    """
    if hidden_size % 128 == 0:
        return hidden_size // 128
    if hidden_size % 64 == 0:
        return hidden_size // 64
    return DEFAULT_NUM_HEADS


def estimate_num_kv_heads(num_heads: int) -> int:
    """Approximate grouped-query attention: one KV head per 8 query heads."""
    return max(1, num_heads // KV_GROUP_SIZE)


def estimate_intermediate_size(hidden_size: int) -> int:
    # Common default for MLP: 4x hidden
    return hidden_size * FFN_MULTIPLIER
