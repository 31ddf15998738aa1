"""
Memory estimation constants and tunable factors.

These constants are used throughout the estimation process.
All sizes are decimal gigabytes (1 GB = 1e9 bytes).
"""

# Memory units
GB = 1e9

# Request defaults (applied when the caller supplies a non-positive value)
DEFAULT_BATCH_SIZE = 1
DEFAULT_SEQUENCE_LENGTH = 2048

# Bytes per parameter for each precision mode, keyed by PrecisionMode.value
PRECISION_BYTES = {
    "fp32": 4.0,
    "fp16": 2.0,
    "bf16": 2.0,
    "int8": 1.0,
    "int4": 0.5,
}

# Alternative spellings accepted when parsing precision strings
PRECISION_ALIASES = {
    "float32": "fp32",
    "float16": "fp16",
    "half": "fp16",
    "bfloat16": "bf16",
}


class ParameterFactors:
    """Factors for model weight memory."""

    # Non-weight tensors (buffers, embeddings padding, etc.)
    STRUCTURAL_OVERHEAD = 1.2

    MIN = 0.9
    MAX = 1.1
    BUFFER = 0.15


class OptimizerFactors:
    """
    Factors for optimizer state memory.

    AdamW keeps first and second moments at full precision regardless of
    the compute dtype: 2 x 4 bytes per parameter.
    """

    BYTES_PER_PARAM = 8.0

    MIN = 0.8
    MAX = 1.2
    BUFFER = 0.3


class GradientFactors:
    """Factors for gradient memory."""

    MIN = 0.85
    MAX = 1.15
    BUFFER = 0.25


class ActivationFactors:
    """
    Tunable factors for activation memory estimation.

    Expressed as GB per (batch x 1024 tokens).
    """

    INFERENCE_GB_PER_1K_TOKENS = 0.1
    TRAINING_GB_PER_1K_TOKENS = 8.0

    MIN = 0.5
    MAX = 1.5
    BUFFER = 0.5


class KVCacheFactors:
    """Factors for the inference KV cache."""

    # Separate key and value tensors
    KV_TENSORS = 2.0

    # Grouped-query attention reduction
    GQA_REDUCTION = 8.0

    # Bytes per entry: quantized modes store 8-bit entries, everything else 16-bit
    QUANTIZED_ENTRY_BYTES = 1.0
    DEFAULT_ENTRY_BYTES = 2.0

    # Used when the model config does not provide them
    DEFAULT_HIDDEN_SIZE = 4096
    DEFAULT_NUM_LAYERS = 32

    MIN = 0.85
    MAX = 1.15
    BUFFER = 0.2


class OverheadDefaults:
    """Default framework overhead values in GB"""

    # CUDA context, allocator pools, framework runtime
    INFERENCE = 1.0
    TRAINING = 2.0

    MIN = 0.5
    MAX = 2.0
    BUFFER = 0.5


# Global margin added to the total safety buffer, as a fraction of typical total
TOTAL_UNCERTAINTY_MARGIN = 0.2

# (exclusive upper bound of safe requirement in GB, recommendation), ascending
GPU_TIERS = (
    (8.0, "RTX 3060 (12GB)"),
    (16.0, "RTX 4080 (16GB)"),
    (24.0, "RTX 4090 (24GB)"),
    (48.0, "A6000 (48GB)"),
)
MULTI_GPU_RECOMMENDATION = "Multiple high-end GPUs"


def clamp_nonneg(x: float) -> float:
    """Clamp value to non-negative"""
    return max(0.0, float(x))
