"""
Estimation result types and formatting.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from .types import Confidence, MemoryComponentKind


@dataclass(frozen=True)
class MemoryEstimate:
    """
    Bounded estimate of one memory component, in GB.

    Attributes:
        minimum_gb: Lower bound
        typical_gb: Expected usage
        maximum_gb: Upper bound
        safety_buffer_gb: Extra margin recommended on top of maximum_gb
        confidence: Qualitative reliability tag
        notes: Annotations explaining the estimate's basis
    """
    minimum_gb: float
    typical_gb: float
    maximum_gb: float
    safety_buffer_gb: float
    confidence: Confidence
    notes: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not (self.minimum_gb <= self.typical_gb <= self.maximum_gb):
            raise ValueError(
                "MemoryEstimate bounds must satisfy minimum <= typical <= maximum, got "
                f"{self.minimum_gb} / {self.typical_gb} / {self.maximum_gb}"
            )
        if self.safety_buffer_gb < 0:
            raise ValueError(f"safety_buffer_gb must be >= 0, got {self.safety_buffer_gb}")
        # Accept any iterable of notes but store a tuple
        if not isinstance(self.notes, tuple):
            object.__setattr__(self, "notes", tuple(self.notes))

    @property
    def safe_target_gb(self) -> float:
        """Upper bound plus safety buffer: what to provision for."""
        return self.maximum_gb + self.safety_buffer_gb

    def to_dict(self) -> Dict[str, Any]:
        return {
            "minimum_gb": self.minimum_gb,
            "typical_gb": self.typical_gb,
            "maximum_gb": self.maximum_gb,
            "safety_buffer_gb": self.safety_buffer_gb,
            "confidence": self.confidence.value,
            "notes": list(self.notes),
        }


# Report labels, in MemoryComponentKind order
_LABELS = {
    MemoryComponentKind.PARAMETERS: "Model parameters",
    MemoryComponentKind.OPTIMIZER: "Optimizer states",
    MemoryComponentKind.GRADIENTS: "Gradients",
    MemoryComponentKind.ACTIVATIONS: "Activations",
    MemoryComponentKind.KV_CACHE: "KV cache",
    MemoryComponentKind.FRAMEWORK_OVERHEAD: "Framework overhead",
}

# Shown only when non-zero
_OPTIONAL_KINDS = {
    MemoryComponentKind.OPTIMIZER,
    MemoryComponentKind.GRADIENTS,
    MemoryComponentKind.KV_CACHE,
}


@dataclass(frozen=True)
class VRAMBreakdown:
    """
    Full result of one calculation.

    Attributes:
        parameters: Model weights
        optimizer: Optimizer state (zero for inference)
        gradients: Gradients (zero for inference)
        activations: Activation memory
        kv_cache: KV cache (zero for training/fine-tuning)
        framework_overhead: CUDA context and framework runtime
        total: Element-wise sum of the six components, with an extra global
            margin on the safety buffer
    """
    parameters: MemoryEstimate
    optimizer: MemoryEstimate
    gradients: MemoryEstimate
    activations: MemoryEstimate
    kv_cache: MemoryEstimate
    framework_overhead: MemoryEstimate
    total: MemoryEstimate

    def components(self) -> Dict[MemoryComponentKind, MemoryEstimate]:
        """The six components in report order (total excluded)."""
        return {kind: getattr(self, kind.value) for kind in MemoryComponentKind}

    @property
    def recommended_gpu(self) -> str:
        from .hardware import recommend_gpu
        return recommend_gpu(self.total)

    def summary_table(self) -> str:
        """
        Format results as a readable report.

        Returns:
            Multi-line string with formatted breakdown
        """
        lines = []
        lines.append("=" * 60)
        lines.append("VRAM Estimation Summary")
        lines.append("=" * 60)
        lines.append("")

        lines.append("Memory breakdown (typical):")
        for kind, estimate in self.components().items():
            if kind in _OPTIONAL_KINDS and estimate.typical_gb <= 0:
                continue
            label = f"{_LABELS[kind]:<20}"
            lines.append(
                f"  {label}: {estimate.typical_gb:8.2f} GB  [{estimate.confidence.value}]"
            )

        lines.append("")
        lines.append("-" * 60)
        lines.append(f"  Typical usage       : {self.total.typical_gb:8.2f} GB")
        lines.append(
            f"  Realistic range     : {self.total.minimum_gb:8.2f} - "
            f"{self.total.maximum_gb:.2f} GB"
        )
        lines.append(f"  Safety buffer       : {self.total.safety_buffer_gb:+8.2f} GB")
        lines.append(f"  Safe target         : {self.total.safe_target_gb:8.2f} GB")
        lines.append("")
        lines.append(f"  Recommended GPU     : {self.recommended_gpu}")
        lines.append("=" * 60)

        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            "components": {
                kind.value: estimate.to_dict()
                for kind, estimate in self.components().items()
            },
            "total": self.total.to_dict(),
            "safe_target_gb": self.total.safe_target_gb,
            "recommended_gpu": self.recommended_gpu,
        }

    def to_dataframe(self):
        """
        Tabulate the breakdown as a pandas DataFrame.

        One row per component plus a final "Total" row.
        """
        import pandas as pd

        rows = []
        items = list(self.components().items()) + [(None, self.total)]
        for kind, estimate in items:
            rows.append({
                "Component": _LABELS[kind] if kind is not None else "Total",
                "Minimum (GB)": round(estimate.minimum_gb, 2),
                "Typical (GB)": round(estimate.typical_gb, 2),
                "Maximum (GB)": round(estimate.maximum_gb, 2),
                "Safety buffer (GB)": round(estimate.safety_buffer_gb, 2),
                "Confidence": estimate.confidence.value,
            })
        return pd.DataFrame(rows)
