#!/usr/bin/env python3
"""
VRAM Calculator - CLI Interface

This module provides a command-line interface to the estimation engine.
It handles argument parsing, optional YAML/JSON request files, and maps
CLI flags to the EstimatorConfig used by the core estimator.

Features:
- Resolves model architecture from HuggingFace (or heuristics when offline)
- Estimates VRAM for inference, training and fine-tuning
- Prints a breakdown with uncertainty bounds and a GPU recommendation
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config.loader import load_config
from .config.validator import validate_config
from .core.config import EstimatorConfig
from .core.estimator import MemoryEstimator
from .core.model_config import ModelConfig
from .core.results import VRAMBreakdown
from .core.types import OperationMode, PrecisionMode

PRECISION_CHOICES = [m.value for m in PrecisionMode]
OPERATION_CHOICES = [m.value for m in OperationMode]


def pretty_print(config: EstimatorConfig, model_config: ModelConfig, result: VRAMBreakdown):
    """Print estimation results in a readable format"""
    print("\n=== VRAM Estimate ===")
    print(f"Model: {model_config.model_id}")
    print(f"Parameters: {model_config.params_billions:.2f}B ({model_config.model_type or 'unknown'})")
    print(f"precision={config.precision.value}, operation={config.operation.value}, "
          f"batch={config.batch_size}, seq_len={config.seq_len}")
    if model_config.is_estimated:
        print("[warn] Could not load model config; using an estimate from the model name.")
    print("")
    print(result.summary_table())
    print("")
    print("Notes:")
    print("  - These are estimates with significant uncertainty")
    print("  - Real-world usage can vary by 2x or more")
    print("  - Always test with actual workloads")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Transformer VRAM Calculator")

    p.add_argument("--config", type=str, default=None,
                   help="YAML/JSON request file (flags below override it)")

    # Model
    p.add_argument("--model", type=str, default=None,
                   help="HF model id or any model name (e.g. mistralai/Mistral-7B-v0.1)")
    p.add_argument("--offline", action="store_true", default=None,
                   help="Do not fetch config.json; use known models or name heuristics")

    # Precision & workload
    p.add_argument("--precision", type=str.lower, default=None, choices=PRECISION_CHOICES,
                   help="Weights/activations precision (default: fp16)")
    p.add_argument("--operation", type=str.lower, default=None, choices=OPERATION_CHOICES,
                   help="Workload type (default: inference)")
    p.add_argument("--batch-size", type=int, default=None, help="Batch size (default: 1)")
    p.add_argument("--seq-len", type=int, default=None, help="Sequence length (default: 2048)")

    # Output
    p.add_argument("--json", action="store_true", dest="as_json", help="Print results as JSON")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return p


def config_from_args(args: argparse.Namespace) -> EstimatorConfig:
    """
    Merge the optional request file with explicit CLI flags.

    Raises:
        FileNotFoundError: If --config points to a missing file
        ValueError: If the resulting config is invalid
    """
    overrides = {
        "model": args.model,
        "precision": args.precision,
        "operation": args.operation,
        "batch_size": args.batch_size,
        "seq_len": args.seq_len,
        "offline": args.offline,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}

    if args.config:
        base = load_config(args.config)
        fields = {
            "model": base.model,
            "precision": base.precision,
            "operation": base.operation,
            "batch_size": base.batch_size,
            "seq_len": base.seq_len,
            "offline": base.offline,
            "architecture": base.architecture,
        }
        # The file's architecture document only describes the file's model
        if overrides.get("model", base.model).strip() != base.model:
            fields.pop("architecture")
        fields.update(overrides)
    else:
        fields = overrides

    if not fields.get("model"):
        raise ValueError("--model is required (or set 'model' in --config)")

    config = EstimatorConfig(**fields)
    validate_config(config)
    return config


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = config_from_args(args)
    except FileNotFoundError as e:
        print(f"[ERROR] {e}")
        sys.exit(1)
    except ValueError as e:
        print(f"[ERROR] Configuration error: {e}")
        sys.exit(1)

    estimator = MemoryEstimator(config)
    result = estimator.estimate()

    if args.as_json:
        payload = {
            "model": {
                "model_id": estimator.model_config.model_id,
                "total_params": estimator.model_config.total_params,
                "model_type": estimator.model_config.model_type,
                "source": estimator.model_config.source.value,
            },
            "request": {
                "precision": config.precision.value,
                "operation": config.operation.value,
                "batch_size": config.batch_size,
                "seq_len": config.seq_len,
            },
            **result.to_dict(),
        }
        print(json.dumps(payload, indent=2))
    else:
        pretty_print(config, estimator.model_config, result)


if __name__ == "__main__":
    main()
