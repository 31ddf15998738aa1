"""Tests for the Gradio request handler."""

import pytest

pytest.importorskip("gradio")

from vram_calculator.app import estimate_memory  # noqa: E402


def test_empty_model():
    summary, table = estimate_memory("   ", "fp16", "Inference", 1, 2048, True)
    assert "Missing Model" in summary
    assert table.empty


def test_known_model_has_no_warning():
    summary, table = estimate_memory("bert-base-uncased", "fp16", "Inference", 1.0, 2048.0, True)
    assert "Could not load the model configuration" not in summary
    assert "Config source: `known`" in summary
    assert list(table["Component"])[-1] == "Total"
    assert len(table) == 7


def test_name_heuristic_warns():
    summary, table = estimate_memory("acme/thing-7b", "bf16", "Training", 2, 1024, True)
    assert "Could not load the model configuration" in summary
    assert "Config source: `name_heuristic`" in summary
    assert "Operation: `training`" in summary
    assert not table.empty


def test_invalid_precision():
    summary, table = estimate_memory("acme/thing-7b", "fp8", "Inference", 1, 2048, True)
    assert "Invalid Configuration" in summary
    assert "fp8" in summary
    assert table.empty
