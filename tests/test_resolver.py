"""Tests for model config resolution: known table, raw documents, name heuristics."""

import pytest

from vram_calculator.core.model_config import ModelConfig
from vram_calculator.core.resolver import (
    KNOWN_MODELS,
    estimate_from_name,
    lookup_known,
    resolve_from_document,
    resolve_model_config,
)
from vram_calculator.core.types import ConfigSource
from vram_calculator.formulas import heuristics


LLAMA_7B_DOCUMENT = {
    "architectures": ["LlamaForCausalLM"],
    "hidden_size": 4096,
    "intermediate_size": 11008,
    "num_attention_heads": 32,
    "num_hidden_layers": 32,
    "num_key_value_heads": 32,
    "vocab_size": 32000,
    "model_type": "llama",
    "torch_dtype": "float16",
}


class TestKnownModels:

    def test_bert_base_uncased(self):
        config = resolve_model_config("bert-base-uncased", None)
        assert config.total_params == 110_000_000
        assert config.hidden_size == 768
        assert config.num_hidden_layers == 12
        assert config.source is ConfigSource.KNOWN

    def test_mistral_7b(self):
        config = lookup_known("mistralai/Mistral-7B-v0.1")
        assert config.num_key_value_heads == 8
        assert config.intermediate_size == 14336
        assert config.model_type == "mistral"

    def test_flan_t5_large(self):
        config = lookup_known("google/flan-t5-large")
        assert config.total_params == 770_000_000
        assert config.vocab_size == 32128

    def test_lookup_is_case_sensitive(self):
        assert lookup_known("BERT-base-uncased") is None
        assert lookup_known("mistralai/mistral-7b-v0.1") is None

    def test_known_table_wins_over_document(self):
        config = resolve_model_config("bert-base-uncased", {"hidden_size": 1})
        assert config.hidden_size == 768
        assert config.source is ConfigSource.KNOWN

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            KNOWN_MODELS["new/model"] = estimate_from_name("new/model")


class TestNameHeuristics:

    def test_70b_chat(self):
        config = resolve_model_config("some-org/foo-70b-chat", None)
        assert config.total_params == 70_000_000_000
        assert config.hidden_size == 8192
        assert config.num_hidden_layers == 80
        assert config.num_attention_heads == 64
        assert config.num_key_value_heads == 8
        assert config.intermediate_size == 32768
        assert config.model_type == "transformer"
        assert config.vocab_size is None
        assert config.source is ConfigSource.NAME_HEURISTIC

    @pytest.mark.parametrize("model_id,expected", [
        ("meta-llama/Llama-2-70B-hf", 70_000_000_000),
        ("meta-llama/Llama-2-13b-hf", 13_000_000_000),
        ("Qwen/Qwen2.5-7B-Instruct", 7_000_000_000),
        ("stabilityai/stablelm-3b-4e1t", 3_000_000_000),
        ("facebook/opt-1.3b", 3_000_000_000),  # "3b" matches first
        ("google-t5/t5-large", 350_000_000),
        ("roberta-base", 110_000_000),
        ("distilgpt2", 125_000_000),
    ])
    def test_param_count_priority(self, model_id, expected):
        assert heuristics.estimate_params_from_name(model_id) == expected

    @pytest.mark.parametrize("model_id,expected", [
        ("meta-llama/Llama-2-7b-hf", "llama"),
        ("mistralai/Mixtral-8x7B", "mistral"),  # org name matches
        ("mistralai/Mistral-7B", "mistral"),
        ("Qwen/Qwen2-1.5B", "qwen"),
        ("google/flan-t5-xl", "t5"),
        ("FacebookAI/roberta-base", "bert"),  # "roBERTa" contains "bert"
        ("EleutherAI/pythia-410m", "transformer"),
        ("distilbert-base", "bert"),
        ("openai-community/gpt2", "gpt"),
    ])
    def test_model_family(self, model_id, expected):
        assert heuristics.detect_model_type(model_id) == expected

    @pytest.mark.parametrize("params,hidden,layers", [
        (70_000_000_000, 8192, 80),
        (50_000_000_000, 5120, 48),  # thresholds are strict
        (13_000_000_000, 5120, 48),
        (7_000_000_000, 4096, 32),
        (1_000_000_000, 2048, 24),
        (770_000_000, 2048, 24),
        (350_000_000, 1024, 12),
        (100_000_000, 768, 6),
    ])
    def test_size_tiers(self, params, hidden, layers):
        assert heuristics.estimate_hidden_size(params) == hidden
        assert heuristics.estimate_num_layers(params) == layers

    @pytest.mark.parametrize("hidden,heads", [
        (8192, 64),
        (768, 6),    # divisible by 128
        (832, 13),   # divisible by 64 only
        (100, 12),
    ])
    def test_head_count(self, hidden, heads):
        assert heuristics.estimate_num_heads(hidden) == heads

    def test_kv_heads_never_below_one(self):
        assert heuristics.estimate_num_kv_heads(4) == 1
        assert heuristics.estimate_num_kv_heads(32) == 4


class TestDocumentResolution:

    def test_reads_document_fields(self):
        config = resolve_model_config("meta-llama/Llama-2-7b-hf", LLAMA_7B_DOCUMENT)
        assert config.source is ConfigSource.DOCUMENT
        assert config.hidden_size == 4096
        assert config.intermediate_size == 11008
        assert config.num_key_value_heads == 32
        assert config.vocab_size == 32000
        assert config.model_type == "llama"

    def test_total_params_comes_from_name(self):
        document = dict(LLAMA_7B_DOCUMENT, num_parameters=6_738_415_616)
        config = resolve_from_document("meta-llama/Llama-2-7b-hf", document)
        assert config.total_params == 7_000_000_000

    def test_missing_fields_fall_back_to_heuristics(self):
        config = resolve_from_document("acme/thing-13b", {"hidden_size": 4096})
        assert config.hidden_size == 4096
        assert config.num_hidden_layers == 48
        # Derived from the 13b tier hidden size (5120), not the document's
        assert config.num_attention_heads == 40
        assert config.num_key_value_heads == 5
        assert config.intermediate_size == 20480
        assert config.vocab_size is None

    def test_fallbacks_ignore_document_hidden_size(self):
        config = resolve_from_document("acme/thing", {"hidden_size": 4096})
        assert config.hidden_size == 4096
        assert (
            config.num_attention_heads,
            config.num_key_value_heads,
            config.intermediate_size,
        ) == (8, 1, 4096)

    def test_kv_fallback_uses_tier_heads(self):
        config = resolve_from_document("acme/thing-7b", {"num_attention_heads": 64})
        assert config.num_attention_heads == 64
        assert config.num_key_value_heads == 4

    @pytest.mark.parametrize("value", [0, None, -8, True, "n/a", 12.5])
    def test_sentinel_values_are_absent(self, value):
        config = resolve_from_document("acme/thing-7b", {"hidden_size": value})
        assert config.hidden_size == 4096

    def test_numeric_strings_and_integral_floats(self):
        config = resolve_from_document(
            "acme/thing-7b", {"hidden_size": "2048", "num_hidden_layers": 16.0}
        )
        assert config.hidden_size == 2048
        assert config.num_hidden_layers == 16

    def test_model_type_falls_back_to_name(self):
        config = resolve_from_document("acme/qwen-7b", {"model_type": ""})
        assert config.model_type == "qwen"

    def test_empty_document(self):
        config = resolve_model_config("acme/thing-7b", {})
        expected = estimate_from_name("acme/thing-7b")
        assert config.source is ConfigSource.DOCUMENT
        assert config.hidden_size == expected.hidden_size
        assert config.num_hidden_layers == expected.num_hidden_layers

    def test_malformed_document_degrades(self):
        config = resolve_model_config("acme/thing-7b", ["not", "a", "mapping"])
        assert config.source is ConfigSource.NAME_HEURISTIC
        assert config == estimate_from_name("acme/thing-7b")


class TestModelConfig:

    def test_rejects_non_positive_params(self):
        with pytest.raises(ValueError):
            ModelConfig(model_id="x", total_params=0)

    def test_rejects_zero_fields(self):
        with pytest.raises(ValueError):
            ModelConfig(model_id="x", total_params=1, hidden_size=0)

    def test_is_immutable(self):
        config = estimate_from_name("acme/thing-7b")
        with pytest.raises(AttributeError):
            config.hidden_size = 1
