"""Tests for the HuggingFace config source.

Uses unittest.mock to avoid real network calls.
"""

from unittest.mock import MagicMock, patch

from vram_calculator.core.types import ConfigSource
from vram_calculator.sources.huggingface import fetch_raw_config, get_model_config

QWEN_DOCUMENT = {
    "hidden_size": 3584,
    "num_hidden_layers": 28,
    "num_attention_heads": 28,
    "num_key_value_heads": 4,
    "intermediate_size": 18944,
    "vocab_size": 152064,
    "model_type": "qwen2",
}


def _hf_config(document):
    hf_config = MagicMock()
    hf_config.to_dict.return_value = dict(document)
    return hf_config


class TestFetchRawConfig:

    def test_success(self):
        with patch("transformers.AutoConfig.from_pretrained",
                   return_value=_hf_config(QWEN_DOCUMENT)) as from_pretrained:
            document = fetch_raw_config("Qwen/Qwen2.5-7B-Instruct")
        from_pretrained.assert_called_once_with("Qwen/Qwen2.5-7B-Instruct")
        assert document["hidden_size"] == 3584

    def test_failure_returns_none(self):
        with patch("transformers.AutoConfig.from_pretrained",
                   side_effect=OSError("repo not found")):
            assert fetch_raw_config("nobody/nothing") is None

    def test_unwraps_text_config(self):
        wrapped = {"model_type": "llava", "text_config": dict(QWEN_DOCUMENT)}
        with patch("transformers.AutoConfig.from_pretrained",
                   return_value=_hf_config(wrapped)):
            document = fetch_raw_config("acme/vision-7b")
        assert document["hidden_size"] == 3584
        assert document["model_type"] == "llava"


class TestGetModelConfig:

    def test_uses_fetched_document(self):
        fetcher = MagicMock(return_value=QWEN_DOCUMENT)
        config = get_model_config("Qwen/Qwen2.5-7B-Instruct", fetcher=fetcher)
        fetcher.assert_called_once_with("Qwen/Qwen2.5-7B-Instruct")
        assert config.source is ConfigSource.DOCUMENT
        assert config.hidden_size == 3584
        assert config.num_key_value_heads == 4
        assert config.total_params == 7_000_000_000

    def test_fetch_failure_degrades_to_name(self):
        config = get_model_config("acme/thing-13b", fetcher=MagicMock(return_value=None))
        assert config.source is ConfigSource.NAME_HEURISTIC
        assert config.hidden_size == 5120

    def test_fetcher_exception_degrades_to_name(self):
        fetcher = MagicMock(side_effect=ConnectionError("timeout"))
        config = get_model_config("acme/thing-13b", fetcher=fetcher)
        assert config.source is ConfigSource.NAME_HEURISTIC

    def test_offline_never_fetches(self):
        fetcher = MagicMock()
        config = get_model_config("acme/thing-7b", offline=True, fetcher=fetcher)
        fetcher.assert_not_called()
        assert config.source is ConfigSource.NAME_HEURISTIC

    def test_known_model_never_fetches(self):
        fetcher = MagicMock()
        config = get_model_config("google/flan-t5-large", fetcher=fetcher)
        fetcher.assert_not_called()
        assert config.source is ConfigSource.KNOWN

    def test_supplied_document_skips_fetch(self):
        fetcher = MagicMock()
        config = get_model_config("acme/thing-7b", document={"hidden_size": 1024}, fetcher=fetcher)
        fetcher.assert_not_called()
        assert config.hidden_size == 1024

    def test_default_fetcher(self):
        with patch("vram_calculator.sources.huggingface.fetch_raw_config",
                   return_value=None) as fetch:
            config = get_model_config("acme/thing-3b")
        fetch.assert_called_once_with("acme/thing-3b")
        assert config.total_params == 3_000_000_000
