import dataclasses

import pytest
from google.generativeai.types import HarmBlockThreshold, HarmCategory

from novaria_proxy.models.model_registry import (
    DEFAULT_MODEL_KEY,
    MODEL_REGISTRY,
    MODELS_CONFIG,
    ModelRegistry,
)


def test_resolve_known_key():
    entry = MODEL_REGISTRY.resolve("gemini-2.0-flash")

    assert entry.key == "gemini-2.0-flash"
    assert entry.upstream_model == "gemini-1.5-pro-latest"
    assert entry.generation.temperature == 0.7


@pytest.mark.parametrize("key", ["nonexistent-model", "", None, "DEFAULT"])
def test_resolve_falls_back_to_default(key):
    assert MODEL_REGISTRY.resolve(key) is MODEL_REGISTRY.default
    assert MODEL_REGISTRY.default.key == DEFAULT_MODEL_KEY


def test_registry_requires_default_entry():
    entries = {k: v for k, v in MODELS_CONFIG.items() if k != DEFAULT_MODEL_KEY}

    with pytest.raises(ValueError):
        ModelRegistry(entries)


def test_registry_is_read_only():
    registry = ModelRegistry(MODELS_CONFIG)

    with pytest.raises(TypeError):
        registry._entries["extra"] = MODELS_CONFIG[DEFAULT_MODEL_KEY]
    with pytest.raises(dataclasses.FrozenInstanceError):
        registry.default.upstream_model = "something-else"


def test_generation_config_uses_sdk_field_names():
    config = MODEL_REGISTRY.resolve("gemini-1.5-flash").generation.to_generation_config()

    assert config == {"temperature": 0.8, "top_k": 1, "top_p": 1.0, "max_output_tokens": 2048}


def test_safety_policy_blocks_nothing_in_every_category():
    for entry in MODEL_REGISTRY:
        settings = entry.safety_settings_for_sdk()
        assert [s["category"] for s in settings] == [
            HarmCategory.HARM_CATEGORY_HARASSMENT,
            HarmCategory.HARM_CATEGORY_HATE_SPEECH,
            HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT,
            HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT,
        ]
        assert all(s["threshold"] == HarmBlockThreshold.BLOCK_NONE for s in settings)
        assert entry.supports_inline_attachments
