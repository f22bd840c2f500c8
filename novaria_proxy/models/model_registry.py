"""
Static model table.

Maps the friendly model keys the front-end sends as ``selectedModel`` to the
upstream Gemini model id, its generation parameters and its safety policy.
The table is built once at import time and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from google.generativeai.types import HarmBlockThreshold, HarmCategory

DEFAULT_MODEL_KEY = "default"


@dataclass(frozen=True)
class GenerationParams:
    temperature: float
    top_k: int
    top_p: float
    max_output_tokens: int

    def to_generation_config(self) -> Dict[str, Any]:
        return {
            "temperature": self.temperature,
            "top_k": self.top_k,
            "top_p": self.top_p,
            "max_output_tokens": self.max_output_tokens,
        }


@dataclass(frozen=True)
class SafetySetting:
    category: HarmCategory
    threshold: HarmBlockThreshold

    def to_safety_setting(self) -> Dict[str, Any]:
        return {"category": self.category, "threshold": self.threshold}


@dataclass(frozen=True)
class ModelEntry:
    key: str
    upstream_model: str
    generation: GenerationParams
    safety_settings: Tuple[SafetySetting, ...] = field(default_factory=tuple)
    # Whether the upstream model accepts inline binary parts (images, audio, pdf...)
    supports_inline_attachments: bool = True

    def safety_settings_for_sdk(self) -> List[Dict[str, Any]]:
        return [setting.to_safety_setting() for setting in self.safety_settings]


class ModelRegistry:
    """Read-only lookup of ModelEntry by key with a guaranteed ``default`` fallback."""

    def __init__(self, entries: Mapping[str, ModelEntry]):
        if DEFAULT_MODEL_KEY not in entries:
            raise ValueError(f"Model registry requires a '{DEFAULT_MODEL_KEY}' entry")
        self._entries: Mapping[str, ModelEntry] = MappingProxyType(dict(entries))

    def resolve(self, key: Optional[str]) -> ModelEntry:
        """Return the entry for ``key``, or the default entry when the key is unknown or missing."""
        if key is not None and key in self._entries:
            return self._entries[key]
        return self._entries[DEFAULT_MODEL_KEY]

    @property
    def default(self) -> ModelEntry:
        return self._entries[DEFAULT_MODEL_KEY]

    def keys(self) -> List[str]:
        return list(self._entries.keys())

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ModelEntry]:
        return iter(self._entries.values())


_BLOCK_NONE_FOR_ALL = (
    SafetySetting(HarmCategory.HARM_CATEGORY_HARASSMENT, HarmBlockThreshold.BLOCK_NONE),
    SafetySetting(HarmCategory.HARM_CATEGORY_HATE_SPEECH, HarmBlockThreshold.BLOCK_NONE),
    SafetySetting(HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT, HarmBlockThreshold.BLOCK_NONE),
    SafetySetting(HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT, HarmBlockThreshold.BLOCK_NONE),
)

# Keys must stay in sync with the model picker in the front-end
MODELS_CONFIG: Dict[str, ModelEntry] = {
    "gemini-2.5-flash": ModelEntry(
        key="gemini-2.5-flash",
        upstream_model="gemini-1.5-flash-latest",
        generation=GenerationParams(temperature=0.9, top_k=1, top_p=1.0, max_output_tokens=2048),
        safety_settings=_BLOCK_NONE_FOR_ALL,
    ),
    "gemini-2.0-flash": ModelEntry(
        key="gemini-2.0-flash",
        upstream_model="gemini-1.5-pro-latest",
        generation=GenerationParams(temperature=0.7, top_k=1, top_p=1.0, max_output_tokens=2048),
        safety_settings=_BLOCK_NONE_FOR_ALL,
    ),
    "gemini-1.5-flash": ModelEntry(
        key="gemini-1.5-flash",
        upstream_model="gemini-1.5-flash-latest",
        generation=GenerationParams(temperature=0.8, top_k=1, top_p=1.0, max_output_tokens=2048),
        safety_settings=_BLOCK_NONE_FOR_ALL,
    ),
    DEFAULT_MODEL_KEY: ModelEntry(
        key=DEFAULT_MODEL_KEY,
        upstream_model="gemini-1.5-flash-latest",
        generation=GenerationParams(temperature=0.9, top_k=1, top_p=1.0, max_output_tokens=2048),
        safety_settings=_BLOCK_NONE_FOR_ALL,
    ),
}

MODEL_REGISTRY = ModelRegistry(MODELS_CONFIG)
