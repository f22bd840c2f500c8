"""
Process-wide Gemini client.

Wraps the google-generativeai SDK behind a small surface (model handle ->
chat session -> send) and hands out a single lazily created instance, so
request handlers can receive it through FastAPI dependency injection and
tests can swap it out.
"""
import logging
from typing import Any, Dict, List, Optional

import google.generativeai as genai

from .config import GEMINI_API_KEY, GEMINI_SYSTEM_INSTRUCTION
from ..models.model_registry import ModelEntry
from ..utils.helpers import mask_api_key

logger = logging.getLogger("NovariaProxy.Core.GeminiClient")

_gemini_client: Optional["GeminiChatClient"] = None


class GeminiChatClient:
    def __init__(self, api_key: Optional[str], system_instruction: Optional[str] = None):
        self.api_key = api_key
        self.system_instruction = system_instruction
        if api_key:
            genai.configure(api_key=api_key)
            logger.info(f"Gemini SDK configured. key={mask_api_key(api_key)}")
        else:
            logger.error("GEMINI_API_KEY is not defined in the environment. Requests will fail until it is set.")

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def get_model(self, entry: ModelEntry) -> genai.GenerativeModel:
        return genai.GenerativeModel(
            model_name=entry.upstream_model,
            generation_config=entry.generation.to_generation_config(),
            safety_settings=entry.safety_settings_for_sdk(),
            system_instruction=self.system_instruction,
        )

    async def send_chat_message(
        self,
        entry: ModelEntry,
        history: List[Dict[str, Any]],
        parts: List[Dict[str, Any]],
    ) -> str:
        """Open a chat session seeded with ``history`` and send ``parts`` as the next user turn."""
        model = self.get_model(entry)
        chat = model.start_chat(history=history)
        response = await chat.send_message_async(parts)
        return response.text


def get_gemini_client() -> GeminiChatClient:
    """
    Return the global Gemini client, creating it on first use.
    Used as a FastAPI dependency.
    """
    global _gemini_client

    if _gemini_client is None:
        logger.info("Initializing global Gemini client")
        _gemini_client = GeminiChatClient(
            api_key=GEMINI_API_KEY,
            system_instruction=GEMINI_SYSTEM_INSTRUCTION,
        )

    return _gemini_client


def reset_gemini_client():
    """Drop the global client (called on application shutdown)."""
    global _gemini_client

    if _gemini_client is not None:
        logger.info("Releasing global Gemini client")
        _gemini_client = None
