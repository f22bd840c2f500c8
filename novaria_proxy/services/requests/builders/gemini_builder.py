# -*- coding: utf-8 -*-
"""
Gemini chat request builder.

- Converts caller conversation turns to Gemini chat ``history`` entries.
- Assembles the parts of the next user turn (inline attachments + text).
"""

from __future__ import annotations

import base64
import logging
from typing import Any, Dict, List, Optional

from ....models.api_models import AttachmentPy, ConversationTurnPy
from ....models.model_registry import ModelEntry

logger = logging.getLogger("NovariaProxy.Services.Requests.GeminiBuilder")

GEMINI_USER_ROLE = "user"
GEMINI_MODEL_ROLE = "model"


def normalize_role(role: Optional[str]) -> str:
    """Gemini only knows 'user' and 'model'; everything that is not the user is the model."""
    return GEMINI_USER_ROLE if role == GEMINI_USER_ROLE else GEMINI_MODEL_ROLE


def convert_history_to_gemini_contents(
    turns: List[ConversationTurnPy],
    request_id: str
) -> List[Dict[str, Any]]:
    """
    convert_history_to_gemini_contents(turns, request_id) -> List[dict]
    Keeps the chronological order of the caller's turns.
    """
    log_prefix = f"RID-{request_id}"
    contents: List[Dict[str, Any]] = []

    for turn in turns:
        role_for_api = normalize_role(turn.role)
        if turn.role not in (GEMINI_USER_ROLE, "assistant", GEMINI_MODEL_ROLE):
            logger.debug(f"{log_prefix}: Mapping history role '{turn.role}' to '{role_for_api}'.")
        contents.append({"role": role_for_api, "parts": [{"text": turn.content or ""}]})

    return contents


def build_prompt_parts(
    entry: ModelEntry,
    attachments: List[AttachmentPy],
    user_message: Optional[str],
    request_id: str
) -> List[Dict[str, Any]]:
    """
    Inline attachments first (only when the model accepts them), then the user
    text. The text part is always present so attachment-only turns still carry one.
    """
    log_prefix = f"RID-{request_id}"
    parts: List[Dict[str, Any]] = []

    for attachment in attachments:
        if not entry.supports_inline_attachments:
            logger.warning(
                f"{log_prefix}: Model {entry.upstream_model} does not accept inline attachments. "
                f"Dropping file ({attachment.mime_type})."
            )
            continue
        parts.append({
            "inline_data": {
                "mime_type": attachment.mime_type,
                "data": base64.b64decode(attachment.data, validate=True),
            }
        })

    parts.append({"text": user_message or ""})
    return parts
