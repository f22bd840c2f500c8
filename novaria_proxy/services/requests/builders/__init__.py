# -*- coding: utf-8 -*-
"""
Request builders package.

Thin, focused builders turning validated API models into Gemini SDK payloads.
"""
from .gemini_builder import (
    normalize_role,
    convert_history_to_gemini_contents,
    build_prompt_parts,
)

__all__ = [
    "normalize_role",
    "convert_history_to_gemini_contents",
    "build_prompt_parts",
]
