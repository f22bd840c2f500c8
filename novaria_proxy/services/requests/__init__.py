"""
Requests building package.

Exports the Gemini builder entries used by the generate handler.
"""

from .builders import (
    normalize_role,
    convert_history_to_gemini_contents,
    build_prompt_parts,
)

__all__ = [
    "normalize_role",
    "convert_history_to_gemini_contents",
    "build_prompt_parts",
]
