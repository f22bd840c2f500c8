"""
Upstream error classification.

Turns whatever the Gemini SDK raised into one of a few kinds and the
localized message shown to the end user. SDK exception types are checked
first; matching on the error text is the fallback for errors that only
carry a message.
"""
import logging
from enum import Enum
from typing import Tuple

from google.api_core import exceptions as google_exceptions
from google.generativeai.types import BlockedPromptException, StopCandidateException

logger = logging.getLogger("NovariaProxy.Services.ErrorHandling")


class UpstreamErrorKind(str, Enum):
    SAFETY_BLOCK = "safety_block"
    QUOTA_EXCEEDED = "quota_exceeded"
    BAD_REQUEST = "bad_request"
    UNKNOWN = "unknown"


UPSTREAM_ERROR_MESSAGES = {
    UpstreamErrorKind.SAFETY_BLOCK: "Maaf, respons ini diblokir karena masalah keamanan konten. Coba formulasi ulang pertanyaan Anda.",
    UpstreamErrorKind.QUOTA_EXCEEDED: "Maaf, kuota API telah habis. Silakan coba lagi nanti atau periksa pengaturan API Anda.",
    UpstreamErrorKind.BAD_REQUEST: "Maaf, permintaan tidak valid. Mungkin ada masalah dengan input Anda atau model yang tidak kompatibel dengan jenis input.",
}
UNKNOWN_ERROR_TEMPLATE = "Maaf, terjadi kesalahan: {error}"

# Checked in order
_ERROR_TEXT_MARKERS = (
    ("blocked due to safety concerns", UpstreamErrorKind.SAFETY_BLOCK),
    ("quota exceeded", UpstreamErrorKind.QUOTA_EXCEEDED),
    ("400 bad request", UpstreamErrorKind.BAD_REQUEST),
)


def classify_upstream_error(error: BaseException) -> UpstreamErrorKind:
    if isinstance(error, (BlockedPromptException, StopCandidateException)):
        return UpstreamErrorKind.SAFETY_BLOCK
    if isinstance(error, google_exceptions.ResourceExhausted):
        return UpstreamErrorKind.QUOTA_EXCEEDED
    if isinstance(error, google_exceptions.BadRequest):
        return UpstreamErrorKind.BAD_REQUEST

    error_text = str(error).lower()
    for marker, kind in _ERROR_TEXT_MARKERS:
        if marker in error_text:
            return kind
    return UpstreamErrorKind.UNKNOWN


def describe_upstream_error(error: BaseException) -> Tuple[UpstreamErrorKind, str]:
    """Return the error kind and the user-facing message for it."""
    kind = classify_upstream_error(error)
    if kind is UpstreamErrorKind.UNKNOWN:
        return kind, UNKNOWN_ERROR_TEMPLATE.format(error=error)
    return kind, UPSTREAM_ERROR_MESSAGES[kind]
