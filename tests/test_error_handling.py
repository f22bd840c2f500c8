import pytest
from google.api_core import exceptions as google_exceptions
from google.generativeai.types import BlockedPromptException

from novaria_proxy.services.error_handling import (
    UPSTREAM_ERROR_MESSAGES,
    UpstreamErrorKind,
    classify_upstream_error,
    describe_upstream_error,
)


@pytest.mark.parametrize("error, kind", [
    (BlockedPromptException("prompt blocked"), UpstreamErrorKind.SAFETY_BLOCK),
    (google_exceptions.ResourceExhausted("exhausted"), UpstreamErrorKind.QUOTA_EXCEEDED),
    (google_exceptions.InvalidArgument("bad mime type"), UpstreamErrorKind.BAD_REQUEST),
    (RuntimeError("Response was blocked due to safety concerns"), UpstreamErrorKind.SAFETY_BLOCK),
    (RuntimeError("Quota Exceeded for model"), UpstreamErrorKind.QUOTA_EXCEEDED),
    (RuntimeError("[400 Bad Request] invalid payload"), UpstreamErrorKind.BAD_REQUEST),
    (RuntimeError("socket closed"), UpstreamErrorKind.UNKNOWN),
])
def test_classify_upstream_error(error, kind):
    assert classify_upstream_error(error) is kind


def test_describe_known_kind_uses_fixed_message():
    kind, message = describe_upstream_error(BlockedPromptException("nope"))

    assert kind is UpstreamErrorKind.SAFETY_BLOCK
    assert message == UPSTREAM_ERROR_MESSAGES[UpstreamErrorKind.SAFETY_BLOCK]


def test_describe_unknown_kind_interpolates_error():
    kind, message = describe_upstream_error(ValueError("boom"))

    assert kind is UpstreamErrorKind.UNKNOWN
    assert message == "Maaf, terjadi kesalahan: boom"
