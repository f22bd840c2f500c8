import logging
from typing import Dict, Optional

from fastapi.responses import JSONResponse

logger = logging.getLogger("NovariaProxy.Utils")


def mask_api_key(api_key: Optional[str]) -> str:
    """Return a masked/fingerprinted representation of an API key for safe logging."""
    if not api_key:
        return "(empty)"
    head = api_key[:4]
    tail = api_key[-4:] if len(api_key) > 8 else "****"
    return f"{head}...{tail} (len={len(api_key)})"


def error_response(
    code: int,
    msg: str,
    request_id: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None
) -> JSONResponse:
    log_msg = f"Error {code}: {msg}"
    if request_id:
        log_msg = f"RID-{request_id}: {log_msg}"
    if code >= 500:
        logger.error(log_msg)
    else:
        logger.warning(log_msg)

    return JSONResponse(
        status_code=code,
        content={"message": msg},
        headers=headers
    )
