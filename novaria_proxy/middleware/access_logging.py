import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from fastapi import Request

logger = logging.getLogger("NovariaProxy.AccessLog")

EXCLUDED_PATHS = ("/health", "/favicon.ico")


def get_client_ip(request: Request) -> str:
    # Behind the serverless edge the caller address arrives in X-Forwarded-For
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    if request.client:
        return request.client.host
    return "unknown"


class AccessLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        response = await call_next(request)

        process_time = (time.time() - start_time) * 1000

        if request.url.path not in EXCLUDED_PATHS:
            logger.info(
                f"{request.method} {request.url.path} -> {response.status_code} "
                f"({process_time:.1f}ms) ip={get_client_ip(request)} "
                f"ua='{request.headers.get('user-agent', '')}'"
            )

        return response
