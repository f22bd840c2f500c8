"""
Middleware module
"""
from .access_logging import AccessLogMiddleware, get_client_ip

__all__ = [
    "AccessLogMiddleware",
    "get_client_ip"
]
