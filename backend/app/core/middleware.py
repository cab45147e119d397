"""
FastAPI middleware for request context and logging
"""
import logging
import time
import uuid
from typing import Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.logging_config import LoggingConfig

logger = LoggingConfig.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# URL prefix -> entity name put in the log context
_ENTITY_PREFIXES = {
    "/api/professionals": "professional",
    "/api/contacts": "contact",
}


def entity_for_path(path: str) -> Optional[str]:
    """Registry entity addressed by a request path, if any"""
    for prefix, entity in _ENTITY_PREFIXES.items():
        if path == prefix or path.startswith(prefix + "/"):
            return entity
    return None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Binds request id, method, path and entity to every log line of a request"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        path = request.url.path

        LoggingConfig.set_context(
            request_id=request_id,
            method=request.method,
            path=path,
            entity=entity_for_path(path),
        )
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed",
                exc_info=True,
                extra={
                    "error_type": type(e).__name__,
                    "duration_ms": int((time.perf_counter() - start_time) * 1000),
                }
            )
            raise
        else:
            # 404 and 400 are ordinary outcomes for the registry; only 5xx is an error
            level = logging.WARNING if response.status_code >= 500 else logging.INFO
            logger.log(
                level,
                f"{request.method} {path} -> {response.status_code}",
                extra={
                    "status_code": response.status_code,
                    "duration_ms": int((time.perf_counter() - start_time) * 1000),
                }
            )
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            LoggingConfig.clear_context()
