import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

logger = logging.getLogger("pos_backend.requests")


def setup_logging(level: str = "INFO") -> None:
    """
    Configures the root logger once for the whole process.
    Logs go to stderr so they can be collected by the process supervisor.
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request with its status code and duration."""

    async def dispatch(self, request: Request, call_next) -> Response:
        start_time = time.time()
        response = await call_next(request)
        duration_ms = (time.time() - start_time) * 1000

        message = "%s %s %d %.1fms"
        args = (request.method, request.url.path, response.status_code, duration_ms)
        if response.status_code >= 500:
            logger.error(message, *args)
        elif response.status_code >= 400:
            logger.warning(message, *args)
        else:
            logger.info(message, *args)
        return response
