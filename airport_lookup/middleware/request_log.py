import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
import logging

logger = logging.getLogger(__name__)


class RequestLogMiddleware(BaseHTTPMiddleware):
    """
    Middleware to log all API requests with their status and response time
    """

    # Paths to exclude from request logging
    EXCLUDED_PATHS = {"/docs", "/redoc", "/openapi.json"}

    async def dispatch(self, request: Request, call_next):
        if request.url.path in self.EXCLUDED_PATHS:
            return await call_next(request)

        start_time = time.time()
        status_code = 500

        try:
            response = await call_next(request)
            status_code = response.status_code

        except Exception as e:
            logger.error(f"Error processing request {request.url.path}: {e}")
            raise

        finally:
            response_time_ms = (time.time() - start_time) * 1000
            logger.info(
                f"{request.method} {request.url.path} - "
                f"Status: {status_code} - "
                f"Time: {response_time_ms:.2f}ms"
            )

        return response
