"""
请求日志中间件
"""

import logging
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """记录每个请求的方法、路径、客户端、状态码和耗时"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        client = request.client.host if request.client else "unknown"
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"

        response = await call_next(request)

        process_time = time.perf_counter() - start_time
        log = logger.warning if response.status_code >= 400 else logger.info
        log(
            f"{request.method} {target} 客户端: {client} "
            f"状态码: {response.status_code} 耗时: {process_time:.3f}s"
        )

        response.headers["X-Process-Time"] = f"{process_time:.6f}"
        return response
