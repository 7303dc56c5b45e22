"""
中间件包

包含 FastAPI 应用程序的中间件：
- logging: 日志中间件
- error_handler: 错误处理中间件
"""

from .error_handler import setup_error_handlers
from .logging import LoggingMiddleware

__all__ = [
    "LoggingMiddleware",
    "setup_error_handlers",
]
