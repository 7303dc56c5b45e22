"""
错误处理中间件

所有失败响应统一为 {"error": "..."}，HTTP 状态码表示错误类型
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.exceptions import FaucetTrackerError
from ..models.schemas import ErrorResponse

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


def setup_error_handlers(app: FastAPI) -> None:
    """设置全局错误处理器"""

    @app.exception_handler(FaucetTrackerError)
    async def faucet_tracker_exception_handler(
        request: Request, exc: FaucetTrackerError
    ) -> JSONResponse:
        """处理业务异常"""
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(f"{type(exc).__name__}: {request.method} {request.url.path} "
            f"{exc.status_code}: {exc.message}")
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """处理 HTTP 异常 (包括 404 / 405)"""
        logger.warning(
            f"HTTP 异常: {request.method} {request.url.path} "
            f"{exc.status_code}: {exc.detail}")
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """处理请求参数校验异常"""
        logger.warning(f"请求参数错误: {request.method} {request.url.path}: {exc.errors()}")
        return error_response(400, "Invalid request parameters.")

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """处理未捕获的异常"""
        logger.error(f"未处理异常: {type(exc).__name__}: {str(exc)}", exc_info=True)
        return error_response(500, "Internal server error")
