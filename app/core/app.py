"""
应用程序工厂

负责创建和配置 FastAPI 应用程序实例
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .. import __version__
from ..controllers import faucet_router, health_router
from ..middleware import LoggingMiddleware, setup_error_handlers
from .config import Config
from .database import Database
from .logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用程序生命周期管理

    启动时打开数据库并确保表存在，无法打开数据库时抛出 FatalStartupError
    终止启动；退出时关闭数据库连接。
    """
    database: Database = app.state.database

    logger.info("正在启动 faucet-tracker...")
    database.open()
    database.ensure_schema()
    logger.info("faucet-tracker 启动完成")

    try:
        yield
    finally:
        logger.info("正在关闭 faucet-tracker...")
        database.close()


def create_app(config: Optional[Config] = None) -> FastAPI:
    """创建 FastAPI 应用程序实例"""
    if config is None:
        config = Config()

    setup_logging(config)

    # 禁用文档端点
    app = FastAPI(
        title="faucet-tracker",
        description="Faucet 目录服务",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.state.config = config
    app.state.database = Database(config.get_database_url())

    setup_error_handlers(app)
    app.add_middleware(LoggingMiddleware)

    app.include_router(health_router)
    app.include_router(faucet_router)

    return app
