"""
公共依赖项

定义在控制器中使用的依赖项。数据库实例挂载在 app.state 上，
每个请求按需构建仓储和服务对象。
"""

from fastapi import Depends, Request

from ..repositories.faucet_repository import FaucetRepository
from ..services.catalog_service import CatalogService
from ..services.submission_service import SubmissionService
from .database import Database


def get_database(request: Request) -> Database:
    """获取应用持有的数据库实例"""
    return request.app.state.database


def get_faucet_repository(
    database: Database = Depends(get_database),
) -> FaucetRepository:
    """获取 faucet 仓储"""
    return FaucetRepository(database)


def get_catalog_service(
    repository: FaucetRepository = Depends(get_faucet_repository),
) -> CatalogService:
    """获取目录查询服务"""
    return CatalogService(repository)


def get_submission_service(
    repository: FaucetRepository = Depends(get_faucet_repository),
) -> SubmissionService:
    """获取提交服务"""
    return SubmissionService(repository)
