import logging
from typing import List, Optional

from starlette.concurrency import run_in_threadpool

from app.core.constants import MSG_RETRIEVE_FAILED
from app.core.exceptions import StorageError
from app.models import FaucetFilters, FaucetRead
from app.repositories.faucet_repository import FaucetRepository

logger = logging.getLogger(__name__)


class CatalogService:
    """Faucet 目录查询业务逻辑层"""

    def __init__(self, faucet_repository: FaucetRepository):
        self.faucet_repository = faucet_repository

    @staticmethod
    def build_filters(
        token: Optional[str] = None,
        network: Optional[str] = None,
        status: Optional[str] = None,
    ) -> FaucetFilters:
        """将查询参数转换为过滤条件，空字符串视为未提供"""
        return FaucetFilters(
            token_symbol=token or None,
            network=network or None,
            status=status or None,
        )

    async def list_faucets(self, filters: FaucetFilters) -> List[FaucetRead]:
        """获取已审核的 faucet 列表"""
        try:
            return await run_in_threadpool(self.faucet_repository.query, filters)
        except StorageError as e:
            logger.error(f"获取 faucet 列表失败: {e}")
            raise StorageError(MSG_RETRIEVE_FAILED) from e
