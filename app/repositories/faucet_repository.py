import logging
from typing import List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.core.constants import FaucetStatus
from app.core.exceptions import ConflictError, FaucetTrackerError, StorageError
from app.models import Faucet, FaucetFilters, FaucetRead, FaucetSubmission
from app.repositories.base_repository import BaseRepository

logger = logging.getLogger(__name__)

SQLITE_UNIQUE_ERRORNAME = "SQLITE_CONSTRAINT_UNIQUE"


def is_unique_violation(exc: IntegrityError, column: str = "faucets.url") -> bool:
    """判断 IntegrityError 是否为指定列的唯一约束冲突

    优先使用 sqlite3 提供的 sqlite_errorname，再用错误信息确认冲突的列。
    """
    orig = getattr(exc, "orig", None)
    message = str(orig if orig is not None else exc)
    errorname = getattr(orig, "sqlite_errorname", None)
    if errorname is not None and errorname != SQLITE_UNIQUE_ERRORNAME:
        return False
    return f"UNIQUE constraint failed: {column}" in message


class FaucetRepository(BaseRepository):
    """Faucet 数据访问层"""

    def insert(self, submission: FaucetSubmission) -> int:
        """插入待审核的 faucet，返回新ID"""
        try:
            with self.session_scope() as session:
                faucet = Faucet(
                    name=submission.name,
                    url=submission.url,
                    token_symbol=submission.token_symbol,
                    token_contract_address=submission.token_contract_address,
                    network=submission.network,
                    payout_frequency=submission.payout_frequency,
                    status=FaucetStatus.UNDER_REVIEW.value,
                    is_verified=False,
                )
                session.add(faucet)
                session.flush()
                return faucet.id
        except IntegrityError as e:
            if is_unique_violation(e):
                raise ConflictError(f"URL 已存在: {submission.url}") from e
            raise StorageError(str(e.orig)) from e
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

    def query(self, filters: FaucetFilters) -> List[FaucetRead]:
        """查询已审核的 faucet，按存储顺序返回"""
        try:
            with self.session_scope() as session:
                query = session.query(Faucet).filter(Faucet.is_verified.is_(True))

                if filters.token_symbol:
                    query = query.filter(Faucet.token_symbol == filters.token_symbol)
                if filters.network:
                    query = query.filter(Faucet.network == filters.network)
                if filters.status:
                    query = query.filter(Faucet.status == filters.status)

                return [FaucetRead.model_validate(row) for row in query.all()]
        except FaucetTrackerError:
            raise
        except Exception as e:
            # 数据库中被手工修改的行也可能在读取时失败
            raise StorageError(f"{type(e).__name__}: {e}") from e

    def mark_verified(
        self, faucet_id: int, status: str = FaucetStatus.ACTIVE.value
    ) -> bool:
        """人工审核通过 (不通过 HTTP 暴露)，last_updated 保持不变"""
        try:
            with self.session_scope() as session:
                faucet = session.query(Faucet).filter(Faucet.id == faucet_id).first()
                if faucet is None:
                    return False
                faucet.is_verified = True
                faucet.status = status
                return True
        except SQLAlchemyError as e:
            logger.error(f"审核 faucet 失败: id={faucet_id}, {e}")
            raise StorageError(str(e)) from e
