import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from starlette.concurrency import run_in_threadpool

from app.core.constants import MSG_DUPLICATE_URL, MSG_REQUIRED_FIELDS, MSG_SUBMIT_FAILED
from app.core.exceptions import ConflictError, StorageError, ValidationError
from app.core.logging import get_logger
from app.models import FaucetSubmission
from app.repositories.faucet_repository import FaucetRepository

logger = logging.getLogger(__name__)
submission_logger = get_logger("faucet_tracker.submission")


class SubmissionService:
    """Faucet 提交业务逻辑层"""

    def __init__(self, faucet_repository: FaucetRepository):
        self.faucet_repository = faucet_repository

    def parse_submission(self, payload: Any) -> FaucetSubmission:
        """校验提交内容，name 和 url 为必填项"""
        if not isinstance(payload, dict):
            submission_logger.warning(f"提交内容格式错误: {type(payload).__name__}")
            raise ValidationError(MSG_REQUIRED_FIELDS)

        # 按原始值判断，0 / false 等假值视为缺失，其他数字转为字符串保存
        if not payload.get("name") or not payload.get("url"):
            submission_logger.warning(
                f"缺少必要字段: name={payload.get('name')!r}, url={payload.get('url')!r}")
            raise ValidationError(MSG_REQUIRED_FIELDS)

        try:
            submission = FaucetSubmission(**payload)
        except (PydanticValidationError, TypeError) as e:
            submission_logger.warning(f"提交字段格式错误: {e}")
            raise ValidationError(MSG_REQUIRED_FIELDS) from e

        if not submission.has_required_fields():
            submission_logger.warning(
                f"缺少必要字段: name={submission.name!r}, url={submission.url!r}")
            raise ValidationError(MSG_REQUIRED_FIELDS)

        return submission

    async def submit(self, payload: Any) -> int:
        """提交新的 faucet，状态固定为待审核"""
        submission = self.parse_submission(payload)

        try:
            faucet_id = await run_in_threadpool(
                self.faucet_repository.insert, submission)
        except ConflictError as e:
            submission_logger.info(f"重复提交: url={submission.url}")
            raise ConflictError(MSG_DUPLICATE_URL) from e
        except StorageError as e:
            logger.error(f"提交 faucet 失败: {e}")
            raise StorageError(MSG_SUBMIT_FAILED) from e

        submission_logger.info(
            f"faucet 已提交待审核: id={faucet_id}, url={submission.url}")
        return faucet_id
