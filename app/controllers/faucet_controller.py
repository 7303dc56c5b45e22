import json
import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, Query, Request, status

from ..core.constants import MSG_SUBMIT_OK
from ..core.dependencies import get_catalog_service, get_submission_service
from ..models.schemas import ErrorResponse, FaucetListResponse, SubmissionResponse
from ..services.catalog_service import CatalogService
from ..services.submission_service import SubmissionService

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

# 创建路由器
router = APIRouter()


def is_json_content_type(content_type: str) -> bool:
    """application/json 或 application/*+json"""
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or (
        media_type.startswith("application/") and media_type.endswith("+json"))


async def read_submission_body(request: Request) -> Any:
    """读取 JSON 或表单请求体，无法解析时返回空字典"""
    content_type = request.headers.get("content-type", "")

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return dict(form)

    if not is_json_content_type(content_type):
        logger.warning(f"不支持的请求体类型: {content_type or 'none'}")
        return {}

    body = await request.body()
    if not body:
        return {}
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"请求体不是合法的 JSON: {e}")
        return {}


@router.get(
    "/api/faucets",
    response_model=FaucetListResponse,
    summary="获取已审核的 faucet 列表",
    tags=["Faucets"],
    responses={500: {"model": ErrorResponse}},
)
async def list_faucets(
    token: Optional[str] = Query(default=None, description="按代币符号过滤"),
    network: Optional[str] = Query(default=None, description="按网络过滤"),
    status_filter: Optional[str] = Query(
        default=None, alias="status", description="按状态过滤"),
    catalog_service: CatalogService = Depends(get_catalog_service),
) -> FaucetListResponse:
    """
    获取已审核 (is_verified = 1) 的 faucet

    - 所有过滤条件为精确匹配，并以 AND 组合
    - 未审核的 faucet 永远不会返回
    """
    filters = catalog_service.build_filters(
        token=token, network=network, status=status_filter)
    faucets = await catalog_service.list_faucets(filters)
    return FaucetListResponse(faucets=faucets)


@router.post(
    "/api/faucets/submit",
    response_model=SubmissionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="提交新的 faucet 等待审核",
    tags=["Faucets"],
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def submit_faucet(
    request: Request,
    submission_service: SubmissionService = Depends(get_submission_service),
) -> SubmissionResponse:
    """
    提交新的 faucet

    - 支持 JSON 和表单请求体
    - name 和 url 为必填项
    - status 固定为 under_review，is_verified 固定为 0
    """
    payload = await read_submission_body(request)
    faucet_id = await submission_service.submit(payload)
    return SubmissionResponse(message=MSG_SUBMIT_OK, faucetId=faucet_id)
