from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from ..core.constants import MSG_LIVENESS

router = APIRouter()


@router.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def liveness() -> str:
    """存活检查"""
    return MSG_LIVENESS
