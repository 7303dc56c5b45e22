"""
数据传输对象定义

使用 Pydantic 定义 API 的请求和响应模型
"""

from typing import List, Optional

from pydantic import BaseModel, field_serializer


# Faucet 相关模型
class FaucetSubmission(BaseModel):
    """提交 faucet 请求模型

    只接受客户端可提交的字段，status / is_verified 等字段会被忽略。
    """
    name: Optional[str] = None
    url: Optional[str] = None
    token_symbol: Optional[str] = None
    token_contract_address: Optional[str] = None
    network: Optional[str] = None
    payout_frequency: Optional[str] = None

    class Config:
        extra = "ignore"
        coerce_numbers_to_str = True

    def has_required_fields(self) -> bool:
        """name 和 url 均存在且非空"""
        return bool(self.name) and bool(self.url)


class FaucetFilters(BaseModel):
    """Faucet 列表过滤条件，空值表示不过滤"""
    token_symbol: Optional[str] = None
    network: Optional[str] = None
    status: Optional[str] = None


class FaucetRead(BaseModel):
    """Faucet 响应模型"""
    id: int
    name: str
    url: str
    token_symbol: Optional[str] = None
    token_contract_address: Optional[str] = None
    network: Optional[str] = None
    payout_frequency: Optional[str] = None
    status: Optional[str] = None
    is_verified: bool = False
    notes: Optional[str] = None
    date_added: Optional[str] = None
    last_updated: Optional[str] = None

    class Config:
        from_attributes = True

    @field_serializer("is_verified")
    def serialize_is_verified(self, value: bool) -> int:
        # 与数据库存储保持一致，输出 0/1
        return 1 if value else 0


class FaucetListResponse(BaseModel):
    """Faucet 列表响应模型"""
    faucets: List[FaucetRead]


class SubmissionResponse(BaseModel):
    """提交成功响应模型"""
    message: str
    faucetId: int


class ErrorResponse(BaseModel):
    """错误响应模型"""
    error: str
