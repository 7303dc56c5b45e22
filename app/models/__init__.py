"""
数据模型包

包含所有的数据库模型和数据传输对象：
- database: 数据库模型 (SQLAlchemy ORM)
- schemas: 数据传输对象 (Pydantic)
"""

from .database import Base, Faucet
from .schemas import (
    ErrorResponse,
    FaucetFilters,
    FaucetListResponse,
    FaucetRead,
    FaucetSubmission,
    SubmissionResponse,
)

__all__ = [
    # Database models
    "Base",
    "Faucet",
    # Schemas
    "FaucetSubmission",
    "FaucetFilters",
    "FaucetRead",
    "FaucetListResponse",
    "SubmissionResponse",
    "ErrorResponse",
]
