"""
数据库模型定义

使用 SQLAlchemy ORM 定义数据库表结构
"""

from sqlalchemy import Boolean, Column, Integer, Text, text
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

from ..core.constants import FaucetStatus

Base = declarative_base()


class Faucet(Base):
    """Faucet 表 - 存储所有提交和已审核的 faucet"""

    __tablename__ = "faucets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    url = Column(Text, nullable=False, unique=True)
    token_symbol = Column(Text, nullable=True)
    token_contract_address = Column(Text, nullable=True)
    network = Column(Text, nullable=True)
    payout_frequency = Column(Text, nullable=True)
    status = Column(
        Text,
        server_default=text(f"'{FaucetStatus.UNDER_REVIEW.value}'"),
    )  # 自由文本，不做枚举约束
    is_verified = Column(Boolean, server_default=text("0"))  # 存储为 0/1
    notes = Column(Text, nullable=True)
    # 以文本保存，读取时原样返回
    date_added = Column(Text, server_default=func.current_timestamp())
    # 只在创建时写入，没有更新路径
    last_updated = Column(Text, server_default=func.current_timestamp())

    def __repr__(self):
        return f"<Faucet(id={self.id}, url='{self.url}', status='{self.status}')>"
