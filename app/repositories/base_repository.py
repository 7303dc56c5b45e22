from contextlib import AbstractContextManager

from sqlalchemy.orm import Session

from app.core.database import Database


class BaseRepository:
    """基础Repository类"""

    def __init__(self, database: Database):
        self.db = database

    def session_scope(self) -> AbstractContextManager[Session]:
        """获取数据库会话上下文"""
        return self.db.session_scope()
