import logging
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .exceptions import FatalStartupError

logger = logging.getLogger(__name__)


class Database:
    """数据库管理类

    每个进程持有一个实例，由应用程序对象创建并在关闭时释放。
    SQLite 下所有请求共享同一个连接，访问通过锁串行化。
    """

    def __init__(self, database_url: str):
        self.database_url = database_url
        self.engine: Optional[Engine] = None
        self.SessionLocal = None
        self._lock = threading.Lock()

    @property
    def is_open(self) -> bool:
        return self.engine is not None

    def open(self):
        """初始化数据库引擎并确认可以连接"""
        try:
            if self.database_url.startswith("sqlite"):
                self._ensure_sqlite_directory()
                self.engine = create_engine(
                    self.database_url,
                    connect_args={"check_same_thread": False},
                    poolclass=StaticPool,
                    echo=False,
                )
            else:
                self.engine = create_engine(self.database_url, echo=False)

            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))

            self.SessionLocal = sessionmaker(
                autocommit=False, autoflush=False, bind=self.engine
            )
            logger.info(f"数据库连接成功: {self.database_url}")
        except Exception as e:
            logger.error(f"打开数据库失败: {e}")
            self.close()
            raise FatalStartupError(f"打开数据库失败: {e}") from e

    def _ensure_sqlite_directory(self):
        """确保 SQLite 数据库文件所在目录存在"""
        database = make_url(self.database_url).database
        if not database or database == ":memory:":
            return
        directory = Path(database).parent
        if not directory.exists():
            directory.mkdir(parents=True, exist_ok=True)
            logger.info(f"已创建数据目录: {directory.absolute()}")

    def ensure_schema(self) -> bool:
        """创建数据库表 (已存在则跳过)

        建表失败只记录日志，服务继续运行。
        """
        try:
            from ..models import Base
            Base.metadata.create_all(bind=self.engine)
            logger.info("faucets 表已创建或已存在")
            return True
        except Exception as e:
            logger.error(f"创建 faucets 表失败: {e}")
            return False

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """获取数据库会话上下文管理器，成功时提交，失败时回滚并重新抛出"""
        if self.SessionLocal is None:
            raise RuntimeError("数据库尚未打开")

        with self._lock:
            session = self.SessionLocal()
            try:
                yield session
                session.commit()
            except Exception:
                session.rollback()
                raise
            finally:
                session.close()

    def close(self):
        """关闭数据库连接"""
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None
            self.SessionLocal = None
            logger.info("数据库连接已关闭")
