"""
Core 模块

包含应用程序的核心组件：
- config: 配置管理
- database: 数据库连接和管理
- constants: 全局常量
- exceptions: 应用异常
- app: 应用程序工厂
- logging: 日志系统
"""

from .config import Config
from .constants import FaucetStatus
from .database import Database
from .exceptions import (
    ConflictError,
    FatalStartupError,
    FaucetTrackerError,
    StorageError,
    ValidationError,
)

__all__ = [
    "Config",
    "Database",
    "FaucetStatus",
    "FaucetTrackerError",
    "ValidationError",
    "ConflictError",
    "StorageError",
    "FatalStartupError",
]
