"""
应用异常定义

服务层抛出这些异常，由 middleware.error_handler 统一转换为 JSON 错误响应
"""


class FaucetTrackerError(Exception):
    """应用异常基类"""

    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(FaucetTrackerError):
    """客户端缺少必填字段"""

    status_code = 400


class ConflictError(FaucetTrackerError):
    """唯一约束冲突 (URL 已存在)"""

    status_code = 409


class StorageError(FaucetTrackerError):
    """其他持久化失败，详细信息只记录在服务端日志中"""

    status_code = 500


class FatalStartupError(RuntimeError):
    """启动时无法打开数据库，进程无法继续运行"""
