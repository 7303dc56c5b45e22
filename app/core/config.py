from typing import Any, Dict, Optional

from .settings import AppConfig


class Config:
    """配置管理类 - 基于Pydantic的类型安全配置"""

    def __init__(self,
                 config_path: str = "config/config.yaml",
                 app_config: Optional[AppConfig] = None):
        self.config_path = config_path
        if app_config is None:
            app_config = AppConfig.load_from_file(config_path)
        self._app_config = app_config

    def get(self, key: str, default: Any = None) -> Any:
        """获取配置值，支持点分隔的key"""
        keys = key.split(".")
        value = self._app_config

        for k in keys:
            if hasattr(value, k):
                value = getattr(value, k)
            else:
                return default

        return value

    def get_server_config(self) -> Dict[str, Any]:
        """获取服务配置"""
        return self._app_config.get_server_dict()

    def get_database_url(self) -> str:
        """获取数据库URL"""
        return self._app_config.database.url

    def get_logging_config(self) -> Dict[str, Optional[str]]:
        """获取日志配置"""
        return self._app_config.get_logging_dict()

    @property
    def app_config(self) -> AppConfig:
        """获取完整的应用配置对象"""
        return self._app_config
