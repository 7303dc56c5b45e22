#!/usr/bin/env python3
"""
faucet-tracker - Faucet catalog service
Main application entry point
"""

import logging
import sys

import uvicorn

from app.core.app import create_app
from app.core.config import Config

logger = logging.getLogger(__name__)


def main():
    """主函数 - 启动应用程序"""
    try:
        config = Config()
        app = create_app(config)
        server_config = config.get_server_config()

        logger.info(f"服务运行于 http://localhost:{server_config['port']}")
        # uvicorn 处理 SIGINT/SIGTERM，生命周期结束时关闭数据库
        uvicorn.run(
            app,
            host=server_config["host"],
            port=server_config["port"],
            log_level="info",
            lifespan="on",
        )
    except KeyboardInterrupt:
        logger.info("收到中断信号，正在关闭...")
    except Exception as e:
        logger.error(f"启动失败: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
