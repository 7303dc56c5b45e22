"""
全局常量定义
"""

from enum import Enum


class FaucetStatus(str, Enum):
    """Faucet 状态枚举 (数据库中为自由文本，此处仅列出已知取值)"""
    UNDER_REVIEW = "under_review"  # 新提交，等待人工审核
    ACTIVE = "active"              # 审核通过，正常发放
    INACTIVE = "inactive"          # 已停止发放
    SCAM = "scam"                  # 确认为诈骗站点


# 客户端可见的错误信息
MSG_RETRIEVE_FAILED = "Failed to retrieve faucets"
MSG_REQUIRED_FIELDS = "Faucet name and URL are required."
MSG_DUPLICATE_URL = "This faucet URL has already been submitted."
MSG_SUBMIT_FAILED = "Failed to submit faucet."
MSG_SUBMIT_OK = "Faucet submitted successfully for review!"
MSG_LIVENESS = "Faucet Tracker API is running!"
