"""人性化审计：状态变更类操作输出一行可读审计日志（谁、何时、做了什么）。"""
from __future__ import annotations

import logging

logger = logging.getLogger("hrm_mock.audit")


def human_audit(user_id: str, when: str, operation_desc: str) -> None:
    logger.info(f"【人性化审计】用户 {user_id or 'system'} 在 {when} {operation_desc}")
