#!/usr/bin/env python3
"""在容器内启动 HRM 模拟后端的 HTTP 外壳；端口与延迟等均由环境变量控制（见 hrm_mock.config）。"""
import os
import sys
import logging

sys.path.insert(0, os.environ.get("APP_ROOT", "/app"))
logging.basicConfig(level=logging.INFO)

from hrm_mock.app import create_app
from hrm_mock.config import settings

app = create_app()
logging.info("hrm mock listening on port %s (latency %sms + %sms jitter)",
             settings.PORT, settings.LATENCY_MIN_MS, settings.LATENCY_JITTER_MS)
app.run(host="0.0.0.0", port=settings.PORT)
