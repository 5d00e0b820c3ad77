"""omdb-provider 日志配置

提供统一的日志配置，支持普通文本和结构化 JSON 两种输出格式。
所有 handler 均挂载 ApiKeyFilter，避免请求 URL 中的 apikey 泄露到日志。
"""

from __future__ import annotations

import json
import logging
import re
import sys
from datetime import datetime, timezone

_APIKEY_RE = re.compile(r"(apikey=)[^&\s]+", re.IGNORECASE)


class ApiKeyFilter(logging.Filter):
    """将日志消息中的 apikey=xxx 替换为 apikey=***"""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = _APIKEY_RE.sub(r"\1***", message)
        if masked != message:
            record.msg = masked
            record.args = None
        return True


class JSONFormatter(logging.Formatter):
    """结构化 JSON 日志格式器，便于日志平台消费

    输出格式:
        {
            "timestamp": "2024-01-01T12:00:00+00:00",
            "level": "INFO",
            "logger": "module.name",
            "message": "log message",
            "function": "func_name",
            "line": 42,
            "exception": "traceback..." (仅在有异常时)
        }
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, ensure_ascii=False)


def setup_logging(level: str = "INFO", json_output: bool = False) -> None:
    """配置根日志器

    参数:
        level: 日志级别字符串（DEBUG, INFO, WARNING, ERROR, CRITICAL）
        json_output: 为 True 时使用 JSON 格式，否则使用人类可读格式

    说明:
        - 输出到 stderr，stdout 留给 CLI 的 JSON 结果
        - 自动清理已有 handlers，避免重复输出
    """
    reset_logging()
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler(sys.stderr)
    if json_output:
        handler.setFormatter(JSONFormatter())
    else:
        fmt = "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s"
        handler.setFormatter(logging.Formatter(fmt))
    handler.addFilter(ApiKeyFilter())

    root.addHandler(handler)


def reset_logging() -> None:
    """清理根日志器上的所有 handlers（测试中重新配置时使用）"""
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
