"""日志配置测试"""

import json
import logging

import pytest

from omdb_provider.utils.logger import ApiKeyFilter, JSONFormatter, reset_logging, setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    reset_logging()
    for h in saved_handlers:
        root.addHandler(h)
    root.setLevel(saved_level)


def _record(msg: str, *args: object) -> logging.LogRecord:
    return logging.LogRecord("omdb", logging.INFO, __file__, 1, msg, args, None)


class TestApiKeyFilter:
    def test_masks_apikey_in_args(self) -> None:
        rec = _record("请求: %s", "http://h/?i=tt1&apikey=secret")
        assert ApiKeyFilter().filter(rec) is True
        assert rec.getMessage() == "请求: http://h/?i=tt1&apikey=***"

    def test_leaves_other_messages(self) -> None:
        rec = _record("影片 %s", "tt1")
        ApiKeyFilter().filter(rec)
        assert rec.args == ("tt1",)


class TestJSONFormatter:
    def test_format(self) -> None:
        data = json.loads(JSONFormatter().format(_record("hello %s", "world")))
        assert data["message"] == "hello world"
        assert data["level"] == "INFO"


class TestSetupLogging:
    def test_single_handler_with_filter(self) -> None:
        setup_logging("DEBUG")
        setup_logging("DEBUG", json_output=True)
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
        assert any(isinstance(f, ApiKeyFilter) for f in root.handlers[0].filters)
