"""OMDb API 客户端

每次查询都是一次新的 HTTP GET，不缓存、不重试、不限流。
"""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.request
from typing import Any

from omdb_provider.core.exceptions import ApiDecodeError, ApiError, FilmNotFoundError
from omdb_provider.core.models import FilmRecord
from omdb_provider.utils.net import build_query_url, validate_url_scheme

logger = logging.getLogger(__name__)


class OmdbClient:
    """OMDb JSON API 客户端"""

    def __init__(
        self, api_base_url: str, api_key: str, *, timeout: float | None = None,
    ) -> None:
        validate_url_scheme(api_base_url, context="OMDb api_base_url")
        self.api_base_url = api_base_url
        self.api_key = api_key
        self.timeout = timeout

    def film_by_id_url(self, imdb_id: str) -> str:
        return build_query_url(self.api_base_url, {"i": imdb_id, "apikey": self.api_key})

    def film_by_id(self, imdb_id: str) -> FilmRecord:
        """按 IMDb ID 查询影片

        Raises:
            FilmNotFoundError: OMDb 返回 Response=False
            ApiError: 网络错误或 HTTP 错误
            ApiDecodeError: 响应不是合法 JSON 对象
        """
        payload = self._get_json(self.film_by_id_url(imdb_id))
        if str(payload.get("Response", "True")).lower() == "false":
            raise FilmNotFoundError(f"OMDb 查询失败: {payload.get('Error', '未知错误')}")
        try:
            record = FilmRecord.from_json(payload)
        except TypeError as e:
            raise ApiDecodeError(f"OMDb 响应格式错误: {e}") from e
        logger.info("OMDb 查询成功: %s -> %s (%s)", imdb_id, record.title, record.year)
        return record

    def _get_json(self, url: str) -> dict[str, Any]:
        logger.debug("OMDb 请求: %s", url)
        try:
            with urllib.request.urlopen(url, timeout=self.timeout) as resp:  # nosec B310
                body = resp.read().decode("utf-8")
        except urllib.error.HTTPError as e:
            detail = _error_text(e)
            logger.error("OMDb HTTP 错误: %s %s %s", e.code, e.reason, detail)
            message = f"HTTP 错误 {e.code}: {e.reason}"
            raise ApiError(f"{message} ({detail})" if detail else message) from e
        except urllib.error.URLError as e:
            logger.error("OMDb 网络错误: %s", e.reason)
            raise ApiError(f"网络错误: {e.reason}") from e
        except OSError as e:
            logger.error("OMDb 请求失败: %s", e)
            raise ApiError(str(e)) from e

        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            logger.error("OMDb 响应解析失败: %s", e)
            raise ApiDecodeError(f"响应格式错误: {e}") from e
        if not isinstance(data, dict):
            raise ApiDecodeError(f"响应不是 JSON 对象: {type(data).__name__}")
        return data


def _error_text(err: urllib.error.HTTPError) -> str:
    """取 OMDb 错误响应体中的 Error 字段，无法解析时返回空串"""
    try:
        body = err.read()
    except (OSError, AttributeError):
        return ""
    try:
        data = json.loads(body or b"")
    except ValueError:
        return ""
    if isinstance(data, dict) and isinstance(data.get("Error"), str):
        return data["Error"]
    return ""
