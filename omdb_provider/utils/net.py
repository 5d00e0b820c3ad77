"""网络工具 — URL 安全校验与拼接"""

from __future__ import annotations

from urllib.parse import urlencode, urlparse

from omdb_provider.core.exceptions import ValidationError

_ALLOWED_SCHEMES = frozenset(("http", "https"))


def validate_url_scheme(url: str, *, context: str = "") -> None:
    """校验 URL 仅使用 http/https，防止 file:// 等非预期协议访问

    Raises:
        ValidationError: URL scheme 不在白名单内
    """
    parsed = urlparse(url)
    if parsed.scheme not in _ALLOWED_SCHEMES:
        label = f" ({context})" if context else ""
        raise ValidationError(
            f"不允许的 URL 协议 '{parsed.scheme}'{label}，"
            f"仅支持 http/https: {url}"
        )


def build_query_url(base_url: str, params: dict[str, str]) -> str:
    """拼接 base_url 与查询参数（参数值统一 URL 编码）"""
    return f"{base_url.rstrip('/')}/?{urlencode(params)}"
