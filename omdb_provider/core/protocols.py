"""领域协议定义

Provider 与宿主（CLI / Web）之间的接口契约（Protocol）。
使用 typing.Protocol 而非 ABC，数据源/资源类无需继承即可满足协议。
"""

from __future__ import annotations

from typing import Any, Protocol

from omdb_provider.core.diagnostics import Diagnostics, Response
from omdb_provider.core.schema import Schema


class DataSource(Protocol):
    """只读数据源协议: metadata → configure → read"""

    def metadata(self, provider_type_name: str) -> str:
        """返回数据源类型名"""
        ...

    def schema(self) -> Schema:
        ...

    def configure(self, provider_data: Any) -> Diagnostics:
        """接收 Provider 下发的配置快照"""
        ...

    def read(self, config: dict[str, Any]) -> Response:
        ...


class Resource(Protocol):
    """受管资源协议: metadata → configure → create / read / update / delete"""

    def metadata(self, provider_type_name: str) -> str:
        ...

    def schema(self) -> Schema:
        ...

    def configure(self, provider_data: Any) -> Diagnostics:
        ...

    def create(self, plan: dict[str, Any]) -> Response:
        ...

    def read(self, state: dict[str, Any]) -> Response:
        """刷新 state；资源已不存在时 Response.removed 为 True"""
        ...

    def update(self, state: dict[str, Any], plan: dict[str, Any]) -> Response:
        ...

    def delete(self, state: dict[str, Any]) -> Response:
        ...
