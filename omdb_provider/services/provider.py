"""Provider — 配置入口 + 数据源/资源工厂

Provider.configure() 在进程启动时执行一次，产出只读的 ProviderData，
之后每个数据源/资源实例都通过 configure(provider_data) 获得同一份快照。

用法:
    provider = Provider(version="0.1.0")
    resp = provider.configure({"api_key": "xxxx"})
    ds = provider.new_data_source("omdb_film_by_id")
    ds.read({"imdb_id": "tt0111161"})

    # 全局单例（CLI / Web 共享）
    from omdb_provider.services.provider import get_provider
    res = get_provider().new_resource("omdb_film")
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

from omdb_provider.core.config import DEFAULT_API_BASE_URL, DEFAULT_LOCAL_DIR
from omdb_provider.core.diagnostics import Diagnostics
from omdb_provider.core.exceptions import ConfigError, NotFoundError, ValidationError
from omdb_provider.core.models import ProviderData
from omdb_provider.core.protocols import DataSource, Resource
from omdb_provider.core.schema import Attribute, Schema
from omdb_provider.core.storage import DIR_MODE
from omdb_provider.services.film_by_id import FilmByIdDataSource
from omdb_provider.services.film_resource import FilmResource
from omdb_provider.utils.net import validate_url_scheme

logger = logging.getLogger(__name__)

TYPE_NAME = "omdb"


@dataclass
class ConfigureResponse:
    provider_data: ProviderData | None = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


class Provider:
    """OMDb provider"""

    def __init__(self, version: str = "", commit: str = "") -> None:
        self.version = version
        self.commit = commit
        self._provider_data: ProviderData | None = None

    @property
    def provider_data(self) -> ProviderData | None:
        return self._provider_data

    def metadata(self) -> dict[str, str]:
        """类型名 + 版本（无版本号时使用 commit）"""
        version = f"v{self.version}" if self.version else self.commit
        return {"type_name": TYPE_NAME, "version": version}

    def schema(self) -> Schema:
        return Schema(
            description="Film lookups against the OMDb API and film records on local disk.",
            attributes=[
                Attribute(
                    "api_key", required=True, sensitive=True,
                    description=(
                        "A free OMDb API key can be quickly generated "
                        "[here](https://www.omdbapi.com/apikey.aspx)."
                    ),
                ),
                Attribute(
                    "api_base_url", optional=True,
                    description=f"OMDb API base URL, defaults to `{DEFAULT_API_BASE_URL}`",
                ),
                Attribute(
                    "local_dir", optional=True,
                    description=f"Directory holding film resource files, defaults to `{DEFAULT_LOCAL_DIR}`",
                ),
            ],
        )

    def configure(self, config: dict[str, Any]) -> ConfigureResponse:
        """校验配置并生成 ProviderData；失败时 provider_data 为 None"""
        resp = ConfigureResponse()
        try:
            self.schema().validate(config)
        except ValidationError as e:
            resp.diagnostics.add_exception("invalid provider configuration", e)
            return resp

        api_base_url = config.get("api_base_url") or DEFAULT_API_BASE_URL
        try:
            validate_url_scheme(api_base_url, context="api_base_url")
        except ValidationError as e:
            resp.diagnostics.add_exception("invalid provider configuration", e)
            return resp

        local_dir = config.get("local_dir") or DEFAULT_LOCAL_DIR
        try:
            Path(local_dir).mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
        except OSError as e:
            resp.diagnostics.add_exception("error creating local_dir", e)
            return resp

        self._provider_data = ProviderData(
            api_key=config["api_key"],
            api_base_url=api_base_url,
            local_dir=local_dir,
        )
        resp.provider_data = self._provider_data
        logger.info("provider 已配置: api_base_url=%s, local_dir=%s", api_base_url, local_dir)
        return resp

    # ---- 工厂 ----

    def data_sources(self) -> dict[str, Callable[[], DataSource]]:
        return {FilmByIdDataSource().metadata(TYPE_NAME): FilmByIdDataSource}

    def resources(self) -> dict[str, Callable[[], Resource]]:
        return {FilmResource().metadata(TYPE_NAME): FilmResource}

    def new_data_source(self, type_name: str) -> DataSource:
        """实例化数据源并下发配置快照"""
        factory = self.data_sources().get(type_name)
        if factory is None:
            raise NotFoundError(f"数据源不存在: {type_name}")
        ds = factory()
        _raise_on_error(ds.configure(self._provider_data), type_name)
        return ds

    def new_resource(self, type_name: str) -> Resource:
        """实例化资源并下发配置快照"""
        factory = self.resources().get(type_name)
        if factory is None:
            raise NotFoundError(f"资源不存在: {type_name}")
        res = factory()
        _raise_on_error(res.configure(self._provider_data), type_name)
        return res


def _raise_on_error(diags: Diagnostics, type_name: str) -> None:
    if diags.has_error():
        details = [f"{d.summary}: {d.detail}" for d in diags.errors()]
        raise ConfigError(f"{type_name} 配置失败: {'; '.join(details)}")


# ---- 全局单例 ----

_global: Provider | None = None
_global_lock = threading.Lock()


def get_provider() -> Provider:
    """获取全局 Provider 单例（首次调用时按全局 Config 完成配置，线程安全）

    Raises:
        ConfigError: provider 配置校验失败
    """
    global _global  # noqa: PLW0603
    if _global is not None:
        return _global
    with _global_lock:
        if _global is None:
            from omdb_provider import __commit__, __version__
            from omdb_provider.core.config import get_config

            provider = Provider(version=__version__, commit=__commit__)
            resp = provider.configure(get_config().provider_block())
            _raise_on_error(resp.diagnostics, "provider")
            _global = provider
        return _global


def reset_provider() -> None:
    """重置全局 Provider（仅用于测试）"""
    global _global  # noqa: PLW0603
    with _global_lock:
        _global = None
