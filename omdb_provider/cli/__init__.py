"""omdb-provider 命令行接口

CLI 作为本地宿主，直接驱动 Provider 的数据源/资源生命周期方法。
按领域拆分为子模块，每个模块注册自己的命令到 main group。
"""

import json
import os
from typing import Any

import click

from omdb_provider import __version__
from omdb_provider.core.config import DEFAULT_CONFIG_FILE, init_config
from omdb_provider.core.diagnostics import Response
from omdb_provider.core.exceptions import ProviderError
from omdb_provider.core.protocols import DataSource, Resource
from omdb_provider.services.provider import Provider, get_provider
from omdb_provider.utils.logger import setup_logging


def _provider() -> Provider:
    """获取已配置的全局 Provider，配置失败转为 CLI 错误"""
    try:
        return get_provider()
    except ProviderError as e:
        raise click.ClickException(str(e)) from e


def _data_source(type_name: str) -> DataSource:
    try:
        return _provider().new_data_source(type_name)
    except ProviderError as e:
        raise click.ClickException(str(e)) from e


def _resource(type_name: str) -> Resource:
    try:
        return _provider().new_resource(type_name)
    except ProviderError as e:
        raise click.ClickException(str(e)) from e


def _parse_ratings(pairs: tuple[str, ...]) -> list[dict[str, str]] | None:
    """解析 SOURCE=VALUE 评分参数"""
    ratings: list[dict[str, str]] = []
    for p in pairs:
        if "=" not in p:
            raise click.BadParameter(f"评分格式应为 SOURCE=VALUE: {p}", param_hint="--rating")
        source, value = p.split("=", 1)
        ratings.append({"source": source.strip(), "value": value.strip()})
    return ratings or None


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _emit(resp: Response) -> None:
    """输出响应：警告/错误写 stderr，state 以 JSON 写 stdout；有错误时退出码为 1"""
    for d in resp.diagnostics:
        click.echo(f"[{d.severity}] {d.summary}: {d.detail}", err=True)
    if resp.diagnostics.has_error():
        raise click.exceptions.Exit(1)
    if resp.state is not None:
        _echo_json(resp.state)


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "-c", default=DEFAULT_CONFIG_FILE, help="配置文件路径")
def main(config: str) -> None:
    """omdb - OMDb 影片查询与本地影片记录管理"""
    setup_logging(
        level=os.getenv("OMDB_LOG_LEVEL", "WARNING"),
        json_output=os.getenv("OMDB_LOG_JSON", "") == "1",
    )
    init_config(config)


# 注册各领域子命令
from omdb_provider.cli.cmd_film import register as _reg_film  # noqa: E402
from omdb_provider.cli.cmd_misc import register as _reg_misc  # noqa: E402

_reg_film(main)
_reg_misc(main)
