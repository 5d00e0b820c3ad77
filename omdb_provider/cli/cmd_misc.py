"""CLI — provider 信息与 Web 服务命令"""

from __future__ import annotations

import click

from omdb_provider.cli import _echo_json
from omdb_provider.core.config import get_config
from omdb_provider.services.provider import Provider


def register(group: click.Group) -> None:
    group.add_command(info)
    group.add_command(serve)


@click.command()
def info() -> None:
    """显示 provider 元数据、schema 与当前配置"""
    from omdb_provider import __commit__, __version__

    provider = Provider(version=__version__, commit=__commit__)
    _echo_json({
        "metadata": provider.metadata(),
        "config": get_config().to_dict(),
        "data_sources": {
            name: factory().schema().describe()
            for name, factory in provider.data_sources().items()
        },
        "resources": {
            name: factory().schema().describe()
            for name, factory in provider.resources().items()
        },
    })


@click.command()
@click.option("--host", default=None, help="监听地址（默认取配置 web_host）")
@click.option("--port", default=None, type=int, help="监听端口（默认取配置 web_port）")
def serve(host: str | None, port: int | None) -> None:
    """启动 Web API"""
    from omdb_provider.web.app import run_server

    cfg = get_config()
    run_server(host=host or cfg.web_host, port=port or cfg.web_port)
