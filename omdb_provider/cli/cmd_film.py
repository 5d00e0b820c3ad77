"""CLI — 影片查询（数据源）与影片记录（资源）命令"""

from __future__ import annotations

import click

from omdb_provider.cli import _data_source, _emit, _parse_ratings, _resource
from omdb_provider.services.provider import TYPE_NAME

DATA_SOURCE = f"{TYPE_NAME}_film_by_id"
RESOURCE = f"{TYPE_NAME}_film"


def register(group: click.Group) -> None:
    group.add_command(film_by_id)
    group.add_command(film_group)


@click.command(name="film-by-id")
@click.argument("imdb_id")
def film_by_id(imdb_id: str) -> None:
    """按 IMDb ID 查询影片（如 tt0111161）"""
    ds = _data_source(DATA_SOURCE)
    _emit(ds.read({"imdb_id": imdb_id}))


@click.group(name="film")
def film_group() -> None:
    """本地影片记录管理"""


def _plan(title: str, year: str, rating: tuple[str, ...]) -> dict:
    return {"title": title, "year": year, "ratings": _parse_ratings(rating)}


@film_group.command(name="create")
@click.option("--title", required=True, help="影片名")
@click.option("--year", required=True, help="上映年份")
@click.option("--rating", multiple=True, help="评分 SOURCE=VALUE（可多次指定）")
def film_create(title: str, year: str, rating: tuple[str, ...]) -> None:
    """创建影片记录，输出含生成 ID 的 state"""
    res = _resource(RESOURCE)
    _emit(res.create(_plan(title, year, rating)))


@film_group.command(name="show")
@click.argument("film_id")
def film_show(film_id: str) -> None:
    """读取影片记录"""
    res = _resource(RESOURCE)
    resp = res.read({"id": film_id})
    if resp.removed:
        click.echo(f"影片记录不存在: {film_id}", err=True)
        raise click.exceptions.Exit(1)
    _emit(resp)


@film_group.command(name="update")
@click.argument("film_id")
@click.option("--title", required=True, help="影片名")
@click.option("--year", required=True, help="上映年份")
@click.option("--rating", multiple=True, help="评分 SOURCE=VALUE（可多次指定）")
def film_update(film_id: str, title: str, year: str, rating: tuple[str, ...]) -> None:
    """覆盖已存在的影片记录（ID 不变）"""
    res = _resource(RESOURCE)
    current = res.read({"id": film_id})
    if current.removed:
        click.echo(f"影片记录不存在: {film_id}", err=True)
        raise click.exceptions.Exit(1)
    if not current.ok:
        _emit(current)
    _emit(res.update(current.state, _plan(title, year, rating)))


@film_group.command(name="delete")
@click.argument("film_id")
def film_delete(film_id: str) -> None:
    """删除影片记录"""
    res = _resource(RESOURCE)
    _emit(res.delete({"id": film_id}))
    click.echo(f"影片记录已删除: {film_id}")
