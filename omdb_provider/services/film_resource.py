"""资源 <provider>_film — 以本地 JSON 文件持久化的影片记录

生命周期（无中间状态）:
  create  — 生成随机十六进制 ID，写入 <local_dir>/<id>
  read    — 读回文件；文件不存在视为已在外部删除（removed）
  update  — 覆盖同一文件，ID 不可变
  delete  — 删除文件；ID 为空时拒绝执行
"""

from __future__ import annotations

import logging
import uuid
from typing import Any

from omdb_provider.core.diagnostics import Diagnostics, Response
from omdb_provider.core.exceptions import NotConfiguredError, StorageError, ValidationError
from omdb_provider.core.models import FilmState, ProviderData
from omdb_provider.core.schema import TYPE_LIST, Attribute, Schema, rating_attributes
from omdb_provider.core.storage import FilmFileStore

logger = logging.getLogger(__name__)

# 8 字节随机数的十六进制表示
ID_LENGTH = 16


def new_film_id() -> str:
    return uuid.uuid4().hex[:ID_LENGTH]


class FilmResource:
    """影片资源"""

    type_suffix = "_film"

    def __init__(self) -> None:
        self._store: FilmFileStore | None = None

    def metadata(self, provider_type_name: str) -> str:
        return provider_type_name + self.type_suffix

    def schema(self) -> Schema:
        return Schema(
            description="A film record stored as a JSON file in the provider's local_dir.",
            attributes=[
                Attribute("id", computed=True, description="Unique ID"),
                Attribute("title", required=True, description="Film title"),
                Attribute("year", required=True, description="Release year"),
                Attribute(
                    "ratings", type=TYPE_LIST, optional=True,
                    description="Ratings from review aggregators",
                    nested=rating_attributes(computed=False),
                ),
            ],
        )

    def configure(self, provider_data: Any) -> Diagnostics:
        diags = Diagnostics()
        if provider_data is None:
            return diags
        if not isinstance(provider_data, ProviderData):
            diags.add_error(
                "Unexpected Resource Configure Type",
                f"期望 ProviderData，实际为 {type(provider_data).__name__}。"
                "请向 provider 开发者报告此问题",
            )
            return diags
        try:
            self._store = FilmFileStore(provider_data.local_dir)
        except OSError as e:
            diags.add_exception("error preparing local_dir", e)
        return diags

    # ---- 生命周期 ----

    def create(self, plan: dict[str, Any]) -> Response:
        resp = Response()
        film = self._validated(plan, resp, "invalid plan")
        if film is None or self._store is None:
            return resp

        film.id = new_film_id()
        try:
            self._store.put(film.id, film.to_record())
        except OSError as e:
            resp.diagnostics.add_exception("error writing film to file", e)
            return resp

        logger.info("影片资源已创建: id=%s, title=%s", film.id, film.title)
        resp.state = film.to_state()
        return resp

    def read(self, state: dict[str, Any]) -> Response:
        resp = Response()
        if not self._ready(resp):
            return resp
        film_id = (state or {}).get("id")
        if not film_id:
            resp.diagnostics.add_error("read error", "cannot read film with unknown ID")
            return resp

        try:
            record = self._store.get(film_id)
        except (StorageError, ValidationError) as e:
            resp.diagnostics.add_exception("error reading/parsing file", e)
            return resp
        except OSError as e:
            resp.diagnostics.add_exception("error opening file", e)
            return resp

        if record is None:
            logger.warning("影片文件已在外部删除，资源将被移除: id=%s", film_id)
            resp.removed = True
            return resp

        resp.state = FilmState.from_record(film_id, record).to_state()
        return resp

    def update(self, state: dict[str, Any], plan: dict[str, Any]) -> Response:
        resp = Response()
        film = self._validated(plan, resp, "invalid plan")
        if film is None or self._store is None:
            return resp

        # ID 只来自旧 state，plan 中缺失或被改动都不影响
        film_id = (state or {}).get("id")
        if not film_id:
            resp.diagnostics.add_error("update error", "cannot update film with unknown ID")
            return resp
        film.id = film_id

        try:
            self._store.put(film.id, film.to_record())
        except (OSError, ValidationError) as e:
            resp.diagnostics.add_exception("error writing film to file", e)
            return resp

        logger.info("影片资源已更新: id=%s", film.id)
        resp.state = film.to_state()
        return resp

    def delete(self, state: dict[str, Any]) -> Response:
        resp = Response()
        if not self._ready(resp):
            return resp
        film_id = (state or {}).get("id")
        if not film_id:
            resp.diagnostics.add_error("delete error", "cannot delete film with unknown ID")
            return resp

        try:
            self._store.delete(film_id)
        except (OSError, ValidationError) as e:
            resp.diagnostics.add_exception("delete error", e)
            return resp

        logger.info("影片资源已删除: id=%s", film_id)
        return resp

    # ---- 内部 ----

    def _ready(self, resp: Response) -> bool:
        if self._store is None:
            resp.diagnostics.add_exception(
                "resource not configured",
                NotConfiguredError("provider 尚未完成配置，local_dir 不可用"),
            )
            return False
        return True

    def _validated(
        self, plan: dict[str, Any], resp: Response, summary: str,
    ) -> FilmState | None:
        if not self._ready(resp):
            return None
        try:
            self.schema().validate(plan)
        except ValidationError as e:
            resp.diagnostics.add_exception(summary, e)
            return None
        return FilmState.from_state(plan)
