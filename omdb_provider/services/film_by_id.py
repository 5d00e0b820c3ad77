"""数据源 <provider>_film_by_id — 按 IMDb ID 查询影片

流程: 校验 config → OMDb HTTP GET → 映射 title / year / ratings → 返回 state
"""

from __future__ import annotations

import logging
from typing import Any

from omdb_provider.core.client import OmdbClient
from omdb_provider.core.diagnostics import Diagnostics, Response
from omdb_provider.core.exceptions import (
    ApiDecodeError,
    ApiError,
    NotConfiguredError,
    ValidationError,
)
from omdb_provider.core.models import FilmLookup, ProviderData
from omdb_provider.core.schema import TYPE_LIST, Attribute, Schema, rating_attributes

logger = logging.getLogger(__name__)


class FilmByIdDataSource:
    """影片查询数据源"""

    type_suffix = "_film_by_id"

    def __init__(self) -> None:
        self._client: OmdbClient | None = None

    def metadata(self, provider_type_name: str) -> str:
        return provider_type_name + self.type_suffix

    def schema(self) -> Schema:
        return Schema(
            description="This Data Source returns details about a film by its IMDb ID.",
            attributes=[
                Attribute(
                    "imdb_id", required=True,
                    description="Unique ID used by both OMDb and IMDb",
                ),
                Attribute("title", computed=True, description="Film title"),
                Attribute("year", computed=True, description="Release year"),
                Attribute(
                    "ratings", type=TYPE_LIST, computed=True,
                    description="Ratings from review aggregators",
                    nested=rating_attributes(computed=True),
                ),
            ],
        )

    def configure(self, provider_data: Any) -> Diagnostics:
        diags = Diagnostics()
        # 宿主可能在 Provider 配置完成前调用一次
        if provider_data is None:
            return diags
        if not isinstance(provider_data, ProviderData):
            diags.add_error(
                "Unexpected Data Source Configure Type",
                f"期望 ProviderData，实际为 {type(provider_data).__name__}",
            )
            return diags
        try:
            self._client = OmdbClient(provider_data.api_base_url, provider_data.api_key)
        except ValidationError as e:
            diags.add_exception("invalid api_base_url", e)
        return diags

    def read(self, config: dict[str, Any]) -> Response:
        resp = Response()
        if self._client is None:
            resp.diagnostics.add_exception(
                "data source not configured",
                NotConfiguredError("provider 尚未完成配置，无法查询影片"),
            )
            return resp
        try:
            self.schema().validate(config)
        except ValidationError as e:
            resp.diagnostics.add_exception("invalid configuration", e)
            return resp

        imdb_id = config["imdb_id"]
        try:
            record = self._client.film_by_id(imdb_id)
        except ApiDecodeError as e:
            resp.diagnostics.add_exception("error decoding API response", e)
            return resp
        except ApiError as e:
            resp.diagnostics.add_exception("error making OMDb request", e)
            return resp

        resp.state = FilmLookup.from_record(imdb_id, record).to_state()
        return resp
