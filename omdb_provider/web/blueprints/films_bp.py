"""影片 API Blueprint（数据源 film_by_id + 资源 film）"""

from __future__ import annotations

from flask import Blueprint, request

from omdb_provider.services.provider import TYPE_NAME, get_provider
from omdb_provider.web.responses import bad_request, from_response, not_found

films_bp = Blueprint("films", __name__, url_prefix="/api")

DATA_SOURCE = f"{TYPE_NAME}_film_by_id"
RESOURCE = f"{TYPE_NAME}_film"


def _film_resource():  # type: ignore[no-untyped-def]
    return get_provider().new_resource(RESOURCE)


def _json_body() -> dict | None:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else None


@films_bp.route("/film-by-id/<imdb_id>", methods=["GET"])
def film_by_id(imdb_id: str):  # type: ignore[no-untyped-def]
    ds = get_provider().new_data_source(DATA_SOURCE)
    return from_response(ds.read({"imdb_id": imdb_id}), resource="影片")


@films_bp.route("/films", methods=["POST"])
def film_create():  # type: ignore[no-untyped-def]
    plan = _json_body()
    if plan is None:
        return bad_request("请求体必须是 JSON 对象")
    # id 由服务端生成
    plan.pop("id", None)
    return from_response(_film_resource().create(plan), success_status=201)


@films_bp.route("/films/<film_id>", methods=["GET"])
def film_read(film_id: str):  # type: ignore[no-untyped-def]
    return from_response(_film_resource().read({"id": film_id}))


@films_bp.route("/films/<film_id>", methods=["PUT"])
def film_update(film_id: str):  # type: ignore[no-untyped-def]
    plan = _json_body()
    if plan is None:
        return bad_request("请求体必须是 JSON 对象")
    res = _film_resource()
    # ID 只能由 create 生成，不允许借 PUT 新建记录
    current = res.read({"id": film_id})
    if not current.ok or current.removed:
        return from_response(current)
    return from_response(res.update(current.state, plan))


@films_bp.route("/films/<film_id>", methods=["DELETE"])
def film_delete(film_id: str):  # type: ignore[no-untyped-def]
    resp = _film_resource().delete({"id": film_id})
    if resp.ok:
        return "", 204
    # 文件不存在时 unlink 抛出 FileNotFoundError
    if any(d.code == "FileNotFoundError" for d in resp.diagnostics):
        return not_found("影片记录")
    return from_response(resp)
