"""Web 层统一响应辅助函数

将生命周期 Response（state + diagnostics）映射为 JSON 响应和 HTTP 状态码。
"""

from __future__ import annotations

from flask import Response as FlaskResponse
from flask import jsonify

from omdb_provider.core.diagnostics import Response

# 这些诊断码表示上游 OMDb API 失败，而非请求本身有误
_UPSTREAM_CODES = frozenset(("API_ERROR", "API_DECODE_ERROR"))


def ok(data: dict, status: int = 200) -> tuple[FlaskResponse, int] | FlaskResponse:
    """成功响应"""
    if status == 200:
        return jsonify(data)
    return jsonify(data), status


def not_found(resource: str) -> tuple[FlaskResponse, int]:
    """资源不存在"""
    return jsonify(error=f"{resource}不存在"), 404


def bad_request(message: str) -> tuple[FlaskResponse, int]:
    """请求参数错误"""
    return jsonify(error=message), 400


def from_response(
    resp: Response, *, success_status: int = 200, resource: str = "影片记录",
) -> tuple[FlaskResponse, int] | FlaskResponse:
    """生命周期 Response → JSON

    - 有错误诊断: OMDb 无此影片 404，上游 API 失败 502，其余 400
    - removed:    404
    - 其余:       state + 警告诊断
    """
    errors = resp.diagnostics.errors()
    if errors:
        codes = {d.code for d in errors}
        if "FILM_NOT_FOUND" in codes:
            status = 404
        elif codes & _UPSTREAM_CODES:
            status = 502
        else:
            status = 400
        return jsonify(
            error=errors[0].summary,
            diagnostics=resp.diagnostics.to_list(),
        ), status
    if resp.removed:
        return not_found(resource)
    return ok(
        {"state": resp.state, "diagnostics": resp.diagnostics.to_list()},
        success_status,
    )
