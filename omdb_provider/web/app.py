"""轻量级 Web API（基于 Flask）

作为 CLI 之外的另一个宿主，通过 HTTP 驱动 provider 的数据源/资源:
  GET    /api/provider               provider 元数据与 schema
  GET    /api/film-by-id/<imdb_id>   数据源查询
  POST   /api/films                  创建影片记录
  GET    /api/films/<id>             读取影片记录
  PUT    /api/films/<id>             更新影片记录
  DELETE /api/films/<id>             删除影片记录

启动方式: omdb serve --port 8888
"""

from __future__ import annotations

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from omdb_provider.core.exceptions import ConfigError, NotFoundError
from omdb_provider.web.blueprints.films_bp import films_bp

logger = logging.getLogger(__name__)

MAX_CONTENT_LENGTH = 1024 * 1024  # 1 MB

app = Flask(__name__)
app.config["MAX_CONTENT_LENGTH"] = MAX_CONTENT_LENGTH
app.register_blueprint(films_bp)


# =========================================================================
# 全局 JSON 错误处理
# =========================================================================


@app.errorhandler(HTTPException)
def handle_http_exception(exc):  # type: ignore[no-untyped-def]
    """将所有 HTTP 异常统一返回 JSON"""
    return jsonify(error=exc.description), exc.code


@app.errorhandler(ConfigError)
def handle_config_error(exc):  # type: ignore[no-untyped-def]
    logger.error("provider 配置错误: %s", exc)
    return jsonify(error=str(exc), code=exc.code), 500


@app.errorhandler(NotFoundError)
def handle_not_found(exc):  # type: ignore[no-untyped-def]
    return jsonify(error=str(exc), code=exc.code), 404


@app.errorhandler(Exception)
def handle_generic_exception(exc):  # type: ignore[no-untyped-def]  # noqa: ARG001
    """捕获未处理异常，返回 500 JSON"""
    logger.exception("未处理的异常")
    return jsonify(error="服务器内部错误"), 500


@app.route("/api/provider")
def api_provider():  # type: ignore[no-untyped-def]
    """provider 元数据与各数据源/资源 schema"""
    from omdb_provider.services.provider import get_provider

    provider = get_provider()
    return jsonify(
        metadata=provider.metadata(),
        schema=provider.schema().describe(),
        data_sources={
            name: factory().schema().describe()
            for name, factory in provider.data_sources().items()
        },
        resources={
            name: factory().schema().describe()
            for name, factory in provider.resources().items()
        },
    )


def run_server(host: str = "127.0.0.1", port: int = 8888) -> None:
    """启动开发服务器；生产环境使用 gunicorn（见 deploy/gunicorn.conf.py）"""
    logger.info("Web API 启动: http://%s:%d", host, port)
    app.run(host=host, port=port)
