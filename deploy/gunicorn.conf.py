"""Gunicorn 生产配置

用法:
  OMDB_API_KEY=xxxx gunicorn --config deploy/gunicorn.conf.py omdb_provider.web.app:app
"""

import os

# ---------- 网络 ----------
bind = os.getenv("GUNICORN_BIND", "127.0.0.1:8888")

# ---------- 并发 ----------
# 影片文件无并发控制，默认单进程
workers = int(os.getenv("GUNICORN_WORKERS", "1"))
threads = int(os.getenv("GUNICORN_THREADS", "4"))
worker_class = "gthread"
timeout = 60

# ---------- 日志 ----------
accesslog = os.getenv("GUNICORN_ACCESS_LOG", "-")
errorlog = os.getenv("GUNICORN_ERROR_LOG", "-")
loglevel = os.getenv("GUNICORN_LOG_LEVEL", "info")
