"""本地影片文件存储

每条影片记录对应 base_dir 下的一个文件:
  - 文件名 = 资源 ID（无扩展名）
  - 内容   = 缩进 JSON（Title / Year / Ratings）

文件本身就是资源的持久状态，不做并发控制，文件系统是唯一的同步点。
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from omdb_provider.core.exceptions import StorageError, ValidationError
from omdb_provider.core.models import FilmRecord
from omdb_provider.utils.yaml_io import atomic_write

logger = logging.getLogger(__name__)

DIR_MODE = 0o755


class FilmFileStore:
    """影片文件存储"""

    def __init__(self, base_dir: str) -> None:
        self.base_dir = Path(base_dir)
        self.base_dir.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)

    def path(self, film_id: str) -> Path:
        """ID 对应的文件路径；拒绝空 ID、NUL 字节与路径穿越"""
        if not film_id or any(c in film_id for c in ("/", "\\", "..", "\x00")):
            raise ValidationError(f"非法的影片 ID: {film_id!r}")
        return self.base_dir / film_id

    def put(self, film_id: str, record: FilmRecord) -> str:
        """写入（或覆盖）影片文件，返回文件路径"""
        path = self.path(film_id)
        atomic_write(path, json.dumps(record.to_json(), indent=2, ensure_ascii=False))
        logger.info("影片文件已写入: %s", path)
        return str(path)

    def get(self, film_id: str) -> FilmRecord | None:
        """读取影片文件，文件不存在返回 None

        Raises:
            StorageError: 文件内容不是合法的影片 JSON
            OSError: 其他读取失败
        """
        path = self.path(film_id)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("影片文件不存在: %s", path)
            return None
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise StorageError(f"影片文件解析失败: {path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"影片文件内容不是对象: {path}")
        try:
            return FilmRecord.from_json(data)
        except TypeError as e:
            raise StorageError(f"影片文件格式错误: {path}: {e}") from e

    def delete(self, film_id: str) -> None:
        """删除影片文件，文件系统错误原样抛出"""
        path = self.path(film_id)
        path.unlink()
        logger.info("影片文件已删除: %s", path)
