"""核心数据模型

两类边界在此显式映射，不依赖反射:
  - JSON 边界: OMDb API 响应 / 本地影片文件（Title / Year / Ratings 大写字段）
  - 状态边界: 数据源/资源的 config / plan / state 字典（snake_case 字段）
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _json_str(data: dict[str, Any], key: str) -> str:
    """取字符串字段；缺失或 null 视为空串，其他类型抛出 TypeError"""
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{key} 应为字符串，实际为 {type(value).__name__}")
    return value


@dataclass
class Rating:
    """单条评分（来源 + 分值）"""

    source: str = ""
    value: str = ""

    def to_json(self) -> dict[str, str]:
        return {"Source": self.source, "Value": self.value}

    @classmethod
    def from_json(cls, data: Any) -> Rating:
        if not isinstance(data, dict):
            raise TypeError(f"评分应为对象，实际为 {type(data).__name__}")
        return cls(source=_json_str(data, "Source"), value=_json_str(data, "Value"))

    def to_state(self) -> dict[str, str]:
        return {"source": self.source, "value": self.value}

    @classmethod
    def from_state(cls, data: dict[str, Any]) -> Rating:
        return cls(source=data.get("source") or "", value=data.get("value") or "")


@dataclass
class FilmRecord:
    """影片 JSON 主体 — OMDb 响应与本地影片文件共用同一结构"""

    title: str = ""
    year: str = ""
    ratings: list[Rating] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        """序列化为 JSON 字典，无评分时省略 Ratings 字段"""
        data: dict[str, Any] = {"Title": self.title, "Year": self.year}
        if self.ratings:
            data["Ratings"] = [r.to_json() for r in self.ratings]
        return data

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> FilmRecord:
        """从 JSON 字典构造；Ratings 缺失或为 null 视为空列表"""
        raw_ratings = data.get("Ratings")
        if raw_ratings is None:
            raw_ratings = []
        if not isinstance(raw_ratings, list):
            raise TypeError(f"Ratings 应为列表，实际为 {type(raw_ratings).__name__}")
        return cls(
            title=_json_str(data, "Title"),
            year=_json_str(data, "Year"),
            ratings=[Rating.from_json(r) for r in raw_ratings],
        )


def ratings_to_state(ratings: list[Rating]) -> list[dict[str, str]]:
    return [r.to_state() for r in ratings]


def ratings_from_state(raw: list[dict[str, Any]] | None) -> list[Rating]:
    return [Rating.from_state(r) for r in (raw or [])]


@dataclass
class FilmLookup:
    """数据源 omdb_film_by_id 的 state"""

    imdb_id: str
    title: str = ""
    year: str = ""
    ratings: list[Rating] = field(default_factory=list)

    @classmethod
    def from_record(cls, imdb_id: str, record: FilmRecord) -> FilmLookup:
        return cls(
            imdb_id=imdb_id, title=record.title,
            year=record.year, ratings=list(record.ratings),
        )

    def to_state(self) -> dict[str, Any]:
        return {
            "imdb_id": self.imdb_id,
            "title": self.title,
            "year": self.year,
            "ratings": ratings_to_state(self.ratings),
        }


@dataclass
class FilmState:
    """资源 omdb_film 的 plan / state"""

    id: str | None = None
    title: str = ""
    year: str = ""
    # 空评分统一为 None，保证写入后读回一致
    ratings: list[Rating] | None = None

    @classmethod
    def from_state(cls, data: dict[str, Any]) -> FilmState:
        return cls(
            id=data.get("id") or None,
            title=data.get("title") or "",
            year=data.get("year") or "",
            ratings=ratings_from_state(data.get("ratings")) or None,
        )

    @classmethod
    def from_record(cls, film_id: str, record: FilmRecord) -> FilmState:
        return cls(
            id=film_id, title=record.title, year=record.year,
            ratings=list(record.ratings) or None,
        )

    def to_record(self) -> FilmRecord:
        return FilmRecord(
            title=self.title, year=self.year, ratings=list(self.ratings or []),
        )

    def to_state(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "year": self.year,
            "ratings": None if self.ratings is None else ratings_to_state(self.ratings),
        }


@dataclass(frozen=True)
class ProviderData:
    """Provider.configure 产出的只读配置快照，下发给所有数据源/资源实例"""

    api_key: str
    api_base_url: str
    local_dir: str
