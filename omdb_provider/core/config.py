"""集中配置管理

支持从 YAML 文件加载 + 环境变量覆盖 + 编程式覆盖。
配置只在进程启动时读取一次，之后以 ProviderData 只读快照的形式下发。
"""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import asdict, dataclass, field

from omdb_provider.utils.yaml_io import load_yaml

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "https://www.omdbapi.com"
DEFAULT_LOCAL_DIR = os.path.join(tempfile.gettempdir(), "omdb")
DEFAULT_CONFIG_FILE = "configs/default.yml"

# 环境变量 -> 配置字段
_ENV_OVERRIDES = {
    "OMDB_API_KEY": "api_key",
    "OMDB_API_BASE_URL": "api_base_url",
    "OMDB_LOCAL_DIR": "local_dir",
}


@dataclass
class Config:
    """Provider 配置"""

    api_key: str = ""
    api_base_url: str = DEFAULT_API_BASE_URL
    local_dir: str = DEFAULT_LOCAL_DIR

    # Web 服务
    web_host: str = "127.0.0.1"
    web_port: int = 8888

    # 自定义扩展 (放不到字段里的配置项)
    extra: dict = field(default_factory=dict)

    @classmethod
    def from_file(cls, path: str = DEFAULT_CONFIG_FILE) -> Config:
        """从 YAML 文件加载配置，不存在则返回默认；环境变量优先于文件"""
        data = load_yaml(path)
        known = {f for f in cls.__dataclass_fields__ if f != "extra"}
        matched = {k: v for k, v in data.items() if k in known}
        extra = {k: v for k, v in data.items() if k not in known}
        for env_name, attr in _ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value:
                matched[attr] = value
        cfg = cls(**matched)
        cfg.extra = extra
        return cfg

    def provider_block(self) -> dict[str, str]:
        """Provider 配置块（对应 provider schema 的三个属性）"""
        return {
            "api_key": self.api_key,
            "api_base_url": self.api_base_url,
            "local_dir": self.local_dir,
        }

    def to_dict(self) -> dict:
        data = asdict(self)
        if data["api_key"]:
            data["api_key"] = "***"
        return data


# 全局单例，首次 import 时不加载文件；由 CLI / Web 入口显式初始化
_current: Config | None = None


def get_config() -> Config:
    """获取当前配置（未初始化则从默认文件 + 环境变量加载）"""
    global _current  # noqa: PLW0603
    if _current is None:
        _current = Config.from_file()
    return _current


def init_config(path: str = DEFAULT_CONFIG_FILE) -> Config:
    """从文件初始化全局配置"""
    global _current  # noqa: PLW0603
    _current = Config.from_file(path)
    logger.info("配置已加载: %s", path)
    return _current
