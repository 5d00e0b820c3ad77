"""统一异常体系

所有业务异常继承 ProviderError。数据源/资源的生命周期方法在边界处捕获，
转换为 Diagnostic 挂到响应上；CLI / Web 层据 code 输出友好提示。
"""

from __future__ import annotations


class ProviderError(Exception):
    """Provider 基础异常"""

    code: str = "UNKNOWN"

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ConfigError(ProviderError):
    """Provider 配置缺失或内容无效"""

    code = "CONFIG_ERROR"


class ValidationError(ProviderError):
    """输入数据校验失败"""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, details: list[str] | None = None) -> None:
        super().__init__(message)
        self.details = details or []


class NotConfiguredError(ProviderError):
    """数据源/资源在 Provider 配置完成前被调用"""

    code = "NOT_CONFIGURED"


class NotFoundError(ProviderError):
    """指定的数据源或资源类型不存在"""

    code = "NOT_FOUND"


class ApiError(ProviderError):
    """OMDb API 请求失败（网络错误、HTTP 错误或 API 返回失败）"""

    code = "API_ERROR"


class ApiDecodeError(ApiError):
    """OMDb API 响应无法解析为 JSON"""

    code = "API_DECODE_ERROR"


class FilmNotFoundError(ApiError):
    """OMDb 返回 Response=False（IMDb ID 无对应影片）"""

    code = "FILM_NOT_FOUND"


class StorageError(ProviderError):
    """本地影片文件内容损坏或无法解析"""

    code = "STORAGE_ERROR"
