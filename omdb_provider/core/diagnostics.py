"""诊断信息与统一响应模型

生命周期方法不向调用方抛出预期内的失败，而是把错误/警告挂在响应的
diagnostics 上；调用方根据 has_error() 决定是否中止。
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from omdb_provider.core.exceptions import ProviderError, ValidationError

SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"


@dataclass
class Diagnostic:
    """单条诊断"""

    severity: str
    summary: str
    detail: str = ""
    code: str = ""

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


class Diagnostics(list):
    """诊断列表"""

    def add_error(self, summary: str, detail: str = "", code: str = "") -> None:
        self.append(Diagnostic(SEVERITY_ERROR, summary, detail, code))

    def add_warning(self, summary: str, detail: str = "", code: str = "") -> None:
        self.append(Diagnostic(SEVERITY_WARNING, summary, detail, code))

    def add_exception(self, summary: str, exc: BaseException) -> None:
        """将异常转换为错误诊断；ValidationError 的 details 逐条展开"""
        code = exc.code if isinstance(exc, ProviderError) else type(exc).__name__
        if isinstance(exc, ValidationError) and exc.details:
            for detail in exc.details:
                self.add_error(summary, detail, code)
            return
        self.add_error(summary, str(exc), code)

    def has_error(self) -> bool:
        return any(d.severity == SEVERITY_ERROR for d in self)

    def errors(self) -> list[Diagnostic]:
        return [d for d in self if d.severity == SEVERITY_ERROR]

    def to_list(self) -> list[dict[str, str]]:
        return [d.to_dict() for d in self]


@dataclass
class Response:
    """数据源/资源生命周期方法的统一返回值

    state:   新 state（失败或资源已移除时为 None）
    removed: 资源已在外部被删除，调用方应将其从 state 中移除
    """

    state: dict[str, Any] | None = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)
    removed: bool = False

    @property
    def ok(self) -> bool:
        return not self.diagnostics.has_error()

    def to_dict(self) -> dict[str, Any]:
        return {
            "state": self.state,
            "removed": self.removed,
            "diagnostics": self.diagnostics.to_list(),
        }
