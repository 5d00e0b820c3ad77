"""诊断信息测试"""

from omdb_provider.core.diagnostics import Diagnostics, Response
from omdb_provider.core.exceptions import ApiError, ValidationError


class TestDiagnostics:
    def test_warning_is_not_error(self) -> None:
        d = Diagnostics()
        d.add_warning("heads up")
        assert not d.has_error()

    def test_add_exception_uses_provider_code(self) -> None:
        d = Diagnostics()
        d.add_exception("request failed", ApiError("网络错误: timeout"))
        assert d.has_error()
        assert d[0].code == "API_ERROR"
        assert d[0].detail == "网络错误: timeout"

    def test_add_exception_expands_validation_details(self) -> None:
        d = Diagnostics()
        d.add_exception("invalid", ValidationError("x", ["a", "b"]))
        assert [x.detail for x in d] == ["a", "b"]

    def test_add_exception_os_error_code(self) -> None:
        d = Diagnostics()
        d.add_exception("delete error", FileNotFoundError(2, "No such file", "/x"))
        assert d[0].code == "FileNotFoundError"
        assert "No such file" in d[0].detail


class TestResponse:
    def test_to_dict(self) -> None:
        r = Response(state={"id": "1"})
        r.diagnostics.add_warning("w")
        data = r.to_dict()
        assert r.ok
        assert data["state"] == {"id": "1"}
        assert data["removed"] is False
        assert data["diagnostics"][0]["severity"] == "warning"
