"""属性 Schema 校验测试"""

import pytest

from omdb_provider.core.exceptions import ValidationError
from omdb_provider.core.schema import TYPE_LIST, Attribute, Schema, rating_attributes


@pytest.fixture()
def schema() -> Schema:
    return Schema(attributes=[
        Attribute("id", computed=True),
        Attribute("title", required=True),
        Attribute(
            "ratings", type=TYPE_LIST, optional=True,
            nested=rating_attributes(computed=False),
        ),
    ])


class TestSchemaValidate:
    def test_valid(self, schema: Schema) -> None:
        schema.validate({"title": "X", "ratings": [{"source": "a", "value": "b"}]})

    def test_null_optional_and_computed_accepted(self, schema: Schema) -> None:
        schema.validate({"id": None, "title": "X", "ratings": None})

    def test_missing_required(self, schema: Schema) -> None:
        with pytest.raises(ValidationError) as exc:
            schema.validate({})
        assert exc.value.details == ["缺少必填属性: title"]

    def test_blank_required(self, schema: Schema) -> None:
        with pytest.raises(ValidationError, match="属性校验失败") as exc:
            schema.validate({"title": "  "})
        assert "必填属性不能为空: title" in exc.value.details

    def test_wrong_types(self, schema: Schema) -> None:
        with pytest.raises(ValidationError) as exc:
            schema.validate({"title": 1999, "ratings": {"source": "a"}})
        assert len(exc.value.details) == 2

    def test_unknown_attribute(self, schema: Schema) -> None:
        with pytest.raises(ValidationError) as exc:
            schema.validate({"title": "X", "director": "Y"})
        assert exc.value.details == ["未知属性: director"]

    def test_nested_problems_have_paths(self, schema: Schema) -> None:
        with pytest.raises(ValidationError) as exc:
            schema.validate({"title": "X", "ratings": ["bad", {"source": 1, "score": "x"}]})
        details = exc.value.details
        assert "属性 ratings[0] 应为对象，实际为 str" in details
        assert "未知属性: ratings[1].score" in details
        assert "属性 ratings[1].source 应为字符串，实际为 int" in details

    def test_non_dict_input(self, schema: Schema) -> None:
        with pytest.raises(ValidationError, match="输入必须是对象"):
            schema.validate(["title"])  # type: ignore[arg-type]


class TestSchemaDescribe:
    def test_describe_nested(self, schema: Schema) -> None:
        desc = schema.describe()
        assert desc["attributes"]["title"]["required"] is True
        assert set(desc["attributes"]["ratings"]["nested"]) == {"source", "value"}
