"""属性 Schema 定义与校验

描述数据源/资源/Provider 的属性（字符串、对象列表；required / optional /
computed），并据此校验传入的 config / plan / state 字典。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from omdb_provider.core.exceptions import ValidationError

TYPE_STRING = "string"
TYPE_LIST = "list"


@dataclass
class Attribute:
    """单个属性定义"""

    name: str
    type: str = TYPE_STRING
    description: str = ""
    required: bool = False
    optional: bool = False
    computed: bool = False
    sensitive: bool = False
    # TYPE_LIST 的元素对象属性
    nested: list[Attribute] = field(default_factory=list)

    def describe(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.type,
            "description": self.description,
            "required": self.required,
            "optional": self.optional,
            "computed": self.computed,
        }
        if self.sensitive:
            data["sensitive"] = True
        if self.nested:
            data["nested"] = {a.name: a.describe() for a in self.nested}
        return data


@dataclass
class Schema:
    """属性集合"""

    attributes: list[Attribute]
    description: str = ""

    def names(self) -> list[str]:
        return [a.name for a in self.attributes]

    def describe(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "attributes": {a.name: a.describe() for a in self.attributes},
        }

    def validate(self, values: dict[str, Any] | None) -> None:
        """校验输入字典

        Raises:
            ValidationError: details 列出全部问题
        """
        if values is None:
            values = {}
        if not isinstance(values, dict):
            raise ValidationError(
                "输入必须是对象", [f"期望对象，实际为 {type(values).__name__}"],
            )
        problems: list[str] = []
        known = set(self.names())
        for key in values:
            if key not in known:
                problems.append(f"未知属性: {key}")
        for attr in self.attributes:
            problems.extend(_check_attribute(attr, values.get(attr.name), attr.name))
        if problems:
            raise ValidationError("属性校验失败", problems)


def _check_attribute(attr: Attribute, value: Any, path: str) -> list[str]:
    if value is None:
        if attr.required:
            return [f"缺少必填属性: {path}"]
        return []

    if attr.type == TYPE_STRING:
        if not isinstance(value, str):
            return [f"属性 {path} 应为字符串，实际为 {type(value).__name__}"]
        if attr.required and not value.strip():
            return [f"必填属性不能为空: {path}"]
        return []

    if not isinstance(value, list):
        return [f"属性 {path} 应为列表，实际为 {type(value).__name__}"]
    problems: list[str] = []
    nested_names = {n.name for n in attr.nested}
    for i, item in enumerate(value):
        item_path = f"{path}[{i}]"
        if not isinstance(item, dict):
            problems.append(f"属性 {item_path} 应为对象，实际为 {type(item).__name__}")
            continue
        for key in item:
            if key not in nested_names:
                problems.append(f"未知属性: {item_path}.{key}")
        for sub in attr.nested:
            problems.extend(_check_attribute(sub, item.get(sub.name), f"{item_path}.{sub.name}"))
    return problems


def rating_attributes(*, computed: bool) -> list[Attribute]:
    """评分对象的两个字段（source / value）"""
    return [
        Attribute(
            "source", description="Review source",
            optional=not computed, computed=computed,
        ),
        Attribute(
            "value", description="Review value",
            optional=not computed, computed=computed,
        ),
    ]
