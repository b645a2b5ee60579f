"""测试 TextForms 字段解析."""

import pytest

from textforms import RawField, parse_field

FIELD_CASES = [
    ("INT 1", RawField("INT", None, "1"), "空白分隔的值"),
    ("NUM1.0", RawField("NUM", "1.0", None), "紧贴的小数"),
    ("PI3.14", RawField("PI", "3.14", None), "紧贴的小数 PI"),
    ("STR A String Value", RawField("STR", None, "A String Value"), "多词字符串"),
    ("SEQ.0 3.1", RawField("SEQ.", "0", "3.1"), "键包含点号"),
    ("NAME2 2.15abc", RawField("NAME", "2", "2.15abc"), "数字后缀加文本"),
    ("  key*_-x", RawField("key*_-x", None, None), "前导空白与特殊键字符"),
    ("X3.", RawField("X", "3.", None), "小数部分为空"),
    ("A,1", RawField("A", None, None), "键后是无法识别的字符"),
]


@pytest.mark.parametrize(
    ("raw", "expected", "desc"),
    FIELD_CASES,
    ids=[c[2] for c in FIELD_CASES],
)
def test_parse_field(raw: str, expected: RawField, desc: str) -> None:
    """parse_field() 应返回键, 数字后缀和剩余文本三个捕获."""
    assert parse_field(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["", "   ", "123 abc", "#", "=value"],
    ids=["空串", "纯空白", "数字开头", "分隔符", "符号开头"],
)
def test_parse_field_no_match(raw: str) -> None:
    """空串或不以合法键字符开头的子串应返回 None."""
    assert parse_field(raw) is None


def test_whitespace_only_other_is_absent() -> None:
    """纯空白的剩余文本应视为不存在."""
    field = parse_field("KEY5   ")

    assert field == RawField("KEY", "5", None)


def test_bare_key_with_trailing_spaces() -> None:
    """只有键和尾随空白时两个可选捕获都不存在."""
    field = parse_field("KEY    ")

    assert field is not None
    assert field.numeric is None
    assert field.other is None


def test_other_keeps_internal_and_trailing_text() -> None:
    """剩余文本应原样保留 (不做额外裁剪)."""
    field = parse_field("MSG hello  world ")

    assert field is not None
    assert field.other == "hello  world "


def test_digits_are_not_key_characters() -> None:
    """键不包含数字, 数字紧贴键时成为数字后缀."""
    field = parse_field("ab12cd")

    assert field is not None
    assert field.key == "ab"
    assert field.numeric == "12"
    assert field.other is None


def test_canonical_key() -> None:
    """canonical_key 应为大写的键."""
    field = parse_field("sEq.x 1")

    assert field is not None
    assert field.key == "sEq.x"
    assert field.canonical_key == "SEQ.X"
