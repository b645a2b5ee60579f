"""测试 TextForms 值类型、类型判定与类型转换."""

import pytest
from pydantic import TypeAdapter, ValidationError

from textforms import (
    Integer,
    Numeric,
    Pair,
    String,
    TextFormsValueError,
    Value,
    classify,
    coerce,
    infer,
)

CLASSIFY_CASES = [
    ("3", "integer", "整数"),
    ("007", "integer", "前导零"),
    ("3.0", "numeric", "小数"),
    ("3.", "numeric", "小数部分为空"),
    (" 3.14 ", "numeric", "两侧空白"),
    ("2.15abc", "string", "部分匹配"),
    ("One", "string", "文本"),
    ("TEST 3.1", "string", "文本加数字"),
]


@pytest.mark.parametrize(
    ("text", "expected", "desc"),
    CLASSIFY_CASES,
    ids=[c[2] for c in CLASSIFY_CASES],
)
def test_classify(text: str, expected: str, desc: str) -> None:
    """classify() 应区分整数, 小数和字符串."""
    assert classify(text) == expected


def test_coerce_integer() -> None:
    """coerce('integer') 应按十进制解析."""
    assert coerce("integer", "007") == Integer(value=7)


def test_coerce_numeric_empty_fraction() -> None:
    """coerce('numeric') 应接受小数部分为空的字面量."""
    value = coerce("numeric", "3.")

    assert isinstance(value, Numeric)
    assert value.value == 3.0


def test_coerce_string_unchanged() -> None:
    """coerce('string') 应原样保留文本 (包括空白)."""
    assert coerce("string", " a b ") == String(value=" a b ")


def test_coerce_unknown_kind() -> None:
    """未知的值类型应抛出 TextFormsValueError."""
    with pytest.raises(TextFormsValueError):
        coerce("boolean", "1")  # type: ignore[arg-type]


def test_infer() -> None:
    """infer() 应组合 classify() 和 coerce()."""
    assert infer("3") == Integer(value=3)
    assert infer("3.0") == Numeric(value=3.0)
    assert infer("abc") == String(value="abc")


# --- 值对象测试 ---


def test_values_are_frozen() -> None:
    """值对象不可修改."""
    value = Integer(value=1)

    with pytest.raises(ValidationError):
        value.value = 2  # type: ignore[misc]


def test_value_dump_tagged_form() -> None:
    """model_dump() 应输出 {type, value} 形式."""
    assert Integer(value=1).model_dump() == {"type": "integer", "value": 1}
    assert String(value="x").model_dump() == {"type": "string", "value": "x"}


def test_pair_order_and_dump() -> None:
    """二元值应保持左右顺序, JSON 模式输出列表."""
    pair = Pair(values=(Integer(value=2), String(value="2.15abc")))

    assert pair.left == Integer(value=2)
    assert pair.right == String(value="2.15abc")
    assert pair.model_dump(mode="json") == {
        "type": "pair",
        "values": [
            {"type": "integer", "value": 2},
            {"type": "string", "value": "2.15abc"},
        ],
    }


def test_value_discriminated_union() -> None:
    """Value 应按 type 字段还原为对应的值对象."""
    adapter = TypeAdapter(Value)

    value = adapter.validate_python(
        {
            "type": "pair",
            "values": [
                {"type": "integer", "value": 0},
                {"type": "numeric", "value": 3.1},
            ],
        }
    )

    assert value == Pair(values=(Integer(value=0), Numeric(value=3.1)))


def test_pair_rejects_nested_pair() -> None:
    """二元值的元素只能是单值."""
    inner = Pair(values=(Integer(value=1), Integer(value=2)))

    with pytest.raises(ValidationError):
        Pair(values=(inner, Integer(value=3)))  # type: ignore[arg-type]


def test_coerce_long_integer() -> None:
    """超过解释器整数字符串转换限制的整数文本也能解析."""
    value = coerce("integer", "9" * 5000)

    assert isinstance(value, Integer)
    assert value.value == 10**5000 - 1


def test_coerce_long_integer_with_padding() -> None:
    """超长整数文本两侧的空白应被忽略."""
    assert coerce("integer", " " + "1" + "0" * 4999 + " ").value == 10**4999


def test_coerce_long_non_digit_text() -> None:
    """超长的非数字文本仍按普通 ValueError 拒绝."""
    with pytest.raises(ValueError):
        coerce("integer", "1" * 3000 + " " + "1" * 3000)
