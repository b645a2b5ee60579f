"""TextForms 值类型模块.

本模块定义了解码结果中的带标签值 (`Integer`, `Numeric`, `String`, `Pair`)
以及类型判定 (`classify`) 和类型转换 (`coerce`).
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import TextFormsValueError
from .grammar import DEFAULT_GRAMMAR, Grammar

ValueKind = Literal["integer", "numeric", "string"]


class _Tagged(BaseModel):
    model_config = ConfigDict(frozen=True)


class Integer(_Tagged):
    """整数值."""

    type: Literal["integer"] = "integer"
    value: int


class Numeric(_Tagged):
    """小数值 (包括小数部分为空的字面量, 如 "3.")."""

    type: Literal["numeric"] = "numeric"
    value: float


class String(_Tagged):
    """字符串值, 保留捕获到的原始文本."""

    type: Literal["string"] = "string"
    value: str


TypedValue = Annotated[Integer | Numeric | String, Field(discriminator="type")]


class Pair(_Tagged):
    """二元值.

    当字段名后紧贴数字后缀, 且之后还有以空白分隔的文本时产生.
    `values[0]` 来自数字后缀, `values[1]` 来自剩余文本, 顺序具有语义
    (如序列下标与序列值), 不得交换.

    Examples:
        >>> Pair(values=(Integer(value=2), String(value="2.15abc"))).model_dump()
        {'type': 'pair', 'values': ({'type': 'integer', 'value': 2}, {'type': 'string', 'value': '2.15abc'})}
    """

    type: Literal["pair"] = "pair"
    values: tuple[TypedValue, TypedValue]

    @property
    def left(self) -> Integer | Numeric | String:
        return self.values[0]

    @property
    def right(self) -> Integer | Numeric | String:
        return self.values[1]


Value = Annotated[Integer | Numeric | String | Pair, Field(discriminator="type")]


def classify(text: str, grammar: Grammar = DEFAULT_GRAMMAR) -> ValueKind:
    """判定字符串 `text` 的 TextForms 类型.

    只有整个字符串 (去除两侧空白后) 都是数字字面量时才视为数字;
    部分匹配一律视为字符串.
    """
    if grammar.is_numeric(text):
        if grammar.decimal.search(text):
            return "numeric"
        return "integer"
    return "string"


# 单次 int() 转换的位数, 低于解释器的整数字符串转换限制
_INT_CHUNK_DIGITS = 1000


def _parse_int(text: str) -> int:
    """按十进制解析整数文本, 超长文本分段转换."""
    digits = text.strip()
    if len(digits) <= _INT_CHUNK_DIGITS:
        return int(digits, 10)
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"invalid literal for int() with base 10: {text[:32]!r}...")

    value = 0
    for start in range(0, len(digits), _INT_CHUNK_DIGITS):
        chunk = digits[start : start + _INT_CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk, 10)
    return value


def coerce(kind: ValueKind, text: str) -> Integer | Numeric | String:
    """将类型为 `kind` 的字符串 `text` 转换为对应的值对象.

    数字类型的转换只应作用于已经通过 `classify` 判定的文本.

    Raises:
        TextFormsValueError: 如果 `kind` 不是已知的值类型.
    """
    if kind == "integer":
        return Integer(value=_parse_int(text))
    if kind == "numeric":
        return Numeric(value=float(text))
    if kind == "string":
        return String(value=text)
    raise TextFormsValueError(f"Unknown value kind: {kind!r}")


def infer(text: str, grammar: Grammar = DEFAULT_GRAMMAR) -> Integer | Numeric | String:
    """判定类型并完成转换."""
    return coerce(classify(text, grammar), text)
