"""TextForms 字段切分与字段解析.

消息首先按分隔符切分为原始字段 (`split_fields`), 然后逐个匹配字段文法
(`parse_field`). 无法匹配的字段返回 None, 由调用方直接跳过.
"""

from typing import NamedTuple

from .grammar import DEFAULT_GRAMMAR, Grammar


class RawField(NamedTuple):
    """字段文法的三个捕获结果.

    Attributes:
        key: 字段名 (非空, 保持原始大小写).
        numeric: 紧贴字段名的数字后缀, 没有则为 None.
        other: 字段名 (或数字后缀) 之后以空白分隔的剩余文本, 没有则为 None.
    """

    key: str
    numeric: str | None
    other: str | None

    @property
    def canonical_key(self) -> str:
        """用于结果查找的规范键 (大写)."""
        return self.key.upper()


def split_fields(message: str, grammar: Grammar = DEFAULT_GRAMMAR) -> list[str]:
    """按分隔符切分消息.

    保留所有子串, 包括连续分隔符或首尾分隔符产生的空串.
    """
    return grammar.boundary.split(message)


def parse_field(raw: str, grammar: Grammar = DEFAULT_GRAMMAR) -> RawField | None:
    """从子串起始位置 (跳过前导空白) 匹配字段文法.

    Args:
        raw: 单个原始字段.
        grammar: 使用的文法.

    Returns:
        RawField | None: 匹配结果; 空串或不以合法键字符开头时返回 None.
    """
    m = grammar.field.match(raw)
    if m is None:
        return None

    key, numeric, other = m.group(1, 2, 3)

    # 纯空白的剩余文本视为不存在, 避免形成二元值
    if other is not None and not other.strip():
        other = None

    return RawField(key, numeric, other)
