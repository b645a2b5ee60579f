"""TextForms 值判定.

把字段解析得到的 (数字后缀, 剩余文本) 转换为单个带标签值或二元值.
"""

from .grammar import DEFAULT_GRAMMAR, Grammar
from .types import Integer, Numeric, Pair, String, classify, coerce, infer


def disambiguate(
    numeric: str | None,
    other: str | None,
    grammar: Grammar = DEFAULT_GRAMMAR,
) -> Integer | Numeric | String | Pair | None:
    """根据捕获结果确定字段的值.

    判定顺序:
        1. 数字后缀和剩余文本同时存在: 输出二元值 (数字后缀在前).
           字段名以数字结尾、同一字段携带多个值、序列中的单个元素
           (下标加值) 在文法上无法区分, 这里总是输出二元形式.
        2. 只有剩余文本且它是数字: 视为数字后缀 (写入方在键和数值间加了空白).
        3. 存在数字后缀: 输出整数或小数.
        4. 只有剩余文本: 原样输出字符串.
        5. 两者都不存在: 返回 None, 该字段不记录.

    Args:
        numeric: 紧贴字段名的数字后缀.
        other: 以空白分隔的剩余文本 (纯空白已被视为不存在).
        grammar: 使用的文法.

    Returns:
        值对象, 或 None (字段只有键).
    """
    if numeric is not None and other is not None:
        return Pair(values=(infer(numeric, grammar), infer(other, grammar)))

    if other and classify(other, grammar) != "string":
        numeric, other = other, None

    if numeric is not None:
        # 按文法, 这里的类型不会是 string
        return coerce(classify(numeric, grammar), numeric)

    if other is not None:
        return String(value=other)

    return None
