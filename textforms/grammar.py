"""TextForms 文法定义.

该模块提供预编译的正则表达式集合 `Grammar`. 文法在构建后不可变,
可以被任意数量的解码器和线程只读共享.
"""

import re
from dataclasses import dataclass

# 键允许的字符: ASCII 字母, `_`, `.`, `*`, `-` (不含数字)
KEY_CHARSET = r"[A-Za-z_.*\-]+"

# 数字字面量: 一个或多个数字, 可选跟随 `.` 和零个或多个数字 (如 "3.")
NUMERIC_LITERAL = r"[0-9]+(?:\.[0-9]*)?"

BOUNDARY = r"\s*#\s*"


@dataclass(frozen=True)
class Grammar:
    """TextForms 的预编译文法.

    Attributes:
        boundary: 字段分隔符 (两侧可带空白的 `#`).
        numeric: 数字字面量.
        numeric_only: 整个字符串 (允许两侧空白) 为数字字面量.
        decimal: 判断数字字面量是否为小数.
        field: 字段结构, 捕获组依次为 键, 紧贴键的数字后缀, 空白后的剩余文本.
    """

    boundary: re.Pattern[str]
    numeric: re.Pattern[str]
    numeric_only: re.Pattern[str]
    decimal: re.Pattern[str]
    field: re.Pattern[str]

    @classmethod
    def build(cls) -> "Grammar":
        """编译全部正则表达式并构建文法对象."""
        numeric = re.compile(NUMERIC_LITERAL)

        # 组合表达式直接嵌入已编译表达式的源文本
        numeric_only = re.compile(rf"\s*{numeric.pattern}\s*")
        field = re.compile(rf"\s*({KEY_CHARSET})({numeric.pattern})?(?:\s+(.+))?")

        return cls(
            boundary=re.compile(BOUNDARY),
            numeric=numeric,
            numeric_only=numeric_only,
            decimal=re.compile(r"\."),
            field=field,
        )

    def is_numeric(self, text: str) -> bool:
        """`text` 是否完整匹配数字字面量 (允许两侧空白)."""
        return self.numeric_only.fullmatch(text) is not None


DEFAULT_GRAMMAR = Grammar.build()
