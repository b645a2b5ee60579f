"""TextForms 配置对象."""

from dataclasses import dataclass
from typing import Literal, get_args

from .exceptions import TextFormsValueError

OutputMode = Literal["model", "tagged", "plain"]


@dataclass(frozen=True)
class TextFormsConfig:
    """TextForms 解码配置 (不可变).

    在 API 入口层创建, 然后传递给解码器和结果转换函数.

    Attributes:
        output: 解码结果的输出形式.
            - `'model'`: pydantic 值对象 (单值或列表).
            - `'tagged'`: 可直接 JSON 序列化的 `{type, value}` 字典.
            - `'plain'`: 原生 Python 值, 二元值输出为 tuple.
        max_length: 单条消息允许的最大字符数, None 表示不限制.
    """

    output: OutputMode = "model"
    max_length: int | None = None

    @classmethod
    def from_params(
        cls,
        output: OutputMode = "model",
        max_length: int | None = None,
    ) -> "TextFormsConfig":
        """从参数构建配置对象.

        Args:
            output: 输出形式.
            max_length: 单条消息允许的最大字符数.

        Returns:
            TextFormsConfig: 配置对象.

        Raises:
            TextFormsValueError: 如果 `output` 未知或 `max_length` 为负数.
        """
        if output not in get_args(OutputMode):
            raise TextFormsValueError(
                f"output 只能为 {'/'.join(get_args(OutputMode))}, 实际为 {output!r}"
            )
        if max_length is not None and max_length < 0:
            raise TextFormsValueError(f"max_length 不能为负数: {max_length}")

        return cls(output=output, max_length=max_length)

    def accepts(self, message: str) -> bool:
        """消息长度是否在限制范围内."""
        return self.max_length is None or len(message) <= self.max_length
