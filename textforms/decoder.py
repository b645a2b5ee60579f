"""TextForms解码器实现.

该模块提供 `TextFormsDecoder`: 将消息切分为字段, 逐个解析并判定值,
最后按规范键累积到解码器独占的结果缓冲区中.
"""

from collections.abc import Mapping

from typing_extensions import Self

from .config import TextFormsConfig
from .disambiguate import disambiguate
from .exceptions import TextFormsDecodeError, TextFormsTypeError
from .grammar import DEFAULT_GRAMMAR, Grammar
from .log import get_excerpt, logger
from .parser import parse_field, split_fields
from .result import ResultBuffer, ResultEntry


class TextFormsDecoder:
    """TextForms 消息解码器.

    结果缓冲区在多次 `parse` 调用之间不会自动清空: 一条逻辑消息对应
    一次 `reset` 加上一次或多次 `parse`. 文法对象不可变, 可以在多个解码器
    之间共享; 缓冲区则不能, 并发调用方应各自持有解码器实例.

    Examples:
        >>> decoder = TextFormsDecoder()
        >>> decoder.parse("INT 1# PI3.14").result()["PI"]
        Single(value=Numeric(type='numeric', value=3.14))
    """

    __slots__ = ("_buffer", "_config", "_grammar")

    _grammar: Grammar
    _config: TextFormsConfig
    _buffer: ResultBuffer

    def __init__(
        self,
        grammar: Grammar | None = None,
        config: TextFormsConfig | None = None,
    ):
        """初始化解码器.

        Args:
            grammar: 使用的文法, 默认为共享的 `DEFAULT_GRAMMAR`.
            config: 解码配置.
        """
        self._grammar = grammar if grammar is not None else DEFAULT_GRAMMAR
        self._config = config if config is not None else TextFormsConfig()
        self._buffer = ResultBuffer()

    @property
    def grammar(self) -> Grammar:
        return self._grammar

    @property
    def config(self) -> TextFormsConfig:
        return self._config

    def parse(self, message: str, suppress_log: bool = False) -> Self:
        """解码消息并将结果累积到缓冲区.

        无法匹配字段文法的字段会被跳过, 不影响其余字段.

        Args:
            message: TextForms 编码的消息.
            suppress_log: 是否关闭调试日志.

        Returns:
            Self: 解码器本身, 便于链式调用.

        Raises:
            TextFormsTypeError: 如果消息不是 str.
            TextFormsDecodeError: 如果消息长度超出 `max_length`.
        """
        if not isinstance(message, str):
            raise TextFormsTypeError(
                f"Message must be str, got {type(message).__name__}"
            )
        if not self._config.accepts(message):
            raise TextFormsDecodeError(
                f"Message length {len(message)} exceeds max limit "
                f"{self._config.max_length}"
            )

        if not suppress_log:
            logger.debug("[TextFormsDecoder] 开始解码 %d 字符", len(message))

        recorded = 0
        for index, raw in enumerate(split_fields(message, self._grammar)):
            field = parse_field(raw, self._grammar)
            if field is None:
                if not suppress_log:
                    logger.debug(
                        "[TextFormsDecoder] 跳过字段 %d: %s", index, get_excerpt(raw)
                    )
                continue

            value = disambiguate(field.numeric, field.other, self._grammar)
            if value is None:
                continue

            self._buffer.insert(field.canonical_key, value)
            recorded += 1

        if not suppress_log:
            logger.debug("[TextFormsDecoder] 成功记录 %d 个值", recorded)
        return self

    decode = parse

    def reset(self) -> None:
        """清空结果缓冲区, 丢弃之前所有 `parse` 的结果."""
        self._buffer.reset()

    clear = reset

    def result(self) -> Mapping[str, ResultEntry]:
        """返回结果缓冲区的只读视图 (反映调用时及之后的状态)."""
        return self._buffer.view()

    view = result

    def snapshot(self) -> dict[str, ResultEntry]:
        """返回结果缓冲区的拷贝."""
        return self._buffer.snapshot()
