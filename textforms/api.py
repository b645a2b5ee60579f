"""TextForms API模块.

提供用于 TextForms 解码的高级接口 `loads`, `load`, 以及结果转换函数
`to_python` 和 `dumps_json`.
"""

import json
from collections.abc import Callable, Mapping
from typing import IO, Any

from .config import OutputMode, TextFormsConfig
from .decoder import TextFormsDecoder
from .exceptions import TextFormsTypeError, TextFormsValueError
from .result import Multiple, ResultEntry
from .types import Pair


def _plain_value(value: Any) -> Any:
    """将值对象转换为原生 Python 值 (二元值转换为 tuple)."""
    if isinstance(value, Pair):
        return (value.left.value, value.right.value)
    return value.value


def _tagged_value(value: Any) -> Any:
    """将值对象转换为 `{type, value}` 字典."""
    return value.model_dump(mode="json")


_CONVERTERS: dict[str, Callable[[Any], Any]] = {
    "model": lambda v: v,
    "tagged": _tagged_value,
    "plain": _plain_value,
}


def _convert_entry(entry: ResultEntry, output: OutputMode) -> Any:
    convert = _CONVERTERS[output]
    if isinstance(entry, Multiple):
        return [convert(v) for v in entry.values]
    return convert(entry.value)


def to_python(
    entries: Mapping[str, ResultEntry], output: OutputMode = "model"
) -> dict[str, Any]:
    """将结果映射转换为指定的输出形式.

    - `'model'`: 单值为值对象, 重复键为值对象列表.
    - `'tagged'`: `{"type": ..., "value": ...}` 字典 (二元值为
      `{"type": "pair", "values": [...]}`), 可直接 JSON 序列化.
    - `'plain'`: 原生 `int`/`float`/`str`, 二元值为 `(left, right)`.

    Args:
        entries: 解码器的结果映射.
        output: 输出形式.

    Returns:
        dict: 以规范键为键的新字典.
    """
    config = TextFormsConfig.from_params(output=output)
    return {k: _convert_entry(v, config.output) for k, v in entries.items()}


def dumps_json(entries: Mapping[str, ResultEntry], **kwargs: Any) -> str:
    """将结果映射渲染为 JSON 文本 (`'tagged'` 形式).

    额外的关键字参数会传递给 `json.dumps`.
    """
    kwargs.setdefault("ensure_ascii", False)
    return json.dumps(to_python(entries, "tagged"), **kwargs)


def loads(
    message: str | bytes | bytearray,
    *,
    output: OutputMode = "model",
    max_length: int | None = None,
) -> dict[str, Any]:
    """解码单条 TextForms 消息.

    每次调用都使用新的解码器, 不与其他调用共享状态.

    Args:
        message: 编码后的消息. bytes 按 UTF-8 解码.
        output: 输出形式 (`'model'`, `'tagged'`, `'plain'`).
        max_length: 单条消息允许的最大字符数.

    Returns:
        dict: 规范键到结果的映射.

    Raises:
        TextFormsTypeError: 消息类型不受支持.
        TextFormsDecodeError: 消息长度超出 `max_length`.
        TextFormsValueError: `output` 或 `max_length` 无效, 或 bytes 不是合法的 UTF-8.

    Examples:
        >>> loads("INT 1# NUM1.0#STR A String Value # PI3.14", output="plain")
        {'INT': 1, 'NUM': 1.0, 'STR': 'A String Value', 'PI': 3.14}
    """
    config = TextFormsConfig.from_params(
        output=output,
        max_length=max_length,
    )

    if isinstance(message, bytes | bytearray):
        try:
            message = bytes(message).decode("utf-8")
        except UnicodeDecodeError as e:
            raise TextFormsValueError(f"Message is not valid UTF-8: {e}") from e
    elif not isinstance(message, str):
        raise TextFormsTypeError(
            f"Message must be str or bytes, got {type(message).__name__}"
        )

    decoder = TextFormsDecoder(config=config)
    return to_python(decoder.parse(message).result(), config.output)


def load(
    fp: IO[str] | IO[bytes],
    *,
    output: OutputMode = "model",
    max_length: int | None = None,
) -> dict[str, Any]:
    """从文件读取并解码一条 TextForms 消息.

    封装了 `read()` 和 `loads()`.
    """
    data = fp.read()
    return loads(data, output=output, max_length=max_length)
