"""TextForms 特定的异常类.

该模块为 TextForms 库定义了异常层次结构.
单个字段格式错误不会抛出异常 (直接跳过), 这里的异常只覆盖整条消息
或调用参数层面的问题.
"""


class TextFormsError(Exception):
    """所有 TextForms 异常的基类."""

    pass


class TextFormsDecodeError(TextFormsError):
    """整条消息被拒绝解码时抛出.

    Case:
        - 消息长度超出配置的 `max_length`.
    """

    pass


class TextFormsTypeError(TextFormsError, TypeError):
    """输入类型不匹配时抛出 (如消息不是 str)."""

    pass


class TextFormsValueError(TextFormsError, ValueError):
    """参数值无效时抛出 (如未知的值类型或输出模式)."""

    pass
