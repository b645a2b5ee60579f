"""TextForms消息解码库.

提供了 TextForms 消息的文法定义、字段解析、类型推断以及解码(loads)功能.
"""

from .api import dumps_json, load, loads, to_python
from .config import OutputMode, TextFormsConfig
from .decoder import TextFormsDecoder
from .disambiguate import disambiguate
from .exceptions import (
    TextFormsDecodeError,
    TextFormsError,
    TextFormsTypeError,
    TextFormsValueError,
)
from .grammar import DEFAULT_GRAMMAR, Grammar
from .parser import RawField, parse_field, split_fields
from .result import Multiple, ResultBuffer, ResultEntry, Single
from .types import (
    Integer,
    Numeric,
    Pair,
    String,
    TypedValue,
    Value,
    ValueKind,
    classify,
    coerce,
    infer,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_GRAMMAR",
    "Grammar",
    "Integer",
    "Multiple",
    "Numeric",
    "OutputMode",
    "Pair",
    "RawField",
    "ResultBuffer",
    "ResultEntry",
    "Single",
    "String",
    "TextFormsConfig",
    "TextFormsDecodeError",
    "TextFormsDecoder",
    "TextFormsError",
    "TextFormsTypeError",
    "TextFormsValueError",
    "TypedValue",
    "Value",
    "ValueKind",
    "__version__",
    "classify",
    "coerce",
    "disambiguate",
    "dumps_json",
    "infer",
    "load",
    "loads",
    "parse_field",
    "split_fields",
    "to_python",
]
