"""TextForms日志记录器."""

import logging

logger = logging.getLogger("textforms")


def get_excerpt(text: str, limit: int = 32) -> str:
    """获取适合写入日志的文本摘录.

    超过 `limit` 个字符的文本会被截断, 并标注原始长度.
    """
    if limit < 0:
        limit = 0
    if len(text) <= limit:
        return repr(text)
    return f"{text[:limit]!r}... (共 {len(text)} 字符)"
