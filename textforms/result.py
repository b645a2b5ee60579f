"""TextForms 结果缓冲区.

解码结果按规范键 (大写) 存放. 同一个键第一次出现时保存单值,
第二次出现时提升为按出现顺序排列的列表, 之后的值依次追加.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .types import Integer, Numeric, Pair, String

DecodedValue = Integer | Numeric | String | Pair


@dataclass(frozen=True)
class Single:
    """键只出现过一次时的结果."""

    value: DecodedValue

    def __iter__(self) -> Iterator[DecodedValue]:
        yield self.value

    def __len__(self) -> int:
        return 1


@dataclass
class Multiple:
    """键重复出现时的结果, 保持出现顺序."""

    values: list[DecodedValue] = field(default_factory=list)

    def __iter__(self) -> Iterator[DecodedValue]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)


ResultEntry = Single | Multiple


class ResultBuffer:
    """规范键到结果项的可变映射.

    由单个解码器实例独占, 不做任何同步.
    """

    __slots__ = ("_entries",)

    _entries: dict[str, ResultEntry]

    def __init__(self) -> None:
        self._entries = {}

    def insert(self, key: str, value: DecodedValue) -> ResultEntry:
        """插入一个值并返回该键新的结果项.

        `key` 应已是规范键. 单值在第二次出现时被替换为 `Multiple`,
        不会原地修改已有的 `Single`.
        """
        entry = self._entries.get(key)

        if entry is None:
            entry = Single(value)
            self._entries[key] = entry
        elif isinstance(entry, Single):
            entry = Multiple([entry.value, value])
            self._entries[key] = entry
        else:
            entry.values.append(value)

        return entry

    def reset(self) -> None:
        """清空缓冲区."""
        self._entries.clear()

    def view(self) -> Mapping[str, ResultEntry]:
        """返回只读的实时视图."""
        return MappingProxyType(self._entries)

    def snapshot(self) -> dict[str, ResultEntry]:
        """返回当前映射的拷贝, 之后的解码不会影响它."""
        return {
            k: Multiple(list(v.values)) if isinstance(v, Multiple) else v
            for k, v in self._entries.items()
        }

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ResultBuffer({self._entries!r})"
