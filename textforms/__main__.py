"""TextForms命令行工具."""

import json
import pprint
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.syntax import Syntax
from rich.text import Text
from rich.tree import Tree

from .api import to_python
from .decoder import TextFormsDecoder
from .exceptions import TextFormsError
from .result import Multiple, ResultEntry
from .types import Pair

# 样式定义
STYLE_KEY = "bold blue"
STYLE_TYPE = "cyan"
STYLE_VALUE_STR = "green"
STYLE_VALUE_NUM = "magenta"


def _read_messages(file_path: Path, verbose: bool) -> list[str]:
    """读取消息文件, 每个非空行为一条消息.

    Args:
        file_path: 文件路径.
        verbose: 是否显示详细信息.

    Returns:
        消息列表.
    """
    text = file_path.read_text(encoding="utf-8")
    messages = [line for line in text.splitlines() if line.strip()]

    if verbose:
        click.echo(f"[DEBUG] 从文件读取 {len(messages)} 条消息", err=True)

    return messages


def _value_label(value: Any, prefix: str = "") -> Text:
    """构建单个值的 Rich 标签."""
    label = Text()
    if prefix:
        label.append(prefix, style="dim")
    label.append(f"{value.type}: ", style=STYLE_TYPE)
    if value.type == "string":
        label.append(repr(value.value), style=STYLE_VALUE_STR)
    else:
        label.append(str(value.value), style=STYLE_VALUE_NUM)
    return label


def _add_value(tree: Tree, value: Any, prefix: str = "") -> None:
    """把值 (单值或二元值) 添加到树中."""
    if isinstance(value, Pair):
        label = Text()
        if prefix:
            label.append(prefix, style="dim")
        label.append("pair", style="bold yellow")
        branch = tree.add(label)
        for i, item in enumerate(value.values):
            branch.add(_value_label(item, f"[{i}] "))
    else:
        tree.add(_value_label(value, prefix))


def _build_rich_tree(entries: Mapping[str, ResultEntry], tree: Tree) -> None:
    """按键构建 Rich 树.

    Args:
        entries: 结果映射.
        tree: 父级 Tree 对象.
    """
    for key, entry in entries.items():
        label = Text(key, style=STYLE_KEY)
        if isinstance(entry, Multiple):
            label.append(f" List ({len(entry)})", style=STYLE_TYPE)
            branch = tree.add(label)
            for i, value in enumerate(entry.values):
                _add_value(branch, value, f"[{i}] ")
        else:
            branch = tree.add(label)
            _add_value(branch, entry.value)


def _print_tree(results: list[dict[str, ResultEntry]], file: Any = None) -> None:
    """打印结果树 (使用 Rich).

    Args:
        results: 每条消息 (或累积后) 的结果映射.
        file: 输出文件对象,默认为stdout.
    """
    console = Console(file=file)
    root = Tree("TextForms Result", style="bold white")

    if len(results) == 1:
        _build_rich_tree(results[0], root)
    else:
        for i, entries in enumerate(results):
            _build_rich_tree(entries, root.add(Text(f"Message {i}", style="dim")))

    console.print(root)


def _decode_and_print(
    messages: list[str],
    output_format: str,
    output_file: str | None,
    verbose: bool,
    accumulate: bool,
) -> None:
    """解码并输出结果."""
    decoder = TextFormsDecoder()
    results: list[dict[str, ResultEntry]] = []

    try:
        for i, message in enumerate(messages):
            if verbose:
                click.echo(f"[DEBUG] 消息 {i}: {len(message)} 字符", err=True)
            if not accumulate:
                decoder.reset()
            decoder.parse(message, suppress_log=not verbose)
            if not accumulate:
                results.append(decoder.snapshot())
    except TextFormsError as e:
        if verbose:
            import traceback

            traceback.print_exc(file=sys.stderr)
        raise click.ClickException(f"解码失败: {e}") from e

    if accumulate:
        results.append(decoder.snapshot())

    if output_format == "tree":
        if output_file:
            with open(output_file, "w", encoding="utf-8") as f:
                _print_tree(results, file=f)
            click.echo(f"结果已保存到: {output_file}", err=True)
        else:
            _print_tree(results)
        return

    output_text: str | None = None

    if output_format == "json":
        payload = [to_python(entries, "tagged") for entries in results]
        output_text = json.dumps(
            payload[0] if len(payload) == 1 else payload,
            indent=2,
            ensure_ascii=False,
        )
    elif output_file:
        payload = [to_python(entries, "plain") for entries in results]
        output_text = pprint.pformat(
            payload[0] if len(payload) == 1 else payload, width=100
        )

    if output_file:
        assert output_text is not None
        Path(output_file).write_text(output_text, encoding="utf-8")
        click.echo(f"结果已保存到: {output_file}", err=True)
        return

    console = Console()
    if output_format == "json":
        assert output_text is not None
        console.print(Syntax(output_text, "json", theme="monokai", word_wrap=True))
    else:
        payload = [to_python(entries, "plain") for entries in results]
        console.print(payload[0] if len(payload) == 1 else payload)


@click.command(help="TextForms 解码命令行工具")
@click.argument("message", required=False)
@click.option(
    "-f",
    "--file",
    "file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="从文件读取消息 (每个非空行一条)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["pretty", "json", "tree"]),
    default="pretty",
    show_default=True,
    help="输出格式",
)
@click.option(
    "-o",
    "--output",
    "output_file",
    type=click.Path(dir_okay=False, writable=True),
    help="将输出保存到文件 (如不指定则输出到控制台)",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="显示详细的解码过程信息",
)
@click.option(
    "--accumulate",
    is_flag=True,
    help="将所有消息累积到同一个结果中",
)
def cli(
    message: str | None,
    file_path: Path | None,
    output_format: str,
    output_file: str | None,
    verbose: bool,
    accumulate: bool,
) -> None:
    """TextForms 解码命令行工具.

    Examples:
      # 直接解码消息
      textforms "INT 1# NUM1.0# PI3.14"

      # 从文件读取, 每行一条消息
      textforms -f messages.txt

      # 以 JSON 格式输出结果
      textforms -f messages.txt --format json

      # 以 Tree 格式输出
      textforms "SEQ.0 3.1 # SEQ.1 3.14" --format tree
    """
    # 互斥参数检查
    if message and file_path:
        raise click.UsageError("不能同时指定 MESSAGE 和 --file 参数")
    if not message and not file_path:
        raise click.UsageError("必须指定 MESSAGE 或 --file 参数")

    if file_path:
        try:
            messages = _read_messages(file_path, verbose)
        except UnicodeDecodeError as e:
            raise click.BadParameter(f"无法以 UTF-8 读取文件 - {e}") from e
    else:
        assert message is not None
        messages = [message]

    if not messages:
        raise click.ClickException("没有可解码的消息")

    _decode_and_print(messages, output_format, output_file, verbose, accumulate)


def main() -> None:
    """入口函数."""
    cli()


if __name__ == "__main__":
    main()
