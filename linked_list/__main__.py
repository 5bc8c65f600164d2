"""
实战应用示例：用链表保存一串名字，依次演示各项操作。

    python -m linked_list --log-level DEBUG
"""

from __future__ import annotations
import argparse
import logging

from .singly_linked_list import LinkedList

logger = logging.getLogger(__name__)

DEFAULT_VALUES = ["Hello", "World", "Disney", "Daffy Duck"]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="单向链表演示")
    parser.add_argument("--values", nargs="+", default=DEFAULT_VALUES, help="依次追加到链表的值")
    parser.add_argument("--prepend", default="Patty", help="插入到链表头部的值")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="日志级别",
    )
    return parser.parse_args(argv)


def run(values: list[str], first: str) -> LinkedList:
    """按固定脚本操作链表并打印结果"""
    names = LinkedList()
    for value in values:
        names.append(value)
    names.prepend(first)

    print(names)
    print(f"Head: [{names.get_head().value}]")
    print(f"Tail: [{names.get_tail().value}]")
    print(f"List size: {names.size()}")
    if names.size() > 3:
        print(f"At: (3): {names.at(3)}")
    print(f"Popped value: {names.pop()}")
    print(names)
    print(f"Contains disney? {names.contains('disney')}")
    names.append("Yoshi")
    print(names)
    print(f"Find World: {names.find('World')}")
    return names


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    logger.info("运行链表演示，初始值: %s", args.values)
    run(args.values, args.prepend)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
