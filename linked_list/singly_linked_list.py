"""
单向链表：每个节点保存一个值和指向下一个节点的指针。

链表同时维护头指针、尾指针和节点计数，因此在两端插入以及获取长度都是 O(1)，
按索引访问和删除尾节点需要从头遍历，是 O(n)。

>>> names = LinkedList(["Hello", "World", "Disney", "Daffy Duck"])
>>> names.prepend("Patty")
>>> print(names)
(Patty)->(Hello)->(World)->(Disney)->(Daffy Duck)->null
>>> names.size(), names.at(3)
(5, 'Disney')
>>> names.pop()
'Daffy Duck'
>>> names.find("World"), names.contains("disney")
(2, False)
"""

from __future__ import annotations
import logging
from collections.abc import Iterable, Iterator
from typing import Any

from .errors import EmptyListError, OutOfRangeError
from .node import Node, NodeView

logger = logging.getLogger(__name__)


def _matches(stored: Any, value: Any) -> bool:
    """严格相等：类型相同且值相等，不做任何类型转换"""
    return type(stored) is type(value) and stored == value


class LinkedList:
    """单向链表

    >>> empty = LinkedList()
    >>> str(empty), len(empty), empty.get_head()
    ('null', 0, None)
    """

    def __init__(self, values: Iterable[Any] | None = None) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for value in values or ():
            self.append(value)

    def __iter__(self) -> Iterator[Any]:
        """返回链表的迭代器"""
        node = self._head
        while node:
            yield node.value
            node = node.next_node

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __getitem__(self, index: int) -> Any:
        if not isinstance(index, int):
            raise TypeError(f"LinkedList indices must be integers, not {type(index).__name__}")
        return self.at(index)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    # ---- 查询 ----
    def size(self) -> int:
        """返回节点数量，直接读取计数器"""
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def get_head(self) -> NodeView | None:
        """返回头节点的视图，空链表返回 None"""
        return NodeView(self._head) if self._head else None

    def get_tail(self) -> NodeView | None:
        """返回尾节点的视图，空链表返回 None"""
        return NodeView(self._tail) if self._tail else None

    @property
    def head(self) -> NodeView | None:
        return self.get_head()

    @property
    def tail(self) -> NodeView | None:
        return self.get_tail()

    def contains(self, value: Any) -> bool:
        """判断链表中是否存在该值，字符串区分大小写

        >>> LinkedList(["Disney"]).contains("disney")
        False
        >>> LinkedList([1]).contains(True)
        False
        """
        return self.find(value) is not None

    def find(self, value: Any) -> int | None:
        """返回第一个匹配值的索引，找不到时返回 None

        >>> LinkedList(["a", "b", "b"]).find("b")
        1
        >>> LinkedList(["a"]).find("z") is None
        True
        """
        for index, stored in enumerate(self):
            if _matches(stored, value):
                return index
        return None

    def at(self, index: int) -> Any:
        """返回指定索引处的值

        Args:
            index: 从 0 开始的位置，必须满足 0 <= index < size()

        >>> LinkedList([10, 20, 30]).at(2)
        30
        >>> LinkedList([10, 20, 30]).at(3)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
            ...
        linked_list.errors.OutOfRangeError: LinkedList.at(): index 3 out of range for size 3
        """
        if not 0 <= index < self._size:
            logger.debug("at(%s) rejected, size is %d", index, self._size)
            raise OutOfRangeError("at", index, self._size)
        return self._node_at(index).value

    def to_string(self) -> str:
        """返回形如 (v1)->(v2)->null 的字符串"""
        return "".join(f"({value})->" for value in self) + "null"

    # ---- 修改 ----
    def append(self, value: Any) -> None:
        """在链表尾部添加新节点"""
        new_node = Node(value)
        if self._tail is None:
            self._head = self._tail = new_node
        else:
            self._tail.next_node = new_node
            self._tail = new_node
        self._size += 1

    def prepend(self, value: Any) -> None:
        """在链表头部添加新节点"""
        if self._head is None:
            self.append(value)
            return
        self._head = Node(value, self._head)
        self._size += 1

    def insert_at(self, value: Any, index: int) -> None:
        """在指定位置插入新节点，原位置及之后的元素依次后移

        Args:
            value: 要插入的值
            index: 插入后新节点所在的位置，必须满足 0 <= index <= size()

        >>> letters = LinkedList(["a", "c", "d"])
        >>> letters.insert_at("b", 1)
        >>> letters.insert_at("e", 4)
        >>> print(letters)
        (a)->(b)->(c)->(d)->(e)->null
        >>> letters.size()
        5
        """
        if not 0 <= index <= self._size:
            logger.debug("insert_at(%s) rejected, size is %d", index, self._size)
            raise OutOfRangeError("insert_at", index, self._size)
        if index == 0:
            self.prepend(value)
        elif index == self._size:
            self.append(value)
        else:
            # 中间插入（包括尾节点之前），尾指针不变
            previous = self._node_at(index - 1)
            previous.next_node = Node(value, previous.next_node)
            self._size += 1
        logger.debug("inserted %r at %d, size is now %d", value, index, self._size)

    def pop(self) -> Any:
        """删除尾节点并返回其值

        单向链表没有前驱指针，需要从头遍历找到倒数第二个节点，因此是 O(n)。

        >>> LinkedList().pop()  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
            ...
        linked_list.errors.EmptyListError: LinkedList.pop(): attempt to remove an item from an empty list
        """
        if self._tail is None:
            logger.debug("pop() on empty list")
            raise EmptyListError("pop")
        popped = self._tail
        if self._head is popped:  # 只有一个节点
            self._head = self._tail = None
        else:
            current = self._head
            while current.next_node is not popped:
                current = current.next_node
            current.next_node = None
            self._tail = current
        self._size -= 1
        logger.debug("popped %r, size is now %d", popped.value, self._size)
        return popped.value

    def _node_at(self, index: int) -> Node:
        """从头遍历到指定位置的节点，调用方负责检查边界"""
        node = self._head
        for _ in range(index):
            node = node.next_node
        return node
