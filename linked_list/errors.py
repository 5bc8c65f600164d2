"""
链表操作的异常类型。

两类错误都继承自 ``IndexError``，调用方仍可以用内置的索引错误统一捕获：

>>> issubclass(OutOfRangeError, IndexError), issubclass(EmptyListError, IndexError)
(True, True)
"""

from __future__ import annotations


class LinkedListError(IndexError):
    """链表异常基类"""


class OutOfRangeError(LinkedListError):
    """索引不是当前链表中的有效位置"""

    def __init__(self, operation: str, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"LinkedList.{operation}(): index {index} out of range for size {size}")


class EmptyListError(LinkedListError):
    """在空链表上执行需要至少一个元素的操作"""

    def __init__(self, operation: str) -> None:
        super().__init__(f"LinkedList.{operation}(): attempt to remove an item from an empty list")
