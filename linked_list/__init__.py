"""单向链表"""

from .errors import EmptyListError, LinkedListError, OutOfRangeError
from .node import NodeView
from .singly_linked_list import LinkedList

__all__ = [
    "EmptyListError",
    "LinkedList",
    "LinkedListError",
    "NodeView",
    "OutOfRangeError",
]

__version__ = "0.1.0"
