"""
链表节点以及对外暴露的只读链接视图。

``Node`` 只在链表内部使用；链表对外只返回 ``NodeView``，它可以读写节点的值，
但无法修改后继指针，从而保证链表结构不会被外部破坏。

>>> view = NodeView(Node("Disney"))
>>> view.value
'Disney'
>>> view.value = "Daffy Duck"
>>> view
NodeView('Daffy Duck')
>>> hasattr(view, "next_node")
False
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """链表节点"""
    value: Any
    next_node: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class NodeView:
    """节点视图：只提供值的读写"""

    __slots__ = ("_node",)

    def __init__(self, node: Node) -> None:
        self._node = node

    @property
    def value(self) -> Any:
        return self._node.value

    @value.setter
    def value(self, new_value: Any) -> None:
        self._node.value = new_value

    def __eq__(self, other: object) -> bool:
        """同一个节点的两个视图相等"""
        if not isinstance(other, NodeView):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return id(self._node)

    def __repr__(self) -> str:
        return f"NodeView({self._node.value!r})"
