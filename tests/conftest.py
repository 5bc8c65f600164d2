import pytest

from linked_list import LinkedList


def assert_consistent(lst: LinkedList) -> None:
    """检查头尾指针、计数器与实际链接是否一致"""
    if lst._size == 0:
        assert lst._head is None and lst._tail is None
        return
    assert lst._head is not None and lst._tail is not None
    assert lst._tail.next_node is None
    seen = set()
    node, count = lst._head, 0
    while node is not None:
        assert id(node) not in seen, "cycle in chain"
        seen.add(id(node))
        last = node
        node = node.next_node
        count += 1
    assert count == lst._size
    assert last is lst._tail


@pytest.fixture
def names() -> LinkedList:
    lst = LinkedList()
    for value in ["Hello", "World", "Disney", "Daffy Duck"]:
        lst.append(value)
    lst.prepend("Patty")
    return lst


@pytest.fixture
def check():
    return assert_consistent
