import pytest

from linked_list.node import Node, NodeView


def test_view_reads_and_writes_value():
    node = Node("Hello")
    view = NodeView(node)
    view.value = "World"
    assert node.value == "World"
    assert view.value == "World"


def test_view_hides_link():
    view = NodeView(Node(1, Node(2)))
    assert not hasattr(view, "next_node")
    with pytest.raises(AttributeError):
        view.next_node = None


def test_view_equality_is_node_identity():
    node = Node(1)
    assert NodeView(node) == NodeView(node)
    assert NodeView(node) != NodeView(Node(1))
    assert len({NodeView(node), NodeView(node)}) == 1


def test_repr():
    assert repr(Node("a")) == "Node('a')"
    assert repr(NodeView(Node(3))) == "NodeView(3)"
