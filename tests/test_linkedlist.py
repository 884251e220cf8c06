from ftprint.linkedlist import (
    ListNode,
    lst_add_back,
    lst_add_front,
    lst_delone,
    lst_last,
    lst_new,
    lst_size,
)


def _contents(head):
    out = []
    while head is not None:
        out.append(head.content)
        head = head.next
    return out


def _build(items):
    head = None
    for item in items:
        head = lst_add_back(head, lst_new(item))
    return head


def test_lst_new_holds_content_and_no_next():
    node = lst_new("data")
    assert node.content == "data"
    assert node.next is None


def test_add_back_keeps_order():
    items = ["a", "b", "c"]
    assert _contents(_build(items)) == items


def test_add_front_reverses_order():
    items = [1, 2, 3]
    head = None
    for item in items:
        head = lst_add_front(head, lst_new(item))
    assert _contents(head) == list(reversed(items))


def test_add_front_on_empty_list_keeps_node_link():
    tail = lst_new("tail")
    node = ListNode("x", tail)
    head = lst_add_front(None, node)
    assert head is node
    assert head.next is tail


def test_add_back_on_empty_list_returns_node():
    node = lst_new(5)
    assert lst_add_back(None, node) is node


def test_size_counts_nodes():
    assert lst_size(None) == 0
    items = list(range(7))
    assert lst_size(_build(items)) == len(items)


def test_last_returns_final_node():
    assert lst_last(None) is None
    items = ["x", "y", "z"]
    head = _build(items)
    last = lst_last(head)
    assert last.content == items[-1]
    assert last.next is None


def test_delone_calls_delete_with_content():
    seen = []
    node = lst_new("payload")
    lst_delone(node, seen.append)
    assert seen == ["payload"]


def test_delone_without_delete_does_nothing():
    node = lst_new("payload")
    lst_delone(node, None)
    assert node.content == "payload"


def test_delone_none_node_skips_delete():
    seen = []
    lst_delone(None, seen.append)
    assert seen == []


def test_delone_leaves_rest_of_list():
    items = ["a", "b", "c"]
    head = _build(items)
    second = head.next
    lst_delone(head, lambda content: None)
    assert _contents(second) == items[1:]


def test_nodes_compare_by_identity():
    assert lst_new(1) is not lst_new(1)
    a = lst_new(1)
    assert (a == lst_new(1)) is False