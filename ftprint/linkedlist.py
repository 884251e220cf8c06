"""A minimal singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """One list element holding some content and a link to the next node."""

    content: Any
    next: Optional["ListNode"] = None


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def lst_new(content: Any) -> ListNode:
    """Return a new node holding content, linked to nothing."""
    return ListNode(content)


def lst_add_front(head: Optional[ListNode], node: ListNode) -> ListNode:
    """Put node in front of the list and return the new head."""
    if head is not None:
        node.next = head
    return node


def lst_add_back(head: Optional[ListNode], node: ListNode) -> ListNode:
    """Append node to the end of the list and return the head."""
    last = lst_last(head)
    if last is None:
        return node
    last.next = node
    return head


def lst_size(head: Optional[ListNode]) -> int:
    """Return the number of nodes in the list."""
    return sum(1 for _ in _nodes(head))


def lst_last(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the last node of the list, or None for an empty list."""
    last = None
    for last in _nodes(head):
        pass
    return last


def lst_delone(node: Optional[ListNode], delete: Optional[Callable[[Any], Any]]) -> None:
    """Release node's content with delete and drop the node.

    Nothing happens when delete or node is None. The rest of the list is
    not touched.
    """
    if delete is None or node is None:
        return
    delete(node.content)
    node.content = None
    node.next = None