"""Binary tree and linked list nodes with the classic traversals on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None


def level_order(root: TreeNode | None) -> list[list[int]]:
    """The values of a binary tree, level by level from the root, left to right."""
    if root is None:
        return []
    levels: list[list[int]] = []
    queue: deque[TreeNode] = deque([root])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            queue.extend(child for child in (node.left, node.right) if child is not None)
        levels.append(level)
    return levels


def has_cycle(head: ListNode | None) -> bool:
    """Whether following ``next`` from ``head`` ever comes back to a visited node."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the ``n``-th node counted from the end and return the new head."""
    if head is None:
        return None
    if n < 1:
        raise ValueError("n must be a positive integer")
    sentinel = ListNode(next=head)
    fast = sentinel
    for _ in range(n):
        fast = fast.next
        if fast is None:
            raise ValueError("n exceeds the length of the list")
    slow = sentinel
    while fast.next is not None:
        fast = fast.next
        slow = slow.next
    slow.next = slow.next.next
    return sentinel.next