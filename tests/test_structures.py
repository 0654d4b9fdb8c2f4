import pytest

from puzzlekit.structures import (
    ListNode,
    TreeNode,
    has_cycle,
    level_order,
    remove_nth_from_end,
)


def _linked(values):
    head = None
    for value in reversed(values):
        head = ListNode(value, head)
    return head


def _values(head):
    out = []
    while head is not None:
        out.append(head.val)
        head = head.next
    return out


def test_level_order_of_empty_tree():
    assert level_order(None) == []


def test_level_order_of_single_node():
    assert level_order(TreeNode(5)) == [[5]]


def test_level_order_of_perfect_tree():
    root = TreeNode(
        1,
        TreeNode(2, TreeNode(4), TreeNode(5)),
        TreeNode(3, TreeNode(6), TreeNode(7)),
    )
    assert level_order(root) == [[1], [2, 3], [4, 5, 6, 7]]


def test_level_order_of_lopsided_tree():
    root = TreeNode(10, None, TreeNode(20, TreeNode(30), None))
    assert level_order(root) == [[10], [20], [30]]


def test_level_order_keeps_every_value_once():
    root = TreeNode(8, TreeNode(4, None, TreeNode(6)), TreeNode(12, TreeNode(10)))
    flat = [value for level in level_order(root) for value in level]
    assert sorted(flat) == [4, 6, 8, 10, 12]


def test_has_cycle_on_empty_and_single():
    assert has_cycle(None) is False
    assert has_cycle(ListNode(1)) is False


def test_has_cycle_on_plain_list():
    assert has_cycle(_linked([1, 2, 3, 4, 5])) is False


def test_has_cycle_back_to_head():
    head = _linked([1, 2, 3])
    head.next.next.next = head
    assert has_cycle(head) is True


def test_has_cycle_into_middle():
    head = _linked([3, 2, 0, -4])
    tail = head.next.next.next
    tail.next = head.next
    assert has_cycle(head) is True


def test_has_cycle_self_loop():
    node = ListNode(7)
    node.next = node
    assert has_cycle(node) is True


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_remove_nth_from_end(n):
    values = [1, 2, 3, 4, 5]
    result = remove_nth_from_end(_linked(values), n)
    expected = values[: len(values) - n] + values[len(values) - n + 1 :]
    assert _values(result) == expected


def test_remove_only_node():
    assert remove_nth_from_end(ListNode(1), 1) is None


def test_remove_from_empty_list():
    assert remove_nth_from_end(None, 3) is None


def test_remove_beyond_length_raises():
    with pytest.raises(ValueError):
        remove_nth_from_end(_linked([1, 2]), 3)


def test_remove_non_positive_raises():
    with pytest.raises(ValueError):
        remove_nth_from_end(_linked([1, 2]), 0)