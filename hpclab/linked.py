"""Singly linked lists, digit-list addition and a tree comparison."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from itertools import zip_longest
from typing import Iterable, List, Optional, Sequence


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    value: int
    next: Optional[ListNode] = None


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    value: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: Optional[ListNode]) -> List[int]:
    """Return the values of a linked list in order."""
    values = []
    while head is not None:
        values.append(head.value)
        head = head.next
    return values


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a linked list in place and return its new head."""
    previous = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def add_numbers(first: Optional[ListNode], second: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored as digit lists, most significant digit first."""
    a = reversed(list_values(first))
    b = reversed(list_values(second))
    digits = []
    carry = 0
    for x, y in zip_longest(a, b, fillvalue=0):
        carry, digit = divmod(x + y + carry, 10)
        digits.append(digit)
    while carry:
        carry, digit = divmod(carry, 10)
        digits.append(digit)
    return build_list(reversed(digits))


def judge_tree_same(left: Optional[TreeNode], right: Optional[TreeNode]) -> bool:
    """Compare two trees as mirror images whose every node's subtrees also pair up."""
    if left is None and right is None:
        return True
    if left is None or right is None:
        return False
    if left.value != right.value:
        return False
    return (
        judge_tree_same(left.left, left.right)
        and judge_tree_same(right.left, right.right)
        and judge_tree_same(left.left, right.right)
        and judge_tree_same(left.right, right.left)
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print a reversed list of the given integers, or of 0..4."""
    args = list(sys.argv[1:] if argv is None else argv)
    values = [int(a) for a in args] if args else list(range(5))
    print("".join(str(v) for v in list_values(reverse_list(build_list(values)))))
    return 0