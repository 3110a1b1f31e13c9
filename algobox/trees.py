"""Binary trees: level-order construction, height and merging search trees."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence

_MISSING = "N"


@dataclass
class TreeNode:
    """A binary tree node holding an integer."""

    value: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_tree(text: str) -> Optional[TreeNode]:
    """Build a tree from space-separated level-order values, ``N`` marking no child."""
    if not text or text[0] == _MISSING:
        return None
    tokens = text.split()
    if not tokens:
        raise ValueError("no values to build a tree from")
    root = TreeNode(int(tokens[0]))
    pending: deque[TreeNode] = deque([root])
    values = iter(tokens[1:])
    while pending:
        node = pending.popleft()
        token = next(values, None)
        if token is None:
            break
        if token != _MISSING:
            node.left = TreeNode(int(token))
            pending.append(node.left)
        token = next(values, None)
        if token is None:
            break
        if token != _MISSING:
            node.right = TreeNode(int(token))
            pending.append(node.right)
    return root


def height(node: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    levels = 0
    level = [node] if node is not None else []
    while level:
        levels += 1
        level = [
            child
            for current in level
            for child in (current.left, current.right)
            if child is not None
        ]
    return levels


def _walk_inorder(node: Optional[TreeNode]) -> Iterator[int]:
    stack: list[TreeNode] = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def inorder(node: Optional[TreeNode]) -> list[int]:
    """Return the values of the tree in in-order sequence."""
    return list(_walk_inorder(node))


def _build_balanced(values: Sequence[int], start: int, end: int) -> Optional[TreeNode]:
    if start > end:
        return None
    middle = (start + end) // 2
    return TreeNode(
        values[middle],
        _build_balanced(values, start, middle - 1),
        _build_balanced(values, middle + 1, end),
    )


def sorted_to_bst(values: Iterable[int]) -> Optional[TreeNode]:
    """Return a balanced search tree over already sorted values."""
    items = list(values)
    return _build_balanced(items, 0, len(items) - 1)


def _merge_sorted(first: list[int], second: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def merge_bsts(
    first: Optional[TreeNode], second: Optional[TreeNode]
) -> Optional[TreeNode]:
    """Merge two binary search trees into one balanced binary search tree."""
    return sorted_to_bst(_merge_sorted(inorder(first), inorder(second)))