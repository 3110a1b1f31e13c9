"""Searching in sorted data and in strings."""

from __future__ import annotations

from typing import Optional, Sequence


def binary_search(
    values: Sequence[int], low: int, high: int, target: int
) -> Optional[int]:
    """Return an index of ``target`` in ``values[low:high + 1]``, or None."""
    while low <= high:
        middle = low + (high - low) // 2
        if values[middle] == target:
            return middle
        if values[middle] > target:
            high = middle - 1
        else:
            low = middle + 1
    return None


def exponential_search(values: Sequence[int], target: int) -> Optional[int]:
    """Return an index of ``target`` in sorted ``values``, or None."""
    if not values:
        return None
    if values[0] == target:
        return 0
    bound = 1
    while bound < len(values) and values[bound] <= target:
        bound *= 2
    return binary_search(values, bound // 2, min(bound, len(values) - 1), target)


def search_sorted_matrix(
    matrix: Sequence[Sequence[int]], target: int
) -> Optional[tuple[int, int]]:
    """Locate ``target`` in a matrix sorted along its rows and columns.

    Returns the ``(row, column)`` where it was found, or None.
    """
    if not matrix or not matrix[0]:
        return None
    if target < matrix[0][0] or target > matrix[-1][-1]:
        return None
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == target:
            return row, col
        if value > target:
            col -= 1
        else:
            row += 1
    return None


def prefix_function(pattern: str) -> list[int]:
    """Return the longest-proper-prefix-which-is-also-suffix table."""
    if not pattern:
        return []
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1
    return lps


def kmp_search(pattern: str, text: str) -> list[int]:
    """Return every index at which ``pattern`` occurs in ``text``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = prefix_function(pattern)
    found: list[int] = []
    i = j = 0
    while i < len(text):
        if pattern[j] == text[i]:
            i += 1
            j += 1
        if j == len(pattern):
            found.append(i - j)
            j = lps[j - 1]
        elif i < len(text) and pattern[j] != text[i]:
            if j:
                j = lps[j - 1]
            else:
                i += 1
    return found


def count_anagrams(pattern: str, text: str) -> int:
    """Count the windows of ``text`` that are anagrams of ``pattern``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    needed: dict[str, int] = {}
    for char in pattern:
        needed[char] = needed.get(char, 0) + 1
    unmatched = len(needed)
    width = len(pattern)
    matches = 0
    for end, char in enumerate(text):
        if char in needed:
            needed[char] -= 1
            if needed[char] == 0:
                unmatched -= 1
        if end + 1 < width:
            continue
        if unmatched == 0:
            matches += 1
        leaving = text[end + 1 - width]
        if leaving in needed:
            if needed[leaving] == 0:
                unmatched += 1
            needed[leaving] += 1
    return matches