"""
Posting set operations used by the boolean search engine.
"""
from typing import AbstractSet, List, Set


def intersect(set1: AbstractSet[int], set2: AbstractSet[int]) -> Set[int]:
    """
    Intersect two posting sets with a linear merge-join.

    Both sets are sorted ascending and walked with two pointers, advancing the
    smaller side and emitting matches, so the cost is O(n + m) after sorting.

    Args:
        set1: First posting set
        set2: Second posting set

    Returns:
        Document IDs present in both sets
    """
    sorted1 = sorted(set1)
    sorted2 = sorted(set2)
    p1 = p2 = 0
    result: List[int] = []

    while p1 < len(sorted1) and p2 < len(sorted2):
        if sorted1[p1] == sorted2[p2]:
            result.append(sorted1[p1])
            p1 += 1
            p2 += 1
        elif sorted1[p1] < sorted2[p2]:
            p1 += 1
        else:
            p2 += 1

    return set(result)


def union(set1: AbstractSet[int], set2: AbstractSet[int]) -> Set[int]:
    return set(set1) | set(set2)


def difference(set1: AbstractSet[int], set2: AbstractSet[int]) -> Set[int]:
    """Members of set1 not in set2 (NOT is never a complement against the corpus)."""
    return set(set1) - set(set2)
