"""Array problems: pair sums, deduplication, zero moving, intersection, windows."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def two_sum(nums: Iterable[int], target: int) -> list[int]:
    """Return [i, j] with j < i and nums[i] + nums[j] == target, or [] if none."""
    seen: dict[int, int] = {}
    for i, num in enumerate(nums):
        partner = seen.get(target - num)
        if partner is not None:
            return [i, partner]
        seen[num] = i
    return []


def remove_duplicates(nums: list[int]) -> int:
    """Compact a sorted list in place so its first k items are unique; return k."""
    if not nums:
        return 0
    write = 1
    for previous, current in zip(nums, nums[1:]):
        if current != previous:
            nums[write] = current
            write += 1
    return write


def move_zeroes(nums: list[int]) -> None:
    """Move every zero to the end in place, keeping the order of the rest."""
    left = 0
    for right, value in enumerate(nums):
        if value != 0:
            nums[left], nums[right] = nums[right], nums[left]
            left += 1


def intersect(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Return the multiset intersection, in the order values appear in nums2."""
    remaining = Counter(nums1)
    result = []
    for num in nums2:
        if remaining[num] > 0:
            result.append(num)
            remaining[num] -= 1
    return result


def find_max_average(nums: Sequence[int], k: int) -> float:
    """Return the largest mean of any k consecutive values."""
    if k <= 0 or k > len(nums):
        raise ValueError("k must be between 1 and len(nums)")
    window = float(sum(nums[:k]))
    best = window / k
    for leaving, entering in zip(nums, nums[k:]):
        window += entering - leaving
        best = max(best, window / k)
    return best