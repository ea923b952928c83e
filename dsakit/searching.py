"""Binary search over a sorted sequence."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class SearchResult:
    """Where the target was found, if anywhere, and how many probes it took."""

    index: Optional[int]
    iterations: int

    @property
    def found(self) -> bool:
        return self.index is not None


def binary_search(nums: Sequence[Any], target: Any) -> SearchResult:
    """Search the ascending sequence nums for target."""
    low, high = 0, len(nums) - 1
    iterations = 0
    while low <= high:
        iterations += 1
        mid = low + (high - low) // 2
        value = nums[mid]
        if value == target:
            return SearchResult(mid, iterations)
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return SearchResult(None, iterations)