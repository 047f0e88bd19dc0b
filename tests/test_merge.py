"""Tests for the k-way merge strategies."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ChunkSort.core.merge import MergeStrategy, merge, merge_heap, merge_linear

STRATEGIES = [merge_linear, merge_heap]


@pytest.mark.parametrize("merge_fn", STRATEGIES)
def test_merge_known_chunks(merge_fn) -> None:
    chunks = [[1, 4, 7], [2, 5], [3, 6, 8, 9]]
    assert merge_fn(chunks) == [1, 2, 3, 4, 5, 6, 7, 8, 9]


@pytest.mark.parametrize("merge_fn", STRATEGIES)
def test_merge_equal_values(merge_fn) -> None:
    assert merge_fn([[2, 2], [2]]) == [2, 2, 2]


@pytest.mark.parametrize("merge_fn", STRATEGIES)
def test_merge_skips_empty_and_exhausted_chunks(merge_fn) -> None:
    chunks = [[], [-3, 10], [], [0], []]
    assert merge_fn(chunks) == [-3, 0, 10]
    assert merge_fn([]) == []
    assert merge_fn([[], []]) == []


@pytest.mark.parametrize("merge_fn", STRATEGIES)
def test_merge_prefers_lowest_chunk_index_on_ties(merge_fn) -> None:
    """Equal heads are taken from the earliest chunk first."""

    class Tagged(int):
        def __new__(cls, value: int, tag: str) -> "Tagged":
            obj = super().__new__(cls, value)
            obj.tag = tag
            return obj

    chunks = [[Tagged(1, "a0"), Tagged(5, "a1")], [Tagged(1, "b0"), Tagged(5, "b1")]]
    merged = merge_fn(chunks)
    assert [item.tag for item in merged] == ["a0", "b0", "a1", "b1"]


def test_merge_dispatches_by_strategy_name() -> None:
    chunks = [[1, 3], [2]]
    assert merge(chunks) == [1, 2, 3]
    assert merge(chunks, "heap") == [1, 2, 3]
    assert merge(chunks, MergeStrategy.LINEAR) == [1, 2, 3]
    with pytest.raises(ValueError):
        merge(chunks, "bubble")


@given(st.lists(st.lists(st.integers(min_value=-1000, max_value=1000), max_size=30), max_size=12))
def test_strategies_agree_and_sort(raw_chunks: list[list[int]]) -> None:
    chunks = [sorted(chunk) for chunk in raw_chunks]
    expected = sorted(item for chunk in chunks for item in chunk)

    assert merge_linear(chunks) == expected
    assert merge_heap(chunks) == expected
