"""Strategies that sort stack ``a`` using only the push_swap moves."""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from pushswap.stacks import Stacks


def is_sorted(values: Sequence[int]) -> bool:
    """True if no value is greater than the one after it."""
    return all(left <= right for left, right in zip(values, values[1:]))


def normalize(values: Sequence[int]) -> List[int]:
    """Replace every value with its rank in ascending order, starting at 0."""
    rank: Dict[int, int] = {}
    for position, value in enumerate(sorted(values)):
        rank.setdefault(value, position)
    return [rank[value] for value in values]


def integer_sqrt(n: int) -> int:
    """Largest ``i`` with ``i * i <= n``, searched only up to ``n // 2``.

    Because of that search bound, ``integer_sqrt(1)`` is 0.
    """
    if n < 0:
        raise ValueError("integer_sqrt needs a non-negative number")
    return max(i for i in range(n // 2 + 1) if i * i <= n)


def index_of_min(values: Iterable[int]) -> int:
    """Position of the first smallest value; 0 for an empty sequence."""
    values = list(values)
    if not values:
        return 0
    return min(range(len(values)), key=values.__getitem__)


def index_of_max(values: Iterable[int]) -> int:
    """Position of the first largest value; 0 for an empty sequence."""
    values = list(values)
    if not values:
        return 0
    return max(range(len(values)), key=values.__getitem__)


def sort_three(stacks: Stacks) -> None:
    """Sort a stack ``a`` of exactly three elements."""
    first, second, third = stacks.a[0], stacks.a[1], stacks.a[2]
    if first > second and second < third and first < third:
        stacks.sa()
    elif first > second and second > third:
        stacks.sa()
        stacks.rra()
    elif first > second and second < third and first > third:
        stacks.ra()
    elif first < second and second > third and first < third:
        stacks.sa()
        stacks.ra()
    elif first < second and second > third and first > third:
        stacks.rra()


def sort_four(stacks: Stacks) -> None:
    """Sort a stack ``a`` of exactly four elements."""
    index = index_of_min(stacks.a)
    if index == 1:
        stacks.sa()
    elif index == 2:
        stacks.rra()
        stacks.rra()
    elif index == 3:
        stacks.rra()
    stacks.pb()
    sort_three(stacks)
    stacks.pa()


def push_min(stacks: Stacks) -> None:
    """Bring the smallest of five elements in ``a`` to the top and push it to ``b``."""
    index = index_of_min(stacks.a)
    if index == 1:
        stacks.sa()
    elif index == 2:
        stacks.ra()
        stacks.ra()
    elif index == 3:
        stacks.rra()
        stacks.rra()
    elif index == 4:
        stacks.rra()
    stacks.pb()


def sort_five(stacks: Stacks) -> None:
    """Sort a stack ``a`` of exactly five elements."""
    push_min(stacks)
    sort_four(stacks)
    stacks.pa()


def max_to_top(stacks: Stacks) -> None:
    """Rotate ``b`` the shorter way until its largest value is on top."""
    size = len(stacks.b)
    index = index_of_max(stacks.b)
    largest = max(stacks.b)
    while stacks.b[0] != largest:
        if index <= size // 2:
            stacks.rb()
        else:
            stacks.rrb()


def _chunks_to_b(stacks: Stacks, width: int) -> None:
    count = 0
    while stacks.a:
        top = stacks.a[0]
        if top <= count:
            stacks.pb()
            stacks.rb()
            count += 1
        elif top <= count + width:
            stacks.pb()
            count += 1
        else:
            stacks.ra()


def chunk_sort(stacks: Stacks) -> None:
    """Sort ``a`` holding the ranks 0..n-1 by chunks of width ``sqrt(n)``."""
    _chunks_to_b(stacks, integer_sqrt(len(stacks.a)))
    while stacks.b:
        max_to_top(stacks)
        stacks.pa()


def push_swap(values: Sequence[int]) -> List[str]:
    """Return the moves that sort ``values`` in ascending order."""
    values = list(values)
    if len(values) <= 1 or is_sorted(values):
        return []
    stacks = Stacks(values)
    size = len(values)
    if size == 2:
        stacks.sa()
    elif size == 3:
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks)
    elif size == 5:
        sort_five(stacks)
    else:
        stacks = Stacks(normalize(values))
        chunk_sort(stacks)
    return stacks.operations