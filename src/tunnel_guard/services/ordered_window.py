from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Generic

from sortedcontainers import SortedDict

from tunnel_guard.domain.errors import WindowInvariantError
from tunnel_guard.domain.steps import S


class OrderedWindow(Generic[S]):
    """Fixed-size window over the most recent steps of a tunnel.

    Steps are kept in a `SortedDict` keyed by value so the pair search can walk
    them in ascending order and stop early. Each key maps to a FIFO of sequence
    numbers, one per live occurrence, so duplicates are tracked independently.

    An occurrence's age is its sequence number minus the sequence number of the
    oldest live occurrence: 0 is the next to be evicted, `length - 1` the newest.
    Advancing the base on eviction compacts every age at once.
    """

    def __init__(self, initial_values: Iterable[S]) -> None:
        self._by_value: SortedDict = SortedDict()
        # Admission order of values; the head is always the oldest occurrence.
        self._admitted: deque[S] = deque()
        self._base = 0
        self._next_seq = 0
        for value in initial_values:
            self._admit(value)
        if not self._admitted:
            raise ValueError("OrderedWindow requires at least one initial value")
        self._length = len(self._admitted)

    @property
    def length(self) -> int:
        return self._length

    def __len__(self) -> int:
        return len(self._admitted)

    def __repr__(self) -> str:
        return f"OrderedWindow({list(self._admitted)!r})"

    def occurrences(self) -> list[tuple[S, int]]:
        # (value, age) pairs in ascending value order; equal values oldest first.
        return [
            (value, seq - self._base)
            for value, seqs in self._by_value.items()
            for seq in seqs
        ]

    def oldest(self) -> S:
        return self._admitted[0]

    def is_safe(self, candidate: S) -> bool:
        """Return True if two distinct occurrences in the window sum to `candidate`."""
        values = self._by_value
        for i, (a, seqs) in enumerate(values.items()):
            if a >= candidate:
                return False

            if len(seqs) > 1 and a * 2 == candidate:
                return True

            for b in values.islice(start=i + 1):
                total = a + b
                if total == candidate:
                    return True
                if total > candidate:
                    break
        return False

    def shift_right(self, new_value: S) -> None:
        # Evict the age-0 occurrence by identity, then admit the newest one.
        self._remove_oldest()
        self._admit(new_value)

    def _admit(self, value: S) -> None:
        seqs = self._by_value.get(value)
        if seqs is None:
            seqs = deque()
            self._by_value[value] = seqs
        seqs.append(self._next_seq)
        self._admitted.append(value)
        self._next_seq += 1

    def _remove_oldest(self) -> None:
        if not self._admitted:
            raise WindowInvariantError("There was no oldest step in the window before removal")

        value = self._admitted[0]
        seqs = self._by_value.get(value)
        # The per-value FIFO must start with the globally oldest occurrence.
        if not seqs or seqs[0] != self._base:
            raise WindowInvariantError(
                f"There was no oldest step in the window before removal (expected value {value!r})"
            )

        self._admitted.popleft()
        seqs.popleft()
        if not seqs:
            del self._by_value[value]
        self._base += 1
