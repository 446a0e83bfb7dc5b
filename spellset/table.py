from dataclasses import dataclass
from typing import Iterator

from .shared import printf, printf_err


INITIAL_CAPACITY = 100
HASH_MULTIPLIER = 7


_debug_trace_resize = False


def set_debug_trace_resize(b: bool):
    global _debug_trace_resize
    _debug_trace_resize = b


@dataclass
class StringSet:
    # The last element of each bucket is the head of its chain.
    # Duplicates are kept as separate entries.
    count: int
    buckets: list[list[str]]

    def __init__(self, capacity: int = INITIAL_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.count = 0
        self.buckets = [[] for _ in range(capacity)]

    @property
    def capacity(self) -> int:
        return len(self.buckets)

    def insert(self, key: str):
        # grow before placing the key that would exceed one entry per bucket
        if self.count == self.capacity:
            self._grow()

        self.buckets[hash_string(key, self.capacity)].append(key)
        self.count += 1

    def find(self, key: str) -> bool:
        bucket = self.buckets[hash_string(key, self.capacity)]
        for entry in reversed(bucket):
            if entry == key:
                return True
        return False

    def keys(self) -> Iterator[str]:
        for bucket in self.buckets:
            yield from reversed(bucket)

    def print(self):
        for key in self.keys():
            printf("{0:s}\n", key)

    def _grow(self):
        old_capacity = self.capacity
        capacity = old_capacity * 2
        new_buckets: list[list[str]] = [[] for _ in range(capacity)]

        for key in self.keys():
            new_buckets[hash_string(key, capacity)].append(key)

        self.buckets = new_buckets

        if _debug_trace_resize:
            printf_err(
                "== resize {0:d} -> {1:d} ({2:d} keys) ==\n",
                old_capacity,
                capacity,
                self.count,
            )

    def __len__(self) -> int:
        return self.count

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.find(key)


def hash_string(key: str, capacity: int) -> int:
    hash = 0
    for i in range(len(key)):
        hash = (hash * HASH_MULTIPLIER + ord(key[i])) % capacity
    return hash
