from dataclasses import dataclass

from .shared import printf
from .table import StringSet


@dataclass(frozen=True)
class TableStats:
    capacity: int
    count: int
    used_buckets: int
    longest_chain: int

    @property
    def load_factor(self) -> float:
        return self.count / self.capacity


def table_stats(table: StringSet) -> TableStats:
    used = 0
    longest = 0
    for bucket in table.buckets:
        if bucket:
            used += 1
        longest = max(longest, len(bucket))

    return TableStats(
        capacity=table.capacity,
        count=table.count,
        used_buckets=used,
        longest_chain=longest,
    )


def dump_table(table: StringSet, name: str):
    printf("== {0:s} ==\n", name)

    for index, bucket in enumerate(table.buckets):
        if not bucket:
            continue
        printf("{0:04d} |", index)
        # chain head first
        for key in reversed(bucket):
            printf(" {0:s}", key)
        printf("\n")

    stats = table_stats(table)
    printf(
        "{0:d} keys in {1:d}/{2:d} buckets, longest chain {3:d}, load {4:.2f}\n",
        stats.count,
        stats.used_buckets,
        stats.capacity,
        stats.longest_chain,
        stats.load_factor,
    )
