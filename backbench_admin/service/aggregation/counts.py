"""Single-pass status counting over store rows."""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Mapping, Any


@dataclass(frozen=True)
class StatusCounts:
    """Row total plus per-status tallies."""

    total: int
    by_status: Dict[str, int] = field(default_factory=dict)

    def get(self, status: str | Enum) -> int:
        key = status.value if isinstance(status, Enum) else status
        return self.by_status.get(key, 0)


def count_statuses(rows: Iterable[Mapping[str, Any]]) -> StatusCounts:
    """
    Count rows by their ``status`` column.

    Rows without a status still count toward the total.
    """
    total = 0
    tally: Counter = Counter()

    for row in rows:
        total += 1
        status = row.get("status")
        if status is not None:
            tally[status] += 1

    return StatusCounts(total=total, by_status=dict(tally))
