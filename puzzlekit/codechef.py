"""Solution to the Codechef parking-lot consistency problem."""

from __future__ import annotations

from collections.abc import Iterable, Hashable


def is_consistent(capacity: int, events: Iterable[tuple[str, Hashable]]) -> bool:
    """Whether a log of arrivals and departures fits a lot of ``capacity`` places.

    An event is ``("-", item)`` for a departure; any other operation is an
    arrival. A departure of an absent item or an arrival into a full lot makes
    the log inconsistent.
    """
    present: set[Hashable] = set()
    for operation, item in events:
        if operation == "-":
            if item not in present:
                return False
            present.remove(item)
        else:
            if len(present) == capacity:
                return False
            present.add(item)
    return True