"""Type aliases and enums shared by the search algorithms."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Hashable, Iterable, TypeVar

#: Opaque, hashable state value supplied by a domain adapter.
S = TypeVar("S", bound=Hashable)

#: Opaque read-only domain context passed to every callback.
D = TypeVar("D")

#: Goal predicate: ``is_goal(domain, state) -> bool``.
GoalFn = Callable[[D, S], bool]

#: Expansion function: ``expand(domain, state) -> successors`` in a fixed order.
ExpandFn = Callable[[D, S], Iterable[S]]

#: Index of a node in a search tree (dense, discovery order, root is 0).
NodeIndex = int


class VisitedCheck(IntEnum):
    """Where the breadth-first engine filters already-seen states.

    Both modes return the same path; they differ only in how large the
    frontier can grow on graphs where a state is reachable from several
    parents at the same depth.
    """

    #: Filter when an entry is popped from the frontier. Duplicate entries
    #: may sit in the frontier and are discarded on dequeue.
    DEQUEUE = 1
    #: Additionally skip successors that were already enqueued or expanded.
    ENQUEUE = 2

    @classmethod
    def from_string(cls, value: str) -> "VisitedCheck":
        """Parse a string into a VisitedCheck enum value.

        Args:
            value: Case-insensitive member name (e.g., "dequeue", "ENQUEUE").

        Returns:
            The corresponding VisitedCheck member.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid visited_check '{value}'. Valid values are: {valid}"
            ) from None
