"""Integer counter state space.

States are integers; each step adds one of a fixed set of increments. With
the default single ``+1`` step the space is a simple chain.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class CounterDomain:
    """Counter that moves from a start value towards ``target``.

    Attributes:
        target: Goal value.
        steps: Increments applied on expansion, in order. May be negative.
        lower_bound: Optional inclusive lower limit for successor values.
        upper_bound: Optional inclusive upper limit for successor values.
    """

    target: int
    steps: Tuple[int, ...] = (1,)
    lower_bound: Optional[int] = None
    upper_bound: Optional[int] = None

    def __post_init__(self) -> None:
        steps = tuple(self.steps)
        if not steps:
            raise ValueError("CounterDomain needs at least one step.")
        if 0 in steps:
            raise ValueError("CounterDomain steps must be non-zero.")
        object.__setattr__(self, "steps", steps)
        if (
            self.lower_bound is not None
            and self.upper_bound is not None
            and self.lower_bound > self.upper_bound
        ):
            raise ValueError(
                f"lower_bound {self.lower_bound} exceeds upper_bound {self.upper_bound}"
            )

    def is_goal(self, value: int) -> bool:
        return value == self.target

    def expand(self, value: int) -> List[int]:
        successors = []
        for step in self.steps:
            nxt = value + step
            if self.lower_bound is not None and nxt < self.lower_bound:
                continue
            if self.upper_bound is not None and nxt > self.upper_bound:
                continue
            successors.append(nxt)
        return successors
