"""Search problem bundle: a domain, a start state and the two callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, List, Optional, Tuple

from gsearch.algorithms.bfs import SearchSummary, bfs_with_summary, breadth_first_search
from gsearch.algorithms.path_copy import path_copying_bfs
from gsearch.config import SearchConfig
from gsearch.types.base import ExpandFn, GoalFn


@dataclass
class Problem:
    """Everything needed to run one search.

    Attributes:
        name: Label used in logs and CLI output.
        domain: Domain object passed to the callbacks.
        initial_state: Start state.
        is_goal: Goal predicate ``(domain, state) -> bool``.
        expand: Expansion function ``(domain, state) -> successors``.
        config: Search options; ``None`` uses the package defaults.
    """

    name: str
    domain: Any
    initial_state: Hashable
    is_goal: GoalFn
    expand: ExpandFn
    config: Optional[SearchConfig] = None

    def solve(self, naive: bool = False) -> Optional[List[Any]]:
        """Return a shortest path to a goal, or ``None``.

        Args:
            naive: Use the path-copying comparison variant instead of the
                canonical engine. The variant ignores ``config``.
        """
        if naive:
            return path_copying_bfs(
                self.domain, self.initial_state, self.is_goal, self.expand
            )
        return breadth_first_search(
            self.domain,
            self.initial_state,
            self.is_goal,
            self.expand,
            config=self.config,
        )

    def solve_with_summary(self) -> Tuple[Optional[List[Any]], SearchSummary]:
        return bfs_with_summary(
            self.domain,
            self.initial_state,
            self.is_goal,
            self.expand,
            config=self.config,
        )
