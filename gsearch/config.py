"""Configuration classes for gsearch components."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from gsearch.types.base import VisitedCheck


@dataclass(frozen=True)
class SearchConfig:
    """Optional knobs for the breadth-first engine.

    The defaults reproduce the plain four-argument search exactly.
    """

    # Where already-seen states are filtered
    visited_check: VisitedCheck = VisitedCheck.DEQUEUE

    # Abort after this many expansions (None means unbounded)
    max_expansions: Optional[int] = None

    def __post_init__(self) -> None:
        if not isinstance(self.visited_check, VisitedCheck):
            raise ValueError(
                f"visited_check must be a VisitedCheck, got {self.visited_check!r}"
            )
        if self.max_expansions is not None:
            if isinstance(self.max_expansions, bool) or not isinstance(
                self.max_expansions, int
            ):
                raise ValueError(
                    f"max_expansions must be an integer, got {self.max_expansions!r}"
                )
            if self.max_expansions <= 0:
                raise ValueError(
                    f"max_expansions must be positive, got {self.max_expansions}"
                )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SearchConfig":
        """Build a config from a plain mapping (e.g., a YAML ``search`` section).

        Args:
            data: Mapping with optional ``visited_check`` (string or enum) and
                ``max_expansions`` keys.

        Returns:
            A validated SearchConfig.

        Raises:
            ValueError: On unknown keys or invalid values.
        """
        allowed = {f.name for f in fields(cls)}
        for key in data:
            if key not in allowed:
                raise ValueError(f"Unrecognized search option '{key}'")

        kwargs = dict(data)
        check = kwargs.get("visited_check")
        if isinstance(check, str):
            kwargs["visited_check"] = VisitedCheck.from_string(check)
        return cls(**kwargs)


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
