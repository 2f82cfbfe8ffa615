"""Shared type aliases and enums."""

from gsearch.types.base import D, ExpandFn, GoalFn, NodeIndex, S, VisitedCheck

__all__ = ["D", "ExpandFn", "GoalFn", "NodeIndex", "S", "VisitedCheck"]
