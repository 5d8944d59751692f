"""Model package - Core data structures for server-info."""

from server_info.model.report import Fact, FactValue, Group, Report

__all__ = [
    "Fact",
    "FactValue",
    "Group",
    "Report",
]
