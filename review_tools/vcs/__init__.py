"""Git operations module."""

from .operations import (
    ChangeSummary,
    FileChangeStat,
    FileDiff,
    get_repo,
    list_changes,
    parse_numstat,
    summarize,
)

__all__ = [
    "ChangeSummary",
    "FileChangeStat",
    "FileDiff",
    "get_repo",
    "list_changes",
    "parse_numstat",
    "summarize",
]
