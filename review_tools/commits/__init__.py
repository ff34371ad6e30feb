"""Commit type detection and message composition."""

from .classifier import CLASSIFICATION_RULES, CommitType, classify
from .composer import NO_CHANGES_MESSAGE, ComposedCommitMessage, CommitStats, compose, derive_scope

__all__ = [
    "CLASSIFICATION_RULES",
    "CommitStats",
    "CommitType",
    "ComposedCommitMessage",
    "NO_CHANGES_MESSAGE",
    "classify",
    "compose",
    "derive_scope",
]
