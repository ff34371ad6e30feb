"""Deterministic commit message composition."""

from dataclasses import dataclass
from typing import Any

from ..vcs.operations import ChangeSummary
from .classifier import CommitType

NO_CHANGES_MESSAGE = "No changes detected in the repository"

DESCRIPTIONS: dict[CommitType, str] = {
    CommitType.FEAT: "add new functionality",
    CommitType.FIX: "resolve issues",
    CommitType.DOCS: "update documentation",
    CommitType.REFACTOR: "improve code structure",
    CommitType.TEST: "add/update tests",
    CommitType.CHORE: "update dependencies/config",
}

DEFAULT_DESCRIPTION = "make changes"


@dataclass(frozen=True)
class CommitStats:
    """Counts reported alongside a composed message."""

    files_changed: int
    insertions: int
    deletions: int
    type: CommitType


@dataclass(frozen=True)
class ComposedCommitMessage:
    """A conventional commit message and the statistics it was built from."""

    commit_message: str
    stats: CommitStats
    affected_files: tuple[str, ...]

    @property
    def subject(self) -> str:
        """First line of the message."""
        return self.commit_message.split("\n", 1)[0]

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation returned to tool callers."""
        return {
            "commit_message": self.commit_message,
            "stats": {
                "files_changed": self.stats.files_changed,
                "insertions": self.stats.insertions,
                "deletions": self.stats.deletions,
                "type": self.stats.type.value,
            },
            "affected_files": list(self.affected_files),
        }


def derive_scope(summary: ChangeSummary, separator: str = "/") -> str | None:
    """
    Get the scope for a single-file change.

    The first path segment is used, and only when the path has a parent
    segment. Multi-file changes have no scope.
    """
    if len(summary.files) != 1:
        return None

    path = summary.files[0].path
    candidate = path.split(separator)[0]
    if candidate and candidate != path:
        return candidate
    return None


def describe(commit_type: CommitType) -> str:
    return DESCRIPTIONS.get(commit_type, DEFAULT_DESCRIPTION)


def compose(summary: ChangeSummary, commit_type: CommitType | str) -> ComposedCommitMessage:
    """
    Build the commit message for a non-empty summary.

    Args:
        summary: Change summary the message describes.
        commit_type: Resolved commit type.

    Returns:
        ComposedCommitMessage with headline, stats and affected files.
    """
    commit_type = CommitType(commit_type)
    scope = derive_scope(summary)
    scope_text = f"({scope})" if scope else ""

    files_changed = len(summary.files)
    insertions = summary.insertions
    deletions = summary.deletions

    commit_message = (
        f"{commit_type.value}{scope_text}: {describe(commit_type)}\n\n"
        f"{files_changed} file(s) changed, {insertions} insertion(s), {deletions} deletion(s)"
    )

    return ComposedCommitMessage(
        commit_message=commit_message,
        stats=CommitStats(
            files_changed=files_changed,
            insertions=insertions,
            deletions=deletions,
            type=commit_type,
        ),
        affected_files=tuple(summary.paths),
    )
