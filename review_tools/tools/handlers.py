"""Tool entry points invoked by the review agent."""

import logging
from typing import Any

from ..commits.classifier import CommitType, classify
from ..commits.composer import NO_CHANGES_MESSAGE, compose
from ..review.writer import write_review
from ..vcs.operations import list_changes, summarize

logger = logging.getLogger(__name__)


def get_file_changes_in_directory(root_dir: str, staged: bool = False) -> list[dict[str, str]]:
    """Get the code changes made in the given directory, one diff per file."""
    return [{"file": d.path, "diff": d.diff} for d in list_changes(root_dir, staged=staged)]


def generate_commit_message(
    root_dir: str,
    commit_type: CommitType | str | None = None,
    staged: bool = False,
) -> dict[str, Any] | str:
    """
    Generate a conventional commit message for pending changes.

    Args:
        root_dir: Path inside the git working copy.
        commit_type: Explicit commit type; auto-detected when omitted.
        staged: Describe the index instead of the working tree.

    Returns:
        The message with its stats, or NO_CHANGES_MESSAGE if nothing changed.
    """
    summary = summarize(root_dir, staged=staged)

    # Checked before the explicit type is considered
    if not summary.files:
        logger.debug("No changes in %s", root_dir)
        return NO_CHANGES_MESSAGE

    resolved = classify(summary, commit_type)
    return compose(summary, resolved).to_dict()


def write_review_to_markdown(
    file_path: str,
    review_content: str,
    title: str | None = None,
    include_timestamp: bool = True,
) -> dict[str, Any]:
    """Write a code review to a markdown file with proper formatting."""
    return write_review(
        file_path,
        review_content,
        title=title,
        include_timestamp=include_timestamp,
    )
