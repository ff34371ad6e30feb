"""Rule-based conventional commit type detection."""

import logging
from collections.abc import Callable
from enum import Enum

from ..vcs.operations import ChangeSummary

logger = logging.getLogger(__name__)


class CommitType(str, Enum):
    """Conventional commit categories."""

    FEAT = "feat"
    FIX = "fix"
    DOCS = "docs"
    STYLE = "style"
    REFACTOR = "refactor"
    PERF = "perf"
    TEST = "test"
    CHORE = "chore"


Predicate = Callable[[ChangeSummary], bool]


def _any_path(test: Callable[[str], bool]) -> Predicate:
    return lambda summary: any(test(path) for path in summary.paths)


# Evaluated in order, first match wins; fix when none match.
# A None category means "no changes".
CLASSIFICATION_RULES: list[tuple[Predicate, CommitType | None]] = [
    (lambda summary: not summary.files, None),
    (_any_path(lambda p: "test" in p or "spec" in p), CommitType.TEST),
    (_any_path(lambda p: "README" in p or p.endswith(".md")), CommitType.DOCS),
    (_any_path(lambda p: "package.json" in p), CommitType.CHORE),
    (lambda summary: summary.insertions > summary.deletions, CommitType.FEAT),
]


def classify(
    summary: ChangeSummary,
    explicit_type: CommitType | str | None = None,
) -> CommitType | None:
    """
    Pick the commit type for a change summary.

    Args:
        summary: Change summary to inspect.
        explicit_type: Type chosen by the caller; skips detection when given.

    Returns:
        The detected CommitType, or None when the summary has no files.
    """
    if explicit_type is not None:
        return CommitType(explicit_type)

    for predicate, category in CLASSIFICATION_RULES:
        if predicate(summary):
            logger.debug("Classified %d files as %s", len(summary.files), category)
            return category

    logger.debug("Classified %d files as %s", len(summary.files), CommitType.FIX)
    return CommitType.FIX
