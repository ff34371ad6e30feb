"""Git operations using GitPython."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from git import Repo
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from ..config import get_settings
from ..exceptions import RepositoryAccessError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileChangeStat:
    """Line counts for a single changed path."""

    path: str
    insertions: int
    deletions: int


@dataclass(frozen=True)
class ChangeSummary:
    """Per-file statistics for all pending changes, in git's listing order."""

    files: tuple[FileChangeStat, ...] = ()

    @property
    def insertions(self) -> int:
        return sum(f.insertions for f in self.files)

    @property
    def deletions(self) -> int:
        return sum(f.deletions for f in self.files)

    @property
    def paths(self) -> list[str]:
        return [f.path for f in self.files]

    def __len__(self) -> int:
        return len(self.files)


@dataclass(frozen=True)
class FileDiff:
    """Unified diff text for one path (empty for binary files)."""

    path: str
    diff: str


def get_repo(root_dir: str | Path) -> Repo:
    """
    Open the git working copy containing ``root_dir``.

    Args:
        root_dir: Path inside the working copy.

    Returns:
        GitPython Repo object.

    Raises:
        ValueError: If root_dir is empty.
        RepositoryAccessError: If the path is missing or not under git.
    """
    if not str(root_dir):
        raise ValueError("root_dir must not be empty")

    try:
        repo = Repo(Path(root_dir), search_parent_directories=True)
    except NoSuchPathError:
        raise RepositoryAccessError(str(root_dir), "path does not exist") from None
    except InvalidGitRepositoryError:
        raise RepositoryAccessError(str(root_dir), "not a git repository") from None

    if repo.bare:
        raise RepositoryAccessError(str(root_dir), "bare repository has no working tree")
    return repo


def _count(value: str) -> int:
    # Binary files are reported as "-"
    return int(value) if value.isdigit() else 0


def parse_numstat(output: str) -> ChangeSummary:
    """
    Parse ``git diff --numstat -z`` output.

    Each record is ``<ins>\\t<del>\\t<path>\\0``. Renames leave the path
    empty and follow it with ``<old>\\0<new>\\0``; the new path is kept.
    """
    tokens = output.split("\0")
    files = []
    i = 0
    while i < len(tokens):
        record = tokens[i].strip("\n")
        i += 1
        if not record:
            continue

        parts = record.split("\t", 2)
        if len(parts) != 3:
            logger.debug("Skipping malformed numstat record: %r", record)
            continue

        added, removed, path = parts
        if not path:
            # rename: old path, then new path
            path = tokens[i + 1] if i + 1 < len(tokens) else ""
            i += 2
        if not path:
            continue

        files.append(FileChangeStat(path=path, insertions=_count(added), deletions=_count(removed)))

    return ChangeSummary(files=tuple(files))


def _diff_args(staged: bool) -> list[str]:
    return ["--cached"] if staged else []


def summarize(root_dir: str | Path, staged: bool = False) -> ChangeSummary:
    """
    Get the change summary of a working copy.

    Args:
        root_dir: Path inside the working copy.
        staged: Summarize the index instead of unstaged working-tree changes.

    Returns:
        ChangeSummary for every changed path (no exclusion applied).

    Raises:
        RepositoryAccessError: If the repository cannot be read.
    """
    return _summarize(get_repo(root_dir), root_dir, staged)


def _summarize(repo: Repo, root_dir: str | Path, staged: bool) -> ChangeSummary:
    try:
        output = repo.git.diff(*_diff_args(staged), "--numstat", "-z")
    except GitCommandError as e:
        raise RepositoryAccessError(str(root_dir), str(e)) from e

    summary = parse_numstat(output)
    logger.debug(
        "Summary for %s: %d files, +%d -%d",
        root_dir,
        len(summary),
        summary.insertions,
        summary.deletions,
    )
    return summary


def list_changes(
    root_dir: str | Path,
    exclude: Iterable[str] | None = None,
    staged: bool = False,
) -> list[FileDiff]:
    """
    Get the unified diff of every changed file in a working copy.

    Args:
        root_dir: Path inside the working copy.
        exclude: Paths to skip, matched exactly. Defaults to the configured
            exclude_files.
        staged: Diff the index instead of the working tree.

    Returns:
        List of FileDiff objects in git's listing order.

    Raises:
        RepositoryAccessError: If the repository cannot be read.
    """
    excluded = set(get_settings().exclude_files if exclude is None else exclude)
    repo = get_repo(root_dir)
    summary = _summarize(repo, root_dir, staged)

    diffs = []
    for change in summary.files:
        if change.path in excluded:
            logger.debug("Excluding %s", change.path)
            continue
        try:
            diff_text = repo.git.diff(
                *_diff_args(staged), "--", change.path, strip_newline_in_stdout=False
            )
        except GitCommandError as e:
            raise RepositoryAccessError(str(root_dir), str(e)) from e
        diffs.append(FileDiff(path=change.path, diff=diff_text))

    return diffs
