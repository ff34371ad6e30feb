"""Tests for the commits/composer module."""

import pytest

from review_tools.commits.classifier import CommitType, classify
from review_tools.commits.composer import (
    DEFAULT_DESCRIPTION,
    ComposedCommitMessage,
    CommitStats,
    compose,
    derive_scope,
    describe,
)


class TestDeriveScope:
    """Tests for derive_scope function."""

    def test_single_nested_file(self, make_summary):
        """Test the first path segment becomes the scope."""
        assert derive_scope(make_summary(("src/tools.ts", 1, 0))) == "src"

    def test_deeply_nested_file(self, make_summary):
        """Test only the first segment is used."""
        assert derive_scope(make_summary(("api/v1/routes.py", 1, 0))) == "api"

    def test_top_level_file(self, make_summary):
        """Test a path without a separator has no scope."""
        assert derive_scope(make_summary(("README.md", 1, 0))) is None

    def test_multiple_files(self, make_summary):
        """Test multi-file changes have no scope."""
        summary = make_summary(("src/a.py", 1, 0), ("src/b.py", 1, 0))

        assert derive_scope(summary) is None

    def test_no_files(self, make_summary):
        """Test an empty summary has no scope."""
        assert derive_scope(make_summary()) is None

    def test_backslash_paths_are_not_split(self, make_summary):
        """Test the split uses the fixed forward-slash separator."""
        assert derive_scope(make_summary(("src\\tools.py", 1, 0))) is None


class TestDescribe:
    """Tests for the description table."""

    @pytest.mark.parametrize(
        ("commit_type", "expected"),
        [
            (CommitType.FEAT, "add new functionality"),
            (CommitType.FIX, "resolve issues"),
            (CommitType.DOCS, "update documentation"),
            (CommitType.REFACTOR, "improve code structure"),
            (CommitType.TEST, "add/update tests"),
            (CommitType.CHORE, "update dependencies/config"),
            (CommitType.STYLE, "make changes"),
            (CommitType.PERF, "make changes"),
        ],
    )
    def test_descriptions(self, commit_type, expected):
        """Test each type maps to its canonical phrase."""
        assert describe(commit_type) == expected

    def test_default_description(self):
        """Test the fallback phrase."""
        assert DEFAULT_DESCRIPTION == "make changes"


class TestCompose:
    """Tests for compose function."""

    def test_manifest_change(self, make_summary):
        """Test the full message for a single package.json change."""
        summary = make_summary(("package.json", 3, 1))

        result = compose(summary, classify(summary))

        assert result.commit_message == (
            "chore: update dependencies/config\n\n"
            "1 file(s) changed, 3 insertion(s), 1 deletion(s)"
        )
        assert result.stats == CommitStats(
            files_changed=1, insertions=3, deletions=1, type=CommitType.CHORE
        )
        assert result.affected_files == ("package.json",)

    def test_scoped_message(self, make_summary):
        """Test a nested single file adds a scope."""
        result = compose(make_summary(("src/tools.ts", 12, 4)), CommitType.FEAT)

        assert result.subject == "feat(src): add new functionality"

    def test_top_level_file_has_no_scope(self, make_summary):
        """Test a top-level file has no scope."""
        result = compose(make_summary(("README.md", 2, 0)), CommitType.DOCS)

        assert result.subject == "docs: update documentation"

    def test_multiple_files(self, make_summary):
        """Test a multi-file feat message without scope."""
        summary = make_summary(("a/x.ts", 6, 1), ("b/y.ts", 4, 1))

        result = compose(summary, classify(summary))

        assert result.commit_message == (
            "feat: add new functionality\n\n"
            "2 file(s) changed, 10 insertion(s), 2 deletion(s)"
        )
        assert result.affected_files == ("a/x.ts", "b/y.ts")

    def test_string_type(self, make_summary):
        """Test the type may be given as a string."""
        result = compose(make_summary(("lib/x.py", 1, 1)), "style")

        assert result.subject == "style(lib): make changes"
        assert result.stats.type is CommitType.STYLE

    def test_idempotent(self, make_summary):
        """Test composing twice yields identical output."""
        summary = make_summary(("src/a.py", 5, 2))

        first = compose(summary, CommitType.FIX)
        second = compose(summary, CommitType.FIX)

        assert first == second
        assert first.commit_message == second.commit_message


class TestComposedCommitMessage:
    """Tests for ComposedCommitMessage dataclass."""

    def test_to_dict(self, make_summary):
        """Test the tool result representation."""
        result = compose(make_summary(("src/a.py", 5, 2), ("src/b.py", 0, 1)), CommitType.FIX)

        assert result.to_dict() == {
            "commit_message": (
                "fix: resolve issues\n\n2 file(s) changed, 5 insertion(s), 3 deletion(s)"
            ),
            "stats": {
                "files_changed": 2,
                "insertions": 5,
                "deletions": 3,
                "type": "fix",
            },
            "affected_files": ["src/a.py", "src/b.py"],
        }

    def test_is_frozen(self, make_summary):
        """Test composed messages are immutable."""
        result = compose(make_summary(("a.py", 1, 0)), CommitType.FEAT)

        assert isinstance(result, ComposedCommitMessage)
        with pytest.raises(AttributeError):
            result.commit_message = "changed"
