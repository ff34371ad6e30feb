"""Custom exceptions for review tools."""


class ReviewToolsError(Exception):
    """Base exception for review tools."""

    pass


class RepositoryAccessError(ReviewToolsError):
    """Raised when a path is not a usable git working copy or a git read fails."""

    def __init__(self, path: str, reason: str | None = None) -> None:
        self.path = path
        self.reason = reason
        if reason:
            self.message = f"Cannot read repository at {path}: {reason}"
        else:
            self.message = f"Cannot read repository at {path}"
        super().__init__(self.message)


class PersistenceError(ReviewToolsError):
    """Raised when a review document cannot be written."""

    def __init__(self, path: str, reason: str | None = None) -> None:
        self.path = path
        if reason:
            self.message = f"Failed to write {path}: {reason}"
        else:
            self.message = f"Failed to write {path}"
        super().__init__(self.message)


class UnknownToolError(ReviewToolsError):
    """Raised when a tool name is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.message = f"Unknown tool: {name}"
        super().__init__(self.message)
