"""Pydantic input models for the agent tools."""

from pydantic import BaseModel, Field

from ..commits.classifier import CommitType


class FileChangesInput(BaseModel):
    """Arguments for listing changed files with their diffs."""

    root_dir: str = Field(min_length=1, description="The root directory")

    model_config = {"extra": "forbid"}


class CommitMessageInput(BaseModel):
    """Arguments for generating a commit message."""

    root_dir: str = Field(
        min_length=1,
        description="The root directory of the git repository",
    )
    type: CommitType | None = Field(
        default=None,
        description="Type of change (optional, will be auto-detected if not provided)",
    )

    model_config = {"extra": "forbid"}


class WriteReviewInput(BaseModel):
    """Arguments for writing a review document."""

    file_path: str = Field(
        min_length=1,
        description="The path where to write the markdown file",
    )
    review_content: str = Field(
        min_length=1,
        description="The code review content to write",
    )
    title: str | None = Field(
        default=None,
        description="Optional title for the review document",
    )
    include_timestamp: bool = Field(
        default=True,
        description="Whether to include timestamp in the document",
    )

    model_config = {"extra": "forbid"}
