"""Markdown review document writer."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from ..config import get_settings
from ..exceptions import PersistenceError

logger = logging.getLogger(__name__)

SUMMARY_SECTION = (
    "\n\n## Summary\n\n"
    "This review was generated automatically. "
    "Please review the suggestions and apply them as appropriate.\n"
)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def render_review(
    review_content: str,
    title: str | None = None,
    timestamp: str | None = None,
) -> str:
    """Build the markdown document around the review content."""
    review_title = title or get_settings().default_review_title

    document = f"# {review_title}\n\n"
    if timestamp:
        document += f"**Generated:** {timestamp}\n\n"
    document += "---\n\n"
    document += review_content

    # Content without its own sections gets a closing summary
    if "##" not in review_content:
        document += SUMMARY_SECTION

    return document


def _persist(path: Path, document: str) -> None:
    # Encoded up front so a bad document never truncates an existing file
    try:
        data = document.encode("utf-8")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except (OSError, ValueError) as e:
        reason = getattr(e, "strerror", None) or str(e)
        raise PersistenceError(str(path), reason) from e


def write_review(
    file_path: str | Path,
    review_content: str,
    title: str | None = None,
    include_timestamp: bool = True,
    now: datetime | None = None,
) -> dict[str, Any]:
    """
    Write a code review to a markdown file.

    Failures are reported in the result instead of being raised.

    Args:
        file_path: Destination file; parent directories are created.
        review_content: Review body, written verbatim.
        title: Document title (defaults to the configured title).
        include_timestamp: Whether to add a "Generated" line.
        now: Time to stamp; defaults to the current time.

    Returns:
        Dict with success, file_path and either message/size or error.
    """
    timestamp = None
    if include_timestamp:
        timestamp = format_timestamp(now or datetime.now(timezone.utc))

    document = render_review(review_content, title=title, timestamp=timestamp)

    try:
        _persist(Path(file_path), document)
    except PersistenceError as e:
        logger.warning("Review not written: %s", e.message)
        return {
            "success": False,
            "error": e.message,
            "file_path": str(file_path),
        }

    logger.debug("Wrote %d characters to %s", len(document), file_path)
    return {
        "success": True,
        "file_path": str(file_path),
        "message": f"Code review successfully written to {file_path}",
        "size": len(document),
    }
