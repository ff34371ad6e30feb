"""Review document output."""

from .writer import render_review, write_review

__all__ = ["render_review", "write_review"]
