"""Review Tools - git change tools for AI code review agents."""

__version__ = "0.1.0"
