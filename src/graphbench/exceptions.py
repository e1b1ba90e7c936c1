"""
graphbench.exceptions - Error types raised outside the analyzers.

Analyzers never raise for well-formed graphs. These types cover the
collaborators around them: persisted-graph loading and configuration.
"""

from __future__ import annotations

from pathlib import Path


class GraphbenchError(Exception):
    """Base exception class for graphbench errors."""

    pass


class GraphLoadError(GraphbenchError):
    """Raised when a persisted graph cannot be loaded.

    Attributes:
        path: File the graph was read from, or None for in-memory data.
        reason: Short human-readable cause.
    """

    def __init__(self, reason: str, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else None
        self.reason = reason
        if self.path is not None:
            super().__init__(f"Failed to load graph from {self.path}: {reason}")
        else:
            super().__init__(f"Failed to load graph: {reason}")


class ConfigurationError(GraphbenchError):
    """Raised when configuration is invalid or unreadable."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.details = details or {}


__all__ = ["GraphbenchError", "GraphLoadError", "ConfigurationError"]
