"""Configuration classes for fsgraph components."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class TraversalConfig:
    """Configuration for filesystem traversal."""

    # Deepest directory level that is expanded; the root's children are
    # depth 1. None means unbounded.
    max_depth: Optional[int] = None

    # Expand each canonical directory at most once per build
    skip_visited: bool = True

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")

    def allows_descent(self, depth: int) -> bool:
        """Return True if a directory at ``depth`` may be expanded."""
        return self.max_depth is None or depth < self.max_depth


# Global configuration instance
TRAVERSAL_CONFIG = TraversalConfig()
