"""Configuration classes for eulerpath components."""

from dataclasses import dataclass
from typing import Sequence


@dataclass
class EulerianPathConfig:
    """Configuration for Eulerian path queries."""

    # Re-count consumed edges against the edge multiset after assembly
    verify_edges: bool = False

    # Maximum number of trail nodes rendered in log messages
    log_preview_nodes: int = 16

    def preview(self, trail: Sequence[int]) -> str:
        """Render at most ``log_preview_nodes`` nodes of a trail for logging."""
        limit = max(self.log_preview_nodes, 0)
        head = " -> ".join(str(node) for node in trail[:limit])
        if len(trail) > limit:
            return f"{head} ... (+{len(trail) - limit} more)"
        return head


# Global configuration instance
DEFAULT_CONFIG = EulerianPathConfig()
