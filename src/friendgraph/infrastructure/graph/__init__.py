"""In-memory social graph engine."""

from friendgraph.infrastructure.graph.engine import SocialGraph

__all__ = ["SocialGraph"]
