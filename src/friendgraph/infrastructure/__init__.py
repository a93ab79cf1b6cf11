"""Infrastructure layer: graph engine, adjacency-list codec, network holder.

This layer depends on stdlib, NetworkX, and the domain value types.
It must never import from services, commands, or output.
"""
