"""friendgraph: social network graph with recommendations and path search."""

__version__ = "0.1.0"
