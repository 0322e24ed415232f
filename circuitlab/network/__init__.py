from .clusters import NodeMap, find_clusters  # noqa: F401

__all__ = ["NodeMap", "find_clusters"]
