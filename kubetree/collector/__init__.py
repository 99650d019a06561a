"""Collector package for kubetree.

Fetches flat resource collections for the tree builder.

Submodules
----------
decode -- camelCase API object dicts -> typed resource records.
source -- ResourceSource protocol, KubernetesSource (kubernetes-asyncio),
          StaticSource (in memory) and ResourceFetchError.
"""

from kubetree.collector.decode import record_from_dict
from kubetree.collector.source import (
    KubernetesSource,
    ResourceFetchError,
    ResourceSource,
    StaticSource,
    connect,
)

__all__ = [
    "KubernetesSource",
    "ResourceFetchError",
    "ResourceSource",
    "StaticSource",
    "connect",
    "record_from_dict",
]
