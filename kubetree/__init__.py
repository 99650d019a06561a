"""kubetree: cluster workload and storage ownership as a health-annotated tree."""

__version__ = "0.1.0"
