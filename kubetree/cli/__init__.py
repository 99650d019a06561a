"""kubetree command-line interface.

Exposes:
    cli -- Click command entry point (registered as ``kubetree`` script).
"""

from kubetree.cli.main import cli

__all__ = ["cli"]
