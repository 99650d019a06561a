"""Entry point for `python -m kubetree`.

Usage:
    python -m kubetree -n kube-system
"""

from __future__ import annotations

from kubetree.cli import cli

cli()
