"""``kubetree`` command.

Options fall back to KUBETREE_* environment configuration.
"""

from __future__ import annotations

import asyncio

import click

from kubetree import __version__
from kubetree.app import run
from kubetree.collector.source import ResourceFetchError
from kubetree.config import load_config, normalize_namespace
from kubetree.observability.logging import get_logger, setup_logging


@click.command(name="kubetree", context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--kubeconfig", default=None, help="Location of kubeconfig.")
@click.option(
    "-n",
    "--namespace",
    default=None,
    help="Namespace to show; 'all' or empty for all namespaces.",
)
@click.option("-c", "--color/--no-color", "color", default=None, help="Color resource titles by state.")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Log level for stderr diagnostics.",
)
@click.version_option(__version__, prog_name="kubetree")
def cli(kubeconfig: str | None, namespace: str | None, color: bool | None, log_level: str | None) -> None:
    """Show workload and storage ownership as a tree with per-resource state."""
    try:
        config = load_config()
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    if kubeconfig is not None:
        config.cluster.kubeconfig = kubeconfig
    if namespace is not None:
        config.cluster.namespace = normalize_namespace(namespace)
    if color is not None:
        config.output.color = color
    if log_level is not None:
        config.log.level = log_level.lower()

    setup_logging(config.log.level, config.log.format)
    log = get_logger("cli")

    try:
        output = asyncio.run(run(config))
    except ResourceFetchError as exc:
        log.critical("fatal fetch error", kind=exc.kind, error=str(exc.cause))
        raise SystemExit(1) from exc

    click.echo(output, nl=False, color=config.output.color)
