#!/usr/bin/env python
"""Command-line interface for kube-secrets.

This module provides the `secrets` entry point, which parses the command
line, connects to the cluster and runs the listing pipeline.
"""

import sys

import click
from icecream import ic
from rich.markup import escape

from kube_secrets import __version__, console
from kube_secrets.cluster import Cluster
from kube_secrets.exceptions import ClusterConnectionError, ConfigError, DataContractError
from kube_secrets.models import Config
from kube_secrets.pipeline import ListingPipeline
from kube_secrets.rendering import RichStyle


@click.command(
    help="List and decode the Secrets of a Kubernetes namespace.",
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(__version__, "--version", "-V", prog_name="secrets")
@click.option("--show-all", "-a", is_flag=True, help="show all secret types, not only Opaque")
@click.option("--context", envvar="SECRETS_CONTEXT", required=False, help="kubeconfig context to use")
@click.option("--select", is_flag=True, default=False, help="prompt for context select")
@click.option("--debug", is_flag=True, help="print debug information")
@click.argument("namespace")
@click.argument("query", required=False)
def cli(
    show_all: bool,
    context: str | None,
    select: bool,
    debug: bool,
    namespace: str,
    query: str | None,
) -> None:
    """Print the decoded secrets of NAMESPACE whose name contains QUERY.

    Args:
        show_all: Show every secret type instead of only Opaque.
        context: Kubeconfig context to use.
        select: Prompt for Kubernetes context selection.
        debug: Enable debug output.
        namespace: Namespace to list secrets from.
        query: Optional case-sensitive substring of the secret name.

    """
    if debug:
        ic.enable()
    else:
        ic.disable()

    try:
        run_config = Config(namespace=namespace, query=query, show_all=show_all)
    except ConfigError as e:
        raise click.BadParameter(str(e), param_hint="NAMESPACE") from None
    ic(run_config)

    try:
        cluster = Cluster(context=context, select_context=select)
        ListingPipeline(run_config, style=RichStyle(), emit=console.line).execute(cluster)
    except ConfigError as e:
        raise click.BadParameter(str(e), param_hint="'--context'") from None
    except ClusterConnectionError as e:
        console.error(f"Cluster connection failed: {escape(str(e))}")
        sys.exit(1)
    except DataContractError as e:
        console.error(f"Unexpected secret data: {escape(str(e))}")
        sys.exit(1)


if __name__ == "__main__":
    cli()
