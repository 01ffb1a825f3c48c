#!/usr/bin/env python
"""Command-line interface for ksops-dry-run.

Kustomize invokes the plugin with the generator config file as an argument
and describes the invocation through environment variables. Arguments are
never interpreted here; they are forwarded untouched to the original ksops
plugin in pass-through mode and ignored in dry-run mode.
"""

import os
import sys

import click
from icecream import ic

from ksops_dry_run import console
from ksops_dry_run.delegate import exec_plugin
from ksops_dry_run.dry_run import render
from ksops_dry_run.environment import PluginEnvironment
from ksops_dry_run.exceptions import KsopsDryRunError


@click.command(
    help="Kustomize ksops plugin that renders secrets with placeholder values when KSOPS_DRY_RUN is set",
    context_settings={
        "ignore_unknown_options": True,
        "allow_extra_args": True,
        "help_option_names": [],
    },
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def cli(args: tuple[str, ...]) -> None:
    """Run the original ksops plugin, or render stubbed secrets.

    If the KSOPS_DRY_RUN environment variable exists, regardless of its
    value, act as a kustomize generator that emits placeholder secrets.
    Otherwise exec the plugin at KSOPS_PATH.

    Args:
        args: Arguments passed by kustomize.

    """
    environment = PluginEnvironment.from_environ(os.environ)
    if environment.debug:
        ic.enable()
    else:
        ic.disable()
    ic(environment.dry_run, args)

    try:
        if not environment.dry_run:
            exec_plugin(environment.require_ksops_path(), sys.argv, os.environ)
            return

        render(environment, sys.stdout)
    except KsopsDryRunError as e:
        console.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    cli()
