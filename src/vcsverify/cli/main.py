"""vcsverify CLI -- Signature verification for source-controlled dependencies.

Entry point for the ``vcsverify`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    check    -- Verify every installed package of a project.
    inspect  -- Show the signature checks of a single checkout.

Usage::

    vcsverify check                       # Project in the current directory
    vcsverify check ./my-project --policy all
    vcsverify check deps.yaml --format json
    vcsverify inspect vendor/acme/http-client
"""

from __future__ import annotations

import logging

import click

from vcsverify import __version__
from vcsverify.cli.check import check_command
from vcsverify.cli.inspect_cmd import inspect_command


@click.group()
@click.version_option(version=__version__)
@click.option(
    "-v", "--verbose", count=True,
    help="Log progress to stderr (-v for info, -vv for every git command).",
)
def cli(verbose: int) -> None:
    """vcsverify: Signature verification for source-controlled dependencies.

    Checks that every installed package is a git checkout whose HEAD
    commit, or a tag pointing at it, carries a valid GPG signature.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG if verbose > 1 else logging.INFO,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Register all subcommands
cli.add_command(check_command)
cli.add_command(inspect_command)
